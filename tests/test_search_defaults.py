from jobmatch.search.defaults import SearchDefaults, profile_fingerprint, toggle_target_company
from jobmatch.types.jobs import SearchCriteria
from jobmatch.types.profile import CandidateProfile


def _profile(**overrides) -> CandidateProfile:
    data = {
        "summary": "Backend engineer",
        "skills": ["Python", "Go"],
        "suggested_job_title": "Platform Engineer",
        "candidate_location": "Austin, TX",
        "past_companies": ["Initech"],
        "suggested_target_companies": [f"Company{i}" for i in range(8)],
    }
    data.update(overrides)
    return CandidateProfile(**data)


def test_fingerprint_tracks_content():
    assert profile_fingerprint(_profile()) == profile_fingerprint(_profile())
    assert profile_fingerprint(_profile()) != profile_fingerprint(_profile(summary="Frontend engineer"))


def test_first_apply_derives_defaults():
    criteria = SearchDefaults().apply(_profile(), SearchCriteria(company="Hooli"))
    assert criteria.job_title == "Platform Engineer"
    assert criteria.location == "Austin, TX"
    assert criteria.company == ""
    assert criteria.target_companies == [f"Company{i}" for i in range(5)]
    assert criteria.use_targeted_search is True


def test_same_profile_keeps_user_edits():
    defaults = SearchDefaults()
    initial = defaults.apply(_profile(), SearchCriteria())
    edited = initial.model_copy(update={"job_title": "Staff Engineer"})
    assert defaults.apply(_profile(), edited) is edited


def test_changed_profile_reinitializes():
    defaults = SearchDefaults()
    edited = defaults.apply(_profile(), SearchCriteria()).model_copy(update={"job_title": "Staff Engineer"})
    refreshed = defaults.apply(_profile(suggested_job_title="SRE"), edited)
    assert refreshed.job_title == "SRE"


def test_profile_without_suggestions_uses_broad_search():
    criteria = SearchDefaults().apply(
        _profile(suggested_target_companies=[], suggested_job_title=""), SearchCriteria(job_title="Analyst")
    )
    assert criteria.use_targeted_search is False
    assert criteria.target_companies == []
    assert criteria.job_title == "Analyst"


def test_reset_forgets_fingerprint():
    defaults = SearchDefaults()
    defaults.apply(_profile(), SearchCriteria())
    defaults.reset()
    assert defaults.applied_fingerprint is None


def test_toggle_adds_and_removes():
    criteria = SearchCriteria(target_companies=["Acme"])
    added = toggle_target_company(criteria, "Hooli")
    assert added.target_companies == ["Acme", "Hooli"]
    assert criteria.target_companies == ["Acme"]
    assert toggle_target_company(added, "Acme").target_companies == ["Hooli"]


def test_toggle_respects_cap():
    full = SearchCriteria(target_companies=[f"Company{i}" for i in range(15)])
    assert toggle_target_company(full, "Extra") is full
    assert len(toggle_target_company(full, "Company0").target_companies) == 14
