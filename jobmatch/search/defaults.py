"""Search form defaults derived from the candidate profile."""
from __future__ import annotations

import hashlib
from typing import Optional

from jobmatch.config import DEFAULT_TARGET_COMPANY_COUNT, MAX_TARGET_COMPANIES
from jobmatch.types.jobs import SearchCriteria
from jobmatch.types.profile import CandidateProfile


def profile_fingerprint(profile: CandidateProfile) -> str:
    payload = profile.model_dump_json().encode("utf-8")
    return hashlib.sha256(payload).hexdigest()


class SearchDefaults:
    """Re-derives search defaults only when the profile content changes.

    Edits the user made to the criteria survive repeated ``apply`` calls with
    the same profile.
    """

    def __init__(self) -> None:
        self._applied: Optional[str] = None

    @property
    def applied_fingerprint(self) -> Optional[str]:
        return self._applied

    def apply(self, profile: CandidateProfile, current: SearchCriteria) -> SearchCriteria:
        fingerprint = profile_fingerprint(profile)
        if fingerprint == self._applied:
            return current

        suggested = profile.suggested_target_companies
        self._applied = fingerprint
        return SearchCriteria(
            job_title=profile.suggested_job_title or current.job_title,
            company="",
            location=profile.candidate_location,
            target_companies=list(suggested[:DEFAULT_TARGET_COMPANY_COUNT]),
            use_targeted_search=bool(suggested),
        )

    def reset(self) -> None:
        self._applied = None


def toggle_target_company(criteria: SearchCriteria, company: str) -> SearchCriteria:
    """Select or deselect ``company``; selection stops at the company cap."""
    selected = list(criteria.target_companies)
    if company in selected:
        selected.remove(company)
    elif len(selected) >= MAX_TARGET_COMPANIES:
        return criteria
    else:
        selected.append(company)
    return criteria.model_copy(update={"target_companies": selected})
