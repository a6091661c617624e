"""Streamlit UI for JobMatch AI."""
from __future__ import annotations

from typing import List, Optional

import streamlit as st

import jobmatch.config as app_config
from jobmatch.agents.job_searcher import JobSearchAgent, JobSearchError
from jobmatch.agents.resume_analyzer import ResumeAnalysisError, ResumeAnalyzerAgent
from jobmatch.config import MAX_TARGET_COMPANIES, ConfigError
from jobmatch.search.defaults import SearchDefaults, toggle_target_company
from jobmatch.types.jobs import JobMatch, SearchCriteria
from jobmatch.types.profile import CandidateProfile

app_config.configure_logging()

st.set_page_config(page_title="JobMatch AI", layout="wide")
st.title("🧠 JobMatch AI")
st.caption("Upload your resume and let Gemini scout the web for live openings that fit your profile.")

if "google_api_key" in st.session_state:
    app_config.set_google_api_key(st.session_state.get("google_api_key"))

# Sidebar for API Keys
with st.sidebar:
    st.header("⚙️ Configuration")
    with st.form("api_keys_form"):
        google_input = st.text_input(
            "Google API Key",
            value=st.session_state.get("google_api_key", ""),
            type="password",
            help="Used for Gemini API calls.",
        )
        if st.form_submit_button("Apply Key"):
            st.session_state["google_api_key"] = google_input.strip()
            app_config.set_google_api_key(google_input.strip() or None)
            st.success("API key updated!")

    google_ready = True
    try:
        app_config.google_api_key()
    except ConfigError:
        google_ready = False
    st.caption("✅ Google API ready" if google_ready else "⚠️ Google API key missing")

    if st.session_state.get("candidate_profile") and st.button("↩️ Start Over"):
        for key in ["candidate_profile", "search_criteria", "job_matches", "has_searched"]:
            st.session_state.pop(key, None)
        st.session_state.get("search_defaults", SearchDefaults()).reset()
        st.rerun()


# =====================
# SECTION 1: RESUME UPLOAD
# =====================
profile: Optional[CandidateProfile] = st.session_state.get("candidate_profile")

if not profile:
    resume_file = st.file_uploader("Upload your resume", type=["pdf", "png", "jpg", "jpeg"])
    if st.button("🔍 Analyze Resume", disabled=resume_file is None or not google_ready, type="primary"):
        with st.spinner("Analyzing your resume..."):
            try:
                profile = ResumeAnalyzerAgent().analyze(resume_file.getvalue(), resume_file.type)
                st.session_state["candidate_profile"] = profile
                st.session_state.pop("job_matches", None)
                st.session_state.pop("has_searched", None)
                st.rerun()
            except (ConfigError, ResumeAnalysisError) as exc:
                st.error(str(exc))

if not profile:
    st.info("👆 Upload and analyze your resume to get started!")
    st.stop()

with st.container(border=True):
    st.markdown("### 👋 Resume Analyzed")
    st.markdown(profile.summary)
    st.markdown(" ".join(f"`{skill}`" for skill in profile.skills[:8]))
    if profile.past_companies:
        st.caption(f"**Past exp:** {', '.join(profile.past_companies)}")


# =====================
# SECTION 2: SEARCH
# =====================
defaults: SearchDefaults = st.session_state.setdefault("search_defaults", SearchDefaults())
current: SearchCriteria = st.session_state.get("search_criteria", SearchCriteria())
criteria = defaults.apply(profile, current)
if criteria is not current:
    st.session_state["search_criteria"] = criteria
    st.session_state["job_title_input"] = criteria.job_title
    st.session_state["location_input"] = criteria.location
    st.session_state["company_input"] = criteria.company
    st.session_state["strategy_input"] = "Targeted Company Search" if criteria.use_targeted_search else "Broad Search"


def _toggle(company: str) -> None:
    st.session_state["search_criteria"] = toggle_target_company(st.session_state["search_criteria"], company)


st.markdown("## 🔎 Find Your Next Role")
strategy = st.radio("Search Strategy", ["Broad Search", "Targeted Company Search"], key="strategy_input", horizontal=True)
targeted = strategy == "Targeted Company Search"

col1, col2, col3 = st.columns(3)
with col1:
    job_title = st.text_input("Job Title", key="job_title_input")
with col2:
    location = st.text_input("Location (Optional)", key="location_input")
with col3:
    company = st.text_input("Specific Company (Optional)", key="company_input", disabled=targeted)

selected = st.session_state["search_criteria"].target_companies
if targeted and profile.suggested_target_companies:
    st.markdown(f"**Target Companies** ({len(selected)}/{MAX_TARGET_COMPANIES} selected)")
    columns = st.columns(3)
    for index, name in enumerate(profile.suggested_target_companies):
        with columns[index % 3]:
            st.checkbox(
                name,
                value=name in selected,
                key=f"target_{index}",
                on_change=_toggle,
                args=(name,),
                disabled=name not in selected and len(selected) >= MAX_TARGET_COMPANIES,
            )

if st.button("🚀 Find Jobs", type="primary", disabled=not google_ready):
    criteria = st.session_state["search_criteria"].model_copy(
        update={
            "job_title": job_title,
            "location": location,
            "company": "" if targeted else company,
            "use_targeted_search": targeted,
        }
    )
    st.session_state["search_criteria"] = criteria
    with st.spinner("Searching live job listings..."):
        try:
            st.session_state["job_matches"] = JobSearchAgent().search_and_match_jobs(criteria, profile)
        except (ConfigError, JobSearchError) as exc:
            st.session_state["job_matches"] = []
            st.error(f"Something went wrong while fetching jobs. {exc}")
    st.session_state["has_searched"] = True


# =====================
# SECTION 3: RESULTS
# =====================
job_results: List[JobMatch] = st.session_state.get("job_matches", [])

if st.session_state.get("has_searched"):
    st.markdown(f"## 🎯 Top Matches · {len(job_results)} relevant positions found")
    if not job_results:
        st.warning(
            "We couldn't find active listings matching all your criteria. "
            "Try switching to **Broad Search** or selecting different target companies."
        )

    for match in job_results:
        color = "🟢" if match.match_score >= 80 else "🟡" if match.match_score >= 60 else "🔴"
        with st.expander(f"**{match.title}** at {match.company} {color} {match.match_score}%"):
            st.markdown(f"📍 **Location:** {match.location}  ·  🕒 {match.posted_date}")
            if match.salary != "Not listed":
                st.markdown(f"💵 {match.salary}")
            st.markdown(f"**Why it matches:** {match.match_reasoning}")
            if match.description:
                st.info(match.description)
            label = "Apply Now →" if match.is_direct_link else "Search Listing →"
            st.link_button(label, match.apply_link)
