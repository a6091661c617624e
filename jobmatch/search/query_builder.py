"""Builds the web search query sent along with the job search prompt."""
from __future__ import annotations

import logging
import re

from jobmatch.config import MAX_TARGET_COMPANIES
from jobmatch.types.jobs import SearchCriteria
from jobmatch.types.profile import CandidateProfile

logger = logging.getLogger(__name__)

BOARD_FILTER = '(site:linkedin.com/jobs OR site:indeed.com OR site:glassdoor.com OR "careers" OR "hiring now")'
TARGETED_SIGNALS = '(site:linkedin.com/jobs OR "careers" OR "apply")'
EXCLUDED_TERMS = '-"closed" -"filled"'
NO_LOCATION_TERM = "current open jobs"

_PUNCTUATION = re.compile(r"[,.]")
_LEGAL_SUFFIX = re.compile(r"\s+(?:inc|corp|llc|ltd|group)\b", re.IGNORECASE)


def clean_company_name(name: str) -> str:
    """Drop punctuation and legal suffixes: ``"Acme, Inc."`` becomes ``"Acme"``."""
    cleaned = _PUNCTUATION.sub("", name)
    cleaned = _LEGAL_SUFFIX.sub("", cleaned)
    return " ".join(cleaned.split())


def _quote(term: str) -> str:
    return '"%s"' % term.replace('"', "").strip()


def build_query(criteria: SearchCriteria, profile: CandidateProfile) -> str:
    if criteria.is_targeted:
        query = _targeted_query(criteria, profile)
    else:
        query = _broad_query(criteria, profile)
    logger.debug("Built %s query: %s", "targeted" if criteria.is_targeted else "broad", query)
    return query


def _targeted_query(criteria: SearchCriteria, profile: CandidateProfile) -> str:
    companies = [clean_company_name(name) for name in criteria.target_companies[:MAX_TARGET_COMPANIES]]
    group = " OR ".join(_quote(name) for name in companies if name)
    if not group:
        return _broad_query(criteria, profile)

    parts = ["(%s)" % group]
    title = criteria.job_title.strip() or profile.suggested_job_title.strip()
    if title:
        parts.append(_quote(title))
    parts.append("jobs")
    if criteria.location.strip():
        parts.append("in %s" % _quote(criteria.location))
    parts.append(TARGETED_SIGNALS)
    parts.append(EXCLUDED_TERMS)
    return " ".join(parts)


def _broad_query(criteria: SearchCriteria, profile: CandidateProfile) -> str:
    parts = [BOARD_FILTER]
    specific = False

    if criteria.job_title.strip():
        parts.append(_quote(criteria.job_title))
        specific = True
    if criteria.company.strip():
        parts.append("at %s" % _quote(criteria.company))
        specific = True
    if criteria.location.strip():
        parts.append("in %s" % _quote(criteria.location))
        specific = True
    else:
        parts.append(NO_LOCATION_TERM)

    # Nothing but generic terms so far: fall back to the resume's best-fit role.
    if not specific and profile.suggested_job_title.strip():
        parts.append(_quote(profile.suggested_job_title))
    return " ".join(parts)
