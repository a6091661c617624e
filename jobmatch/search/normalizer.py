"""Turns raw job records into ``JobMatch`` results."""
from __future__ import annotations

import math
import time
from typing import Any, List, Optional, Sequence

from jobmatch.config import DEFAULT_LINK_SCORING, LinkScoringConfig
from jobmatch.search.link_resolver import resolve_link
from jobmatch.types.jobs import GroundingEvidence, JobMatch, RawJobRecord, ResolvedLink

DEFAULT_TITLE = "Unknown Title"
DEFAULT_COMPANY = "Unknown Company"
DEFAULT_LOCATION = "Remote/Unknown"
DEFAULT_REASONING = "Analysis not available."
DEFAULT_SALARY = "Not listed"
DEFAULT_POSTED_DATE = "Recently"


def coerce_match_score(value: Any) -> int:
    """Clamp ``value`` to an integer in 0..100; anything non-numeric is 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, str):
        value = value.strip().rstrip("%")
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return max(0, min(100, int(round(number))))


def _field(job: RawJobRecord, key: str, default: str) -> str:
    value = job.get(key)
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def normalize_job(job: RawJobRecord, link: ResolvedLink, index: int, generated_at: int) -> JobMatch:
    return JobMatch(
        id="job-%d-%d" % (index, generated_at),
        title=_field(job, "title", DEFAULT_TITLE),
        company=_field(job, "company", DEFAULT_COMPANY),
        location=_field(job, "location", DEFAULT_LOCATION),
        description=_field(job, "description", ""),
        match_score=coerce_match_score(job.get("matchScore")),
        match_reasoning=_field(job, "matchReasoning", DEFAULT_REASONING),
        apply_link=link.url,
        is_direct_link=link.is_direct,
        salary=_field(job, "salary", DEFAULT_SALARY),
        posted_date=_field(job, "postedDate", DEFAULT_POSTED_DATE),
    )


def normalize_jobs(
    jobs: Any,
    evidence: Sequence[GroundingEvidence],
    generated_at: Optional[int] = None,
    config: LinkScoringConfig = DEFAULT_LINK_SCORING,
) -> List[JobMatch]:
    """Resolve links and fill defaults, keeping the order the service returned."""
    if not isinstance(jobs, list):
        return []
    if generated_at is None:
        generated_at = int(time.time() * 1000)

    matches: List[JobMatch] = []
    for index, job in enumerate(jobs):
        if not isinstance(job, dict):
            job = {}
        link = resolve_link(job, evidence, config)
        matches.append(normalize_job(job, link, index, generated_at))
    return matches
