"""Chooses the most trustworthy apply URL for a job.

The model's own ``applyLink`` cannot be trusted on its face: only the pages
the search tool actually retrieved (the grounding evidence) prove that a
listing exists. Resolution therefore walks an ordered list of strategies,
strongest first:

1. the claimed link, when it is one of the retrieved URLs;
2. the retrieved page that best matches the job's title and company, when
   its score reaches the configured threshold;
3. a web search URL for the job, marked as not direct.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence
from urllib.parse import quote

from jobmatch.config import DEFAULT_LINK_SCORING, FALLBACK_SEARCH_URL, LinkScoringConfig
from jobmatch.types.jobs import GroundingEvidence, RawJobRecord, ResolvedLink

logger = logging.getLogger(__name__)

LinkStrategy = Callable[[RawJobRecord, Sequence[GroundingEvidence], LinkScoringConfig], Optional[ResolvedLink]]


def _text(value: object) -> str:
    return value.strip() if isinstance(value, str) else ""


def score_evidence(
    evidence: GroundingEvidence,
    job_title: str,
    company: str,
    config: LinkScoringConfig = DEFAULT_LINK_SCORING,
) -> int:
    """Score how likely ``evidence`` is the listing for the given job."""
    page_title = evidence.title.lower()
    uri = evidence.uri.lower()
    score = 0

    if config.linkedin_jobs_fragment in uri:
        score += config.linkedin_jobs_bonus
    if any(fragment in uri for fragment in config.ats_fragments):
        score += config.ats_bonus
    if company and company.lower() in page_title:
        score += config.company_bonus
    for word in job_title.lower().split():
        if len(word) >= config.min_title_word_length and word in page_title:
            score += config.title_word_bonus
    return score


def best_evidence(
    evidence: Sequence[GroundingEvidence],
    job_title: str,
    company: str,
    config: LinkScoringConfig = DEFAULT_LINK_SCORING,
) -> Optional[GroundingEvidence]:
    """Highest-scoring entry at or above the threshold; ties keep the earliest."""
    if not job_title or not company:
        return None

    best: Optional[GroundingEvidence] = None
    best_score = 0
    for entry in evidence:
        if not entry.title or not entry.uri:
            continue
        score = score_evidence(entry, job_title, company, config)
        if score > best_score:
            best, best_score = entry, score

    if best is not None and best_score >= config.threshold:
        return best
    return None


def verified_claimed_link(
    job: RawJobRecord,
    evidence: Sequence[GroundingEvidence],
    config: LinkScoringConfig = DEFAULT_LINK_SCORING,
) -> Optional[ResolvedLink]:
    claimed = job.get("applyLink")
    if not isinstance(claimed, str) or not claimed.startswith("http"):
        return None
    if any(entry.uri == claimed for entry in evidence):
        return ResolvedLink(claimed, True)
    return None


def matched_evidence_link(
    job: RawJobRecord,
    evidence: Sequence[GroundingEvidence],
    config: LinkScoringConfig = DEFAULT_LINK_SCORING,
) -> Optional[ResolvedLink]:
    match = best_evidence(evidence, _text(job.get("title")), _text(job.get("company")), config)
    if match is None:
        return None
    return ResolvedLink(match.uri, True)


def fallback_search_link(job: RawJobRecord) -> ResolvedLink:
    terms = [_text(job.get("title")), _text(job.get("company")), "careers apply"]
    query = " ".join(term for term in terms if term)
    return ResolvedLink("%s?q=%s" % (FALLBACK_SEARCH_URL, quote(query, safe="!~*'()")), False)


STRATEGIES: List[LinkStrategy] = [verified_claimed_link, matched_evidence_link]


def resolve_link(
    job: RawJobRecord,
    evidence: Sequence[GroundingEvidence],
    config: LinkScoringConfig = DEFAULT_LINK_SCORING,
    strategies: Sequence[LinkStrategy] = STRATEGIES,
) -> ResolvedLink:
    for strategy in strategies:
        resolved = strategy(job, evidence, config)
        if resolved is not None:
            logger.debug("Resolved %r via %s", job.get("title"), strategy.__name__)
            return resolved
    return fallback_search_link(job)
