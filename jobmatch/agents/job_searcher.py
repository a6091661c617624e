"""Live job search agent backed by Gemini with Google Search grounding."""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from google.genai import Client
from google.genai import types as genai_types

from jobmatch.config import (
    DEFAULT_LINK_SCORING,
    MAX_JOB_RESULTS,
    MAX_POSTING_AGE_DAYS,
    LinkScoringConfig,
    google_api_key,
    model_id,
)
from jobmatch.search.normalizer import normalize_jobs
from jobmatch.search.query_builder import build_query
from jobmatch.search.result_parser import parse_jobs
from jobmatch.types.jobs import GroundingEvidence, JobMatch, SearchCriteria
from jobmatch.types.profile import CandidateProfile

logger = logging.getLogger(__name__)

SEARCH_FAILED_MESSAGE = "Unable to fetch jobs at this time."


class JobSearchError(RuntimeError):
    """Raised when the job search call fails or comes back empty."""


class JobSearchAgent:
    """Searches the web for live postings and ranks them against a candidate."""

    def __init__(self, client: Optional[Any] = None, scoring: LinkScoringConfig = DEFAULT_LINK_SCORING) -> None:
        self._client = client or Client(api_key=google_api_key())
        self._scoring = scoring

    def search_and_match_jobs(
        self,
        criteria: SearchCriteria,
        profile: CandidateProfile,
        generated_at: Optional[int] = None,
    ) -> List[JobMatch]:
        query = build_query(criteria, profile)
        prompt = self._build_prompt(query, criteria, profile)
        text, evidence = self._search(prompt, targeted=criteria.is_targeted)

        jobs = parse_jobs(text)
        matches = normalize_jobs(jobs, evidence, generated_at=generated_at, config=self._scoring)
        logger.info(
            "Job search returned %d matches (%d direct) from %d grounding sources",
            len(matches),
            sum(1 for match in matches if match.is_direct_link),
            len(evidence),
        )
        return matches

    def _build_prompt(self, query: str, criteria: SearchCriteria, profile: CandidateProfile) -> str:
        skills = ", ".join(profile.skills)
        preferred_location = criteria.location or profile.candidate_location or "Any"
        steps = ["Use Google Search to find real, active job postings."]
        if criteria.is_targeted:
            steps.append(
                "Prioritize results from these target companies: %s." % ", ".join(criteria.target_companies)
            )
        steps.extend(
            [
                'FILTER OUT listings that say "Closed" or "Expired", or that are more than '
                f"{MAX_POSTING_AGE_DAYS} days old if the date is visible.",
                f"Select the top {MAX_JOB_RESULTS} most relevant active listings.",
                "Compare each listing against the candidate below.",
            ]
        )
        instructions = "\n".join(f"{number}. {step}" for number, step in enumerate(steps, start=1))

        return f"""You are an expert technical recruiter using Google Search to find LIVE job listings.

SEARCH QUERY: '{query}'

INSTRUCTIONS:
{instructions}

CANDIDATE:
- Summary: {profile.summary or 'Not provided'}
- Skills: {skills or 'Not specified'}
- Preferred Location: {preferred_location}

OUTPUT FORMAT: JSON Array.
For each job:
- title: Job title.
- company: Company name.
- location: Location.
- matchScore: 0-100 based on skill overlap and location fit.
- matchReasoning: Why it fits (mention location match if applicable).
- applyLink: The specific URL found.
- salary: "Not listed" or the value.
- postedDate: "Recently" or the specific date.
- description: One or two sentences about the role.

IMPORTANT:
- Only return jobs found in the search results.
- Do not hallucinate links.
- Return RAW JSON."""

    def _search(self, prompt: str, targeted: bool = False) -> Tuple[str, List[GroundingEvidence]]:
        """Send the prompt with search grounding; return answer text and evidence."""
        config = genai_types.GenerateContentConfig(
            tools=[genai_types.Tool(google_search=genai_types.GoogleSearch())],
        )
        model = model_id()
        logger.info("Sending %s job search to Gemini (%s)", "targeted" if targeted else "broad", model)
        try:
            response = self._client.models.generate_content(
                model=model,
                contents=prompt,
                config=config,
            )
        except Exception as exc:  # noqa: BLE001
            logger.exception("Gemini job search request failed")
            raise JobSearchError(SEARCH_FAILED_MESSAGE) from exc

        if not response.candidates:
            raise JobSearchError(SEARCH_FAILED_MESSAGE)
        candidate = response.candidates[0]
        text = self._candidate_text(candidate)
        if not text.strip():
            logger.error("Gemini returned empty content for job search")
            raise JobSearchError(SEARCH_FAILED_MESSAGE)
        return text, self._grounding_evidence(candidate)

    def _candidate_text(self, candidate: Any) -> str:
        content = getattr(candidate, "content", None)
        if not content or not content.parts:
            return ""
        return "".join(part.text or "" for part in content.parts if not getattr(part, "thought", False))

    def _grounding_evidence(self, candidate: Any) -> List[GroundingEvidence]:
        metadata = getattr(candidate, "grounding_metadata", None)
        chunks = getattr(metadata, "grounding_chunks", None) or []
        evidence: List[GroundingEvidence] = []
        for chunk in chunks:
            web = getattr(chunk, "web", None)
            if web is None:
                continue
            evidence.append(GroundingEvidence(title=web.title or "", uri=web.uri or ""))
        return evidence


def search_and_match_jobs(criteria: SearchCriteria, profile: CandidateProfile) -> List[JobMatch]:
    return JobSearchAgent().search_and_match_jobs(criteria, profile)
