"""Resume analyzer that turns an uploaded document into a candidate profile."""
from __future__ import annotations

import json
import logging
from typing import Any, Optional

from google.genai import Client
from google.genai import types as genai_types

from jobmatch.config import MAX_SUGGESTED_COMPANIES, google_api_key, model_id
from jobmatch.search.result_parser import strip_markdown_fences
from jobmatch.types.profile import CandidateProfile

logger = logging.getLogger(__name__)

SUPPORTED_MIME_TYPES = ("application/pdf", "image/png", "image/jpeg", "image/webp")

UNSUPPORTED_FILE_MESSAGE = "Please upload a PDF or an Image (PNG, JPG)."
ANALYSIS_FAILED_MESSAGE = "Failed to analyze resume. Please ensure the file is clear and readable."

ANALYSIS_PROMPT = f"""Analyze this resume. Extract the following structured data:
1. 'summary': A professional summary (max 3 sentences).
2. 'skills': Top 10 technical/professional skills.
3. 'suggestedJobTitle': The role that best describes this candidate.
4. 'candidateLocation': The candidate's city and state (or country) from the contact info. If not found, return "Remote".
5. 'pastCompanies': The companies the candidate has worked for.
6. 'suggestedTargetCompanies': Based on the candidate's past companies and industry level, list {MAX_SUGGESTED_COMPANIES} *other* companies (competitors, partners, or peers) where they would be a great fit.

Return the result in JSON format."""


class ResumeAnalysisError(RuntimeError):
    """Raised when a resume cannot be turned into a profile."""


class ResumeAnalyzerAgent:
    """Sends the resume document to Gemini and parses the structured profile."""

    def __init__(self, client: Optional[Any] = None) -> None:
        self._client = client or Client(api_key=google_api_key())

    def analyze(self, file_bytes: bytes, mime_type: str) -> CandidateProfile:
        if mime_type not in SUPPORTED_MIME_TYPES:
            raise ResumeAnalysisError(UNSUPPORTED_FILE_MESSAGE)

        config = genai_types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=CandidateProfile,
        )
        model = model_id()
        logger.info("Sending %s resume (%d bytes) to Gemini (%s)", mime_type, len(file_bytes), model)
        try:
            response = self._client.models.generate_content(
                model=model,
                contents=[
                    genai_types.Content(
                        role="user",
                        parts=[
                            genai_types.Part.from_bytes(data=file_bytes, mime_type=mime_type),
                            genai_types.Part.from_text(text=ANALYSIS_PROMPT),
                        ],
                    )
                ],
                config=config,
            )
        except Exception as exc:  # noqa: BLE001
            logger.exception("Gemini resume analysis request failed")
            raise ResumeAnalysisError(ANALYSIS_FAILED_MESSAGE) from exc

        if not response.candidates or not response.candidates[0].content:
            raise ResumeAnalysisError(ANALYSIS_FAILED_MESSAGE)

        text = "".join(
            part.text or ""
            for part in response.candidates[0].content.parts or []
            if not getattr(part, "thought", False)
        )
        return self._parse_profile(text)

    def _parse_profile(self, payload: str) -> CandidateProfile:
        """Parse JSON response into CandidateProfile."""
        text = strip_markdown_fences(payload)
        try:
            data = json.loads(text)
            profile = CandidateProfile.model_validate(data)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Unparsable resume profile JSON: %s", text[:200])
            raise ResumeAnalysisError(ANALYSIS_FAILED_MESSAGE) from exc

        companies = profile.suggested_target_companies
        if len(companies) > MAX_SUGGESTED_COMPANIES:
            profile = profile.model_copy(
                update={"suggested_target_companies": companies[:MAX_SUGGESTED_COMPANIES]}
            )
        return profile
