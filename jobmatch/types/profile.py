"""Pydantic models describing the resume-derived candidate profile."""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CandidateProfile(BaseModel):
    """Structured profile extracted from an uploaded resume.

    The analysis service answers with camelCase keys, so every field also
    accepts its camelCase alias.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    summary: str = Field(default="", description="Professional summary, at most three sentences")
    skills: List[str] = Field(default_factory=list, description="Top technical and professional skills")
    suggested_job_title: str = Field(
        default="", alias="suggestedJobTitle", description="Best-fitting role for the candidate"
    )
    candidate_location: str = Field(
        default="",
        alias="candidateLocation",
        description="City and state (or country) from the contact details, 'Remote' when absent",
    )
    past_companies: List[str] = Field(
        default_factory=list, alias="pastCompanies", description="Companies the candidate has worked for"
    )
    suggested_target_companies: List[str] = Field(
        default_factory=list,
        alias="suggestedTargetCompanies",
        description="Other companies (competitors, partners, peers) where the candidate would fit",
    )
