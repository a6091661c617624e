"""Pydantic models for job search inputs and outputs."""
from __future__ import annotations

from typing import Any, Dict, List, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

# Job object exactly as the model emitted it; any key may be missing or malformed.
RawJobRecord = Dict[str, Any]


class SearchCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    job_title: str = Field(default="", description="Role to search for")
    company: str = Field(default="", description="Manual company override used by broad search")
    location: str = Field(default="", description="Preferred job location")
    target_companies: List[str] = Field(
        default_factory=list, description="Companies selected for targeted search"
    )
    use_targeted_search: bool = Field(default=False, description="Restrict results to target companies")

    @property
    def is_targeted(self) -> bool:
        return self.use_targeted_search and bool(self.target_companies)


class GroundingEvidence(BaseModel):
    """A web page the search tool actually retrieved."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    uri: str = ""


class ResolvedLink(NamedTuple):
    url: str
    is_direct: bool


class JobMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique within one search call")
    title: str
    company: str
    location: str
    description: str = ""
    match_score: int = Field(ge=0, le=100, description="Fit between 0 and 100")
    match_reasoning: str
    apply_link: str = Field(description="Verified listing URL or a fallback web search URL")
    is_direct_link: bool = Field(description="False when apply_link is a synthetic search URL")
    salary: str
    posted_date: str
