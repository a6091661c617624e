"""Configuration helpers for JobMatch."""
from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, Field

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"

# Ensure environment variables load once.
load_dotenv(ENV_PATH)

DEFAULT_MODEL_ID = "gemini-2.5-flash"

MAX_TARGET_COMPANIES = 15
MAX_SUGGESTED_COMPANIES = 30
DEFAULT_TARGET_COMPANY_COUNT = 5
MAX_JOB_RESULTS = 20
MAX_POSTING_AGE_DAYS = 30

FALLBACK_SEARCH_URL = "https://www.google.com/search"

_google_key_override: Optional[str] = None


class ConfigError(RuntimeError):
    """Raised when required configuration is missing."""


class LinkScoringConfig(BaseModel):
    """Weights used to rank grounding evidence against a job posting."""

    linkedin_jobs_bonus: int = 15
    ats_bonus: int = 10
    company_bonus: int = 20
    title_word_bonus: int = 5
    min_title_word_length: int = Field(default=4, ge=1, description="Shorter title words are ignored")
    threshold: int = Field(default=15, description="Minimum score for a direct link")
    linkedin_jobs_fragment: str = "linkedin.com/jobs"
    ats_fragments: Tuple[str, ...] = ("greenhouse.io", "lever.co", "workday")


DEFAULT_LINK_SCORING = LinkScoringConfig()


def set_google_api_key(value: Optional[str]) -> None:
    """Override the Google API key for the current process."""
    global _google_key_override
    normalized = value.strip() if value else None
    _google_key_override = normalized
    if normalized:
        os.environ["GOOGLE_API_KEY"] = normalized
    else:
        os.environ.pop("GOOGLE_API_KEY", None)
    google_api_key.cache_clear()


@lru_cache(maxsize=1)
def google_api_key() -> str:
    if _google_key_override:
        return _google_key_override

    key = os.getenv("GOOGLE_API_KEY")
    if not key:
        raise ConfigError("GOOGLE_API_KEY missing. Define it in .env or set it in the UI")
    return key


def model_id() -> str:
    return os.getenv("JOBMATCH_MODEL") or DEFAULT_MODEL_ID


def configure_logging() -> None:
    level = os.getenv("JOBMATCH_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
