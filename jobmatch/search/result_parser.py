"""Extracts the job array from the model's free-text answer."""
from __future__ import annotations

import json
import logging
import re
from typing import Any, List

from jobmatch.types.jobs import RawJobRecord

logger = logging.getLogger(__name__)

_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)


def strip_markdown_fences(text: str) -> str:
    """Remove markdown code fences if present."""
    return _FENCE.sub("", text).strip()


def parse_jobs(raw_text: str) -> List[RawJobRecord]:
    """Return the job records in ``raw_text``, or an empty list when there are none.

    The answer is first parsed as a whole; failing that, the span from the
    first ``[`` to the last ``]`` is tried. Unusable output is not an error.
    """
    text = strip_markdown_fences(raw_text or "")
    data = _loads(text)
    if data is None:
        start = text.find("[")
        end = text.rfind("]")
        if start != -1 and end > start:
            data = _loads(text[start : end + 1])

    if not isinstance(data, list):
        logger.warning("Job search answer held no JSON array: %s", text[:200])
        return []
    return [job if isinstance(job, dict) else {} for job in data]


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        return None
