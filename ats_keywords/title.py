"""
Job title extraction.

Explicit labels ("Job Title: ...") win outright. Otherwise the first few
non-empty lines are scored as title candidates; only lines containing a role
word are considered at all.
"""

import logging
from typing import List, Optional, Tuple

from .config import TITLE_NOT_SENTENCE_MAX_WORDS, TITLE_SCAN_LIMIT, TITLE_SCORES
from .reference_data import (
    BOLD_EDGE_PATTERN,
    HTML_TAG_PATTERN,
    MARKDOWN_HEADING_PATTERN,
    ReferenceData,
    get_reference_data,
)

logger = logging.getLogger(__name__)


def _score_title_line(line: str, cleaned: str, remaining_slots: int) -> float:
    score = 0.0
    if len(cleaned) < 80:
        score += TITLE_SCORES["short_line"]
    if len(cleaned) < 50:
        score += TITLE_SCORES["very_short_line"]
    score += TITLE_SCORES["role_word"]
    if not cleaned.endswith(".") and len(cleaned.split()) <= TITLE_NOT_SENTENCE_MAX_WORDS:
        score += TITLE_SCORES["not_sentence"]
    score += remaining_slots * TITLE_SCORES["position_weight"]
    if MARKDOWN_HEADING_PATTERN.match(line) or line.startswith("**"):
        score += TITLE_SCORES["heading"]
    return score


def extract_job_title(jd: str, reference: Optional[ReferenceData] = None) -> Optional[str]:
    """Return the most likely job title in the JD, or None if nothing qualifies."""
    reference = reference or get_reference_data()

    for pattern in reference.title_label_patterns:
        match = pattern.search(jd)
        if match and match.group(1).strip():
            title = match.group(1).strip()
            logger.debug(f"Title from label: {title!r}")
            return title

    lines = [line.strip() for line in jd.split("\n") if line.strip()]
    scan_limit = min(len(lines), TITLE_SCAN_LIMIT)
    candidates: List[Tuple[str, float]] = []

    for index in range(scan_limit):
        line = lines[index]
        cleaned = MARKDOWN_HEADING_PATTERN.sub("", line, count=1)
        cleaned = BOLD_EDGE_PATTERN.sub("", cleaned)
        cleaned = HTML_TAG_PATTERN.sub("", cleaned).strip()

        if not reference.role_word_pattern.search(cleaned):
            continue

        score = _score_title_line(line, cleaned, scan_limit - index)
        if score >= TITLE_SCORES["min_score"]:
            candidates.append((cleaned, score))

    if not candidates:
        return None

    # stable: equal scores keep the earlier line
    candidates.sort(key=lambda candidate: candidate[1], reverse=True)
    logger.debug(f"Title from line scan: {candidates[0][0]!r} (score {candidates[0][1]})")
    return candidates[0][0]
