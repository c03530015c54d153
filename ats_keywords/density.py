"""
Keyword density and stuffing detection.
"""

import logging
import math
import re
from typing import List, Optional, Sequence

from .config import STUFFING_THRESHOLD
from .models import ActualKeywordDensity
from .reference_data import ReferenceData
from .tokenizer import word_count

logger = logging.getLogger(__name__)

# word boundary over ASCII word characters only; whitespace stays Unicode-aware
_ASCII_BOUNDARY = r"(?a:\b)"


def _one_decimal_percent(part: float, whole: float) -> float:
    return math.floor(part / whole * 1000 + 0.5) / 10


def count_occurrences(keyword: str, text: str) -> int:
    """
    Non-overlapping, word-boundary-aware occurrences of keyword in text.
    Words of a multi-word keyword may be separated by any run of whitespace.
    """
    words = keyword.lower().split()
    if not words:
        return 0
    pattern = _ASCII_BOUNDARY + r"\s+".join(re.escape(word) for word in words) + _ASCII_BOUNDARY
    return len(re.findall(pattern, text.lower()))


def calculate_keyword_density(matched_count: int, total_words: int) -> float:
    """Unique matched keywords per hundred words, one decimal."""
    if total_words == 0:
        return 0.0
    return _one_decimal_percent(matched_count, total_words)


def calculate_actual_keyword_density(
    resume_text: str,
    matched_keywords: Sequence[str],
    reference: Optional[ReferenceData] = None,
) -> ActualKeywordDensity:
    """
    Count every literal occurrence of the matched keywords in the resume and
    flag the ones repeated STUFFING_THRESHOLD times or more.
    """
    if not resume_text or not matched_keywords:
        return ActualKeywordDensity()

    total_words = word_count(resume_text, reference)
    if total_words == 0:
        return ActualKeywordDensity()

    total_occurrences = 0
    stuffed: List[str] = []
    for keyword in matched_keywords:
        occurrences = count_occurrences(keyword, resume_text)
        total_occurrences += occurrences
        if occurrences >= STUFFING_THRESHOLD:
            stuffed.append(keyword)

    if stuffed:
        logger.debug(f"Possible keyword stuffing: {stuffed}")

    return ActualKeywordDensity(
        overall_density=_one_decimal_percent(total_occurrences, total_words),
        stuffed_keywords=stuffed,
        total_occurrences=total_occurrences,
    )
