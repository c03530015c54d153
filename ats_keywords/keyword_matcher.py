"""
Keyword Matcher

Checks JD keywords against resume text in three tiers: exact, stem,
synonym. The first tier that hits decides the match type.
"""

import logging
import math
import re
from typing import List, Optional, Sequence

from .config import SHORT_KEYWORD_MAX_LENGTH
from .models import MatchDetail, MatchResult, MatchType
from .reference_data import ReferenceData, get_reference_data
from .stemmer import stem_word
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def _is_short_word(term: str) -> bool:
    return len(term) <= SHORT_KEYWORD_MAX_LENGTH and " " not in term


def _contains_bounded(term: str, text: str) -> bool:
    # "go" must not match inside "ego"; accented letters count as boundaries
    return re.search(rf"\b{re.escape(term)}\b", text, re.ASCII) is not None


def _contains_term(term: str, text: str) -> bool:
    """Word-boundary search for short single words, substring search otherwise."""
    if _is_short_word(term):
        return _contains_bounded(term, text)
    return term in text


def synonym_candidates(keyword: str, reference: Optional[ReferenceData] = None) -> List[str]:
    """
    Every form that counts as a synonym of `keyword`, in lookup order:
    its own synonyms when it is a canonical term, then each canonical term
    that lists it, followed by that canonical's other synonyms.
    """
    reference = reference or get_reference_data()
    keyword_lower = keyword.lower()
    candidates = list(reference.skill_synonyms.get(keyword_lower, ()))

    for canonical in reference.synonym_reverse_index.get(keyword_lower, ()):
        candidates.append(canonical)
        candidates.extend(
            synonym for synonym in reference.skill_synonyms.get(canonical, ())
            if synonym != keyword_lower
        )
    return candidates


def match_keywords(
    keywords: Sequence[str],
    resume_text: str,
    reference: Optional[ReferenceData] = None,
) -> MatchResult:
    """
    Split keywords into matched and missing against the resume.

    1. Exact: phrases by substring; words of <= 3 chars by word boundary;
       other words by token membership or substring.
    2. Stem (single words only): keyword stem among the resume token stems.
    3. Synonym: any synonym candidate present, same short-word rule as exact.
    """
    reference = reference or get_reference_data()
    resume_lower = resume_text.lower()
    resume_tokens = set(tokenize(resume_text, reference))
    resume_stems = {stem_word(token) for token in resume_tokens}

    matched: List[str] = []
    missing: List[str] = []
    details: List[MatchDetail] = []

    for keyword in keywords:
        keyword_lower = keyword.lower()
        is_phrase = " " in keyword_lower

        if is_phrase:
            exact = keyword_lower in resume_lower
        elif _is_short_word(keyword_lower):
            exact = _contains_bounded(keyword_lower, resume_lower)
        else:
            exact = keyword_lower in resume_tokens or keyword_lower in resume_lower

        if exact:
            matched.append(keyword)
            details.append(MatchDetail(keyword=keyword, match_type=MatchType.EXACT))
            continue

        if not is_phrase:
            keyword_stem = stem_word(keyword_lower)
            if keyword_stem in resume_stems:
                matched.append(keyword)
                details.append(MatchDetail(
                    keyword=keyword, match_type=MatchType.STEM, matched_as=keyword_stem
                ))
                continue

        synonym_hit = next(
            (
                synonym for synonym in synonym_candidates(keyword_lower, reference)
                if _contains_term(synonym.lower(), resume_lower)
            ),
            None,
        )
        if synonym_hit is not None:
            matched.append(keyword)
            details.append(MatchDetail(
                keyword=keyword, match_type=MatchType.SYNONYM, matched_as=synonym_hit
            ))
        else:
            missing.append(keyword)

    logger.debug(f"Matched {len(matched)}/{len(keywords)} keywords")
    return MatchResult(matched=matched, missing=missing, match_details=details)


def round_half_up(value: float, places: int = 0) -> float:
    """Round .5 away from zero for positive values, unlike built-in round()."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def calculate_match_rate(matched: int, total: int) -> int:
    """Matched share as an integer percentage; 0 when there is nothing to match."""
    if total == 0:
        return 0
    return int(round_half_up(matched / total * 100))
