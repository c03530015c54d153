"""
Keyword Extraction

Deterministic pipeline that turns a job description into a prioritised,
deduplicated keyword list. Stages run from most to least important, and the
first stage to claim a keyword fixes its priority for good.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional

from .config import DEFAULT_KEYWORD_COUNT, DYNAMIC_KEYWORD_COUNT, MIN_SINGLE_WORD_LENGTH
from .models import ExtractedKeywords, KeywordPriority, SectionType
from .reference_data import ReferenceData, get_reference_data
from .sections import parse_jd_sections
from .title import extract_job_title
from .tokenizer import tokenize, tokenize_with_phrases

logger = logging.getLogger(__name__)

# Category tags a keyword can carry; one keyword may carry several.
TITLE = "title"
REQUIRED = "required"
NICE_TO_HAVE = "nice_to_have"
TECHNOLOGY = "technology"
ACTION_VERB = "action_verb"

_SECTION_STAGES = (
    (SectionType.REQUIRED, REQUIRED, KeywordPriority.REQUIRED),
    # responsibilities share the required bucket but keep their own priority
    (SectionType.RESPONSIBILITIES, REQUIRED, KeywordPriority.RESPONSIBILITIES),
    (SectionType.NICE_TO_HAVE, NICE_TO_HAVE, KeywordPriority.NICE_TO_HAVE),
)


class _KeywordLedger:
    """Ordered keyword set with first-wins priorities and per-tag buckets."""

    def __init__(self, reference: ReferenceData):
        self.reference = reference
        self.keywords: List[str] = []
        self.priorities: Dict[str, KeywordPriority] = {}
        self.buckets: Dict[str, List[str]] = {
            TITLE: [], REQUIRED: [], NICE_TO_HAVE: [], TECHNOLOGY: [], ACTION_VERB: [],
        }

    def __contains__(self, keyword: str) -> bool:
        return keyword in self.priorities

    def __len__(self) -> int:
        return len(self.keywords)

    def accepts(self, keyword: str) -> bool:
        if keyword in self.reference.stopwords:
            return False
        # phrases are exempt from the length floor
        return " " in keyword or len(keyword) >= MIN_SINGLE_WORD_LENGTH

    def add(self, word: str, priority: KeywordPriority, *tags: str) -> bool:
        keyword = word.lower()
        if not self.accepts(keyword):
            return False
        if keyword not in self.priorities:
            self.keywords.append(keyword)
            self.priorities[keyword] = priority
        for tag in tags:
            bucket = self.buckets[tag]
            if keyword not in bucket:
                bucket.append(keyword)
        return True


def extract_keywords(
    jd: str,
    count: int = DEFAULT_KEYWORD_COUNT,
    reference: Optional[ReferenceData] = None,
) -> ExtractedKeywords:
    """
    Extract up to `count` keywords from a job description.

    Order of stages:
    1. Job title tokens
    2. Required sections
    3. Responsibilities sections
    4. Nice-to-have sections
    5. Technology keywords and action verbs anywhere in the JD
    6. Remaining words/phrases by JD frequency (ties keep first appearance)

    Section stages may push the ledger past `count`; `all` is truncated at the
    end, while priorities and frequencies are reported for every keyword seen.
    """
    reference = reference or get_reference_data()
    ledger = _KeywordLedger(reference)

    all_tokens = tokenize_with_phrases(jd, reference)
    full_frequency = Counter(
        token for token in all_tokens
        if token not in reference.stopwords and len(token) > 1
    )

    sections = parse_jd_sections(jd, reference)

    title = extract_job_title(jd, reference)
    if title:
        for token in tokenize_with_phrases(title, reference):
            ledger.add(token, KeywordPriority.TITLE, TITLE)

    for section_type, bucket, priority in _SECTION_STAGES:
        for section in sections:
            if section.section_type == section_type:
                _process_section(ledger, section.content, bucket, priority)

    for token in all_tokens:
        if token in reference.tech_keywords:
            ledger.add(token, KeywordPriority.GENERAL, TECHNOLOGY)

    for token in all_tokens:
        if token in reference.action_verbs:
            ledger.add(token, KeywordPriority.GENERAL, ACTION_VERB)

    remaining = Counter(
        token for token in all_tokens
        if token not in ledger and ledger.accepts(token)
    )
    # Counter keeps first-encounter order and sorted() is stable
    for token, _ in sorted(remaining.items(), key=lambda item: item[1], reverse=True):
        if len(ledger) >= count:
            break
        ledger.add(token, KeywordPriority.GENERAL)

    keyword_frequency = {keyword: full_frequency.get(keyword, 1) for keyword in ledger.keywords}

    logger.debug(
        f"Extracted {len(ledger)} keywords (title={len(ledger.buckets[TITLE])}, "
        f"required={len(ledger.buckets[REQUIRED])}, "
        f"nice_to_have={len(ledger.buckets[NICE_TO_HAVE])}, "
        f"technologies={len(ledger.buckets[TECHNOLOGY])})"
    )

    return ExtractedKeywords(
        all=ledger.keywords[:max(count, 0)],
        from_title=ledger.buckets[TITLE],
        from_required=ledger.buckets[REQUIRED],
        from_nice_to_have=ledger.buckets[NICE_TO_HAVE],
        technologies=ledger.buckets[TECHNOLOGY],
        action_verbs=ledger.buckets[ACTION_VERB],
        keyword_priorities=dict(ledger.priorities),
        keyword_frequency=keyword_frequency,
    )


def _process_section(
    ledger: _KeywordLedger, content: str, bucket: str, priority: KeywordPriority
) -> None:
    reference = ledger.reference
    for token in tokenize_with_phrases(content, reference):
        if token in reference.tech_keywords:
            ledger.add(token, priority, TECHNOLOGY, bucket)
        elif token not in reference.stopwords:
            ledger.add(token, priority, bucket)


def calculate_dynamic_keyword_count(jd: str, reference: Optional[ReferenceData] = None) -> int:
    """
    Keyword budget that grows with JD length and structure:
    clamp(15 + floor(words / 50) + min(sections, 5), 10, 40).
    """
    reference = reference or get_reference_data()
    words = len(tokenize(jd, reference))
    sections = len(parse_jd_sections(jd, reference))
    count = (
        DYNAMIC_KEYWORD_COUNT["base"]
        + words // DYNAMIC_KEYWORD_COUNT["words_per_slot"]
        + min(sections, DYNAMIC_KEYWORD_COUNT["max_section_bonus"])
    )
    return max(DYNAMIC_KEYWORD_COUNT["min"], min(DYNAMIC_KEYWORD_COUNT["max"], count))
