"""
Tokenizer

Word tokenization with protected tech tokens, plus greedy longest-first
extraction of known multi-word phrases.
"""

import re
from typing import List, Optional, Tuple

from .reference_data import ReferenceData, get_reference_data

_SPLIT_PATTERN = re.compile(r"[^a-z0-9-]+")


def tokenize(text: str, reference: Optional[ReferenceData] = None) -> List[str]:
    """
    Lowercase, rewrite symbol-bearing tech names (c++ -> cpp, node.js -> nodejs, ...),
    split on anything that is not a letter, digit or hyphen, drop tokens of
    length <= 1 and trim edge hyphens.
    """
    reference = reference or get_reference_data()
    normalized = text.lower()
    for source, target in reference.tech_token_rewrites:
        normalized = normalized.replace(source, target)

    return [
        word.strip("-")
        for word in _SPLIT_PATTERN.split(normalized)
        if len(word) > 1
    ]


def extract_phrases(
    text: str, reference: Optional[ReferenceData] = None
) -> Tuple[List[str], str]:
    """
    Pull known phrases out of text, longest phrase first.

    Each match retires its character span, so a shorter phrase can never
    match inside a longer one that was already taken, and no span is counted
    twice. Returns the phrases found (one entry per occurrence) and the
    lowercased text with every retired span replaced by spaces.
    """
    reference = reference or get_reference_data()
    lowered = text.lower()
    retired: List[Tuple[int, int]] = []
    phrases: List[str] = []

    for phrase in reference.sorted_phrases:
        start = lowered.find(phrase)
        while start != -1:
            end = start + len(phrase)
            if _overlaps(retired, start, end):
                start = lowered.find(phrase, start + 1)
                continue
            phrases.append(phrase)
            retired.append((start, end))
            start = lowered.find(phrase, end)

    if not retired:
        return phrases, lowered

    pieces = []
    cursor = 0
    for start, end in sorted(retired):
        pieces.append(lowered[cursor:start])
        pieces.append(" " * (end - start))
        cursor = end
    pieces.append(lowered[cursor:])
    return phrases, "".join(pieces)


def _overlaps(spans: List[Tuple[int, int]], start: int, end: int) -> bool:
    return any(start < span_end and span_start < end for span_start, span_end in spans)


def tokenize_with_phrases(text: str, reference: Optional[ReferenceData] = None) -> List[str]:
    """Known phrases first, then the word tokens of whatever text is left."""
    reference = reference or get_reference_data()
    phrases, remainder = extract_phrases(text, reference)
    return phrases + tokenize(remainder, reference)


def word_count(text: str, reference: Optional[ReferenceData] = None) -> int:
    """Count word tokens, used as the denominator for density figures."""
    return len(tokenize(text, reference))
