"""
Suffix-stripping stemmer.

Not Porter or Snowball: a fixed, ordered suffix list and nothing else, so the
same word always yields the same stem without any dictionary lookup.
"""

# Longest first; the first suffix that fits wins.
SUFFIXES = (
    "ational", "tional", "ization", "ousness", "iveness", "fulness",
    "ation", "ness", "ment", "able", "ible", "ance", "ence", "ings",
    "ing", "ful", "ous", "ive", "ity", "ies", "ion", "ed", "er", "ly", "s",
)

MIN_STEM_LENGTH = 3


def stem_word(word: str) -> str:
    """
    Strip the first matching suffix, provided the word is more than two
    characters longer than the suffix and at least MIN_STEM_LENGTH characters
    remain. Otherwise return the lowercased word unchanged.

    >>> stem_word("Leading")
    'lead'
    >>> stem_word("bus")
    'bus'
    """
    stem = word.lower()
    for suffix in SUFFIXES:
        if len(stem) > len(suffix) + 2 and stem.endswith(suffix):
            stripped = stem[: -len(suffix)]
            if len(stripped) >= MIN_STEM_LENGTH:
                return stripped
    return stem
