"""
Configuration for the ATS keyword engine and score composer.
Adjust weights and thresholds here.
"""

# Keyword extraction
DEFAULT_KEYWORD_COUNT = 20
DYNAMIC_KEYWORD_COUNT = {
    "base": 15,
    "words_per_slot": 50,
    "max_section_bonus": 5,
    "min": 10,
    "max": 40,
}
MIN_SINGLE_WORD_LENGTH = 3  # single words shorter than this are rejected

# Title detection
TITLE_SCAN_LIMIT = 5
TITLE_SCORES = {
    "short_line": 2,        # < 80 chars
    "very_short_line": 1,   # < 50 chars, on top of short_line
    "role_word": 3,
    "not_sentence": 1,
    "position_weight": 0.5,  # per remaining scan slot
    "heading": 1,
    "min_score": 3,
}
TITLE_NOT_SENTENCE_MAX_WORDS = 10

# Section headers
MAX_HEADER_LENGTH = 80

# Matching
SHORT_KEYWORD_MAX_LENGTH = 3  # words this short need word-boundary matching

# Density
STUFFING_THRESHOLD = 5  # literal occurrences at which a keyword counts as stuffed

# Score composer maxima (sum to 100)
SCORE_WEIGHTS = {
    "keyword_relevance": 40,
    "skills_quality": 25,
    "experience_alignment": 20,
    "content_quality": 15,
}

# Points per match tier
MATCH_POINTS = {
    "exact": 2.0,
    "stem": 1.5,
    "synonym": 1.0,
}

# Unique-match density above which the keyword score is penalised
KEYWORD_DENSITY_PENALTY_THRESHOLD = 3.0
KEYWORD_DENSITY_PENALTY = 5.0

# Skills quality breakdown
SKILLS_SCORES = {
    "technology_coverage": 15,
    "no_technologies_flat": 10,
    "top_keyword_alignment": 5,
    "top_keyword_count": 5,
    "categorized_skills": 5,
    "flat_skills": 3,
}

# Experience alignment breakdown
EXPERIENCE_SCORES = {
    "years_meets": 8,
    "years_within_2": 5,
    "years_within_5": 2,
    "years_unspecified_senior": 5,
    "team_meets": 6,
    "team_70_percent": 4,
    "team_50_percent": 2,
    "team_resume_only": 3,
    "title_match": 6,
    "title_generic_role": 3,
}
SENIOR_YEARS_THRESHOLD = 5

# Content quality breakdown
CONTENT_QUALITY_SCORES = {
    "points_per_action_verb": 2,
    "action_verbs_max": 10,
    "no_stuffing": 5,
    "penalty_per_stuffed_keyword": 2,
}

# Assessment bands, highest first
ASSESSMENT_BANDS = [
    (85, "Excellent match - very likely to pass ATS filters"),
    (70, "Good match - should pass most ATS systems"),
    (55, "Fair match - optimization recommended"),
]
ASSESSMENT_FALLBACK = "Weak match - significant gaps identified"

# Clamp bounds used when breakdowns cross a trust boundary
BREAKDOWN_BOUNDS = {
    "keyword_relevance": (0, SCORE_WEIGHTS["keyword_relevance"]),
    "skills_quality": (0, SCORE_WEIGHTS["skills_quality"]),
    "experience_alignment": (0, SCORE_WEIGHTS["experience_alignment"]),
    "content_quality": (0, SCORE_WEIGHTS["content_quality"]),
}
