"""
Deterministic ATS Keyword Engine

Scores how well a resume matches a job description without any model or
network call:
1. Section-aware, priority-weighted keyword extraction from the JD
2. Three-tier matching against the resume (exact -> stem -> synonym)
3. Keyword density and stuffing analysis
4. A weighted 0-100 score composed from the above

Usage:
    from ats_keywords import analyze_keywords, match_job_resume

    analysis = analyze_keywords(job_description, resume_text)
    print(f"Matched: {analysis.match_rate}%")

    score = match_job_resume(job_description, resume_text)
    print(f"Score: {score.total}")
"""

from .density import calculate_actual_keyword_density, calculate_keyword_density
from .errors import ATSKeywordsError, InvalidInputError
from .extractor import calculate_dynamic_keyword_count, extract_keywords
from .keyword_matcher import calculate_match_rate, match_keywords
from .matcher import analyze_keywords, match_job_resume, match_multiple_jobs
from .models import (
    ActualKeywordDensity,
    ATSScore,
    ExtractedKeywords,
    KeywordAnalysis,
    KeywordPriority,
    MatchDetail,
    MatchResult,
    MatchType,
    ParsedSection,
    ResumeData,
    ScoreBreakdown,
    SectionType,
)
from .reference_data import ReferenceData, build_reference_data, get_reference_data
from .scoring_engine import calculate_ats_score
from .sections import classify_section, parse_jd_sections
from .stemmer import stem_word
from .title import extract_job_title
from .tokenizer import extract_phrases, tokenize, tokenize_with_phrases, word_count

__all__ = [
    "analyze_keywords",
    "match_job_resume",
    "match_multiple_jobs",
    "calculate_ats_score",
    "extract_keywords",
    "calculate_dynamic_keyword_count",
    "match_keywords",
    "calculate_match_rate",
    "calculate_actual_keyword_density",
    "calculate_keyword_density",
    "word_count",
    "tokenize",
    "tokenize_with_phrases",
    "extract_phrases",
    "stem_word",
    "parse_jd_sections",
    "classify_section",
    "extract_job_title",
    "build_reference_data",
    "get_reference_data",
    "ReferenceData",
    "ActualKeywordDensity",
    "ATSScore",
    "ExtractedKeywords",
    "KeywordAnalysis",
    "KeywordPriority",
    "MatchDetail",
    "MatchResult",
    "MatchType",
    "ParsedSection",
    "ResumeData",
    "ScoreBreakdown",
    "SectionType",
    "ATSKeywordsError",
    "InvalidInputError",
]
__version__ = "1.0.0"
