"""
Deterministic Scoring Engine

Turns keyword extraction, matching and density output into a 0-100 ATS
score. All scoring functions are deterministic - same inputs produce same
outputs. No AI/LLM is used in this module.
"""

import logging
import math
import re
from typing import Iterable, List, Optional, Set

from .config import (
    ASSESSMENT_BANDS, ASSESSMENT_FALLBACK, BREAKDOWN_BOUNDS, CONTENT_QUALITY_SCORES,
    DEFAULT_KEYWORD_COUNT, EXPERIENCE_SCORES, KEYWORD_DENSITY_PENALTY,
    KEYWORD_DENSITY_PENALTY_THRESHOLD, MATCH_POINTS, SCORE_WEIGHTS,
    SENIOR_YEARS_THRESHOLD, SKILLS_SCORES,
)
from .density import calculate_actual_keyword_density, calculate_keyword_density
from .extractor import extract_keywords
from .keyword_matcher import calculate_match_rate, match_keywords, round_half_up
from .models import (
    ActualKeywordDensity, ATSScore, ExtractedKeywords, MatchResult, ResumeData,
    ScoreBreakdown, ScoreDetails,
)
from .reference_data import ReferenceData, get_reference_data
from .stemmer import stem_word
from .tokenizer import tokenize, word_count

logger = logging.getLogger(__name__)

YEARS_PATTERNS = [
    re.compile(r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s+)?(?:experience|exp)", re.IGNORECASE),
    re.compile(r"(\d+)\s*-\s*\d+\s*(?:years?|yrs?)", re.IGNORECASE),
    re.compile(r"minimum\s+(?:of\s+)?(\d+)\s*(?:years?|yrs?)", re.IGNORECASE),
]

JD_TEAM_SIZE_PATTERNS = [
    re.compile(r"(?:team\s+of|manage|lead)\s+(\d+)", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*(?:engineers?|developers?|reports?)", re.IGNORECASE),
    re.compile(r"(\d+)\s*-\s*(\d+)\s*(?:engineers?|developers?)", re.IGNORECASE),
]

RESUME_TEAM_SIZE_PATTERN = re.compile(
    r"(?:team\s+of|scaling\s+to|led|managed)\s+(\d+)\s*(?:engineers?|people|members|reports)",
    re.IGNORECASE,
)

GENERIC_ROLE_PATTERN = re.compile(r"\b(manager|director|lead|senior|staff|principal)\b", re.IGNORECASE)


def calculate_keyword_score(match_result: MatchResult, resume_word_count: int) -> float:
    """
    Calculate keyword relevance score (0-40).

    Formula:
    - exact match 2 pts, stem match 1.5 pts, synonym match 1 pt
    - capped at 40
    - minus 5 when unique-match density exceeds 3% (keyword stuffing)

    Args:
        match_result: Output of match_keywords
        resume_word_count: Word count of the resume

    Returns:
        Score from 0-40, one decimal
    """
    score = sum(MATCH_POINTS[detail.match_type.value] for detail in match_result.match_details)
    score = min(score, SCORE_WEIGHTS["keyword_relevance"])

    density = calculate_keyword_density(len(match_result.matched), resume_word_count)
    if density > KEYWORD_DENSITY_PENALTY_THRESHOLD:
        logger.debug(f"Keyword density {density}% over threshold, applying penalty")
        score = max(0.0, score - KEYWORD_DENSITY_PENALTY)

    score = round_half_up(score, 1)
    logger.info(f"Keyword relevance score: {score:.1f}")
    return score


def _resume_skill_set(resume_data: ResumeData) -> Set[str]:
    skills = {skill.lower() for skill in resume_data.skills}
    for category in resume_data.skills_by_category:
        skills.update(item.lower() for item in category.items)
    return skills


def _skill_present(keyword: str, skills: Set[str]) -> bool:
    keyword = keyword.lower()
    return keyword in skills or any(keyword in skill for skill in skills)


def calculate_skills_score(extracted: ExtractedKeywords, resume_data: ResumeData) -> float:
    """
    Calculate skills quality score (0-25).

    Formula:
    - JD technologies listed in resume skills: (matched / total) * 15
      (10 flat when the JD names no technologies but the resume lists skills)
    - Top 5 JD keywords present in skills: (aligned / top) * 5
    - Skills organisation: 5 if categorised, 3 if a flat list

    Args:
        extracted: Keywords extracted from the JD
        resume_data: Structured resume data

    Returns:
        Score from 0-25, one decimal
    """
    score = 0.0
    resume_skills = _resume_skill_set(resume_data)

    technologies = extracted.technologies
    if technologies:
        tech_matches = sum(1 for tech in technologies if _skill_present(tech, resume_skills))
        coverage = tech_matches / len(technologies) * SKILLS_SCORES["technology_coverage"]
        score += min(SKILLS_SCORES["technology_coverage"], coverage)
        logger.debug(f"Technologies in skills: {tech_matches}/{len(technologies)}")
    elif resume_skills:
        score += SKILLS_SCORES["no_technologies_flat"]

    top_keywords = extracted.all[:SKILLS_SCORES["top_keyword_count"]]
    aligned = sum(1 for keyword in top_keywords if _skill_present(keyword, resume_skills))
    score += aligned / max(len(top_keywords), 1) * SKILLS_SCORES["top_keyword_alignment"]

    if resume_data.skills_by_category:
        score += SKILLS_SCORES["categorized_skills"]
    elif resume_data.skills:
        score += SKILLS_SCORES["flat_skills"]

    score = round_half_up(score, 1)
    logger.info(f"Skills quality score: {score:.1f}")
    return score


def _first_number(patterns: Iterable[re.Pattern], text: str) -> Optional[int]:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return int(match.group(1))
    return None


def extract_years_from_jd(jd: str) -> Optional[int]:
    """Years of experience asked for, e.g. '8+ years', '5-7 years', 'minimum of 3 years'."""
    return _first_number(YEARS_PATTERNS, jd)


def extract_team_size_from_jd(jd: str) -> Optional[int]:
    """Team size mentioned in the JD, e.g. 'team of 6', 'manage 10+ engineers'."""
    return _first_number(JD_TEAM_SIZE_PATTERNS, jd)


def extract_team_size_from_resume(resume_data: ResumeData) -> Optional[int]:
    """Team size from the explicit field, else from experience highlights."""
    if resume_data.team_size:
        match = re.search(r"(\d+)", resume_data.team_size)
        if match:
            return int(match.group(1))

    for experience in resume_data.experiences:
        for highlight in experience.highlights:
            match = RESUME_TEAM_SIZE_PATTERN.search(highlight)
            if match:
                return int(match.group(1))
    return None


def calculate_experience_score(
    jd: str, resume_data: ResumeData, extracted: ExtractedKeywords
) -> float:
    """
    Calculate experience alignment score (0-20).

    Formula:
    - Years: 8 if met, 5 within 2 years, 2 within 5 years
      (5 for 5+ years when the JD states no requirement)
    - Team size: 6 if met, 4 at 70%, 2 at 50% (3 when only the resume mentions a team)
    - Title: share of JD title keywords in the resume title * 6
      (3 for a generic senior role word when the JD has no title)

    Args:
        jd: Job description text
        resume_data: Structured resume data
        extracted: Keywords extracted from the JD

    Returns:
        Score from 0-20, one decimal
    """
    score = 0.0

    jd_years = extract_years_from_jd(jd)
    resume_years = resume_data.years_experience
    if jd_years is not None and resume_years is not None:
        if resume_years >= jd_years:
            score += EXPERIENCE_SCORES["years_meets"]
        elif resume_years >= jd_years - 2:
            score += EXPERIENCE_SCORES["years_within_2"]
        elif resume_years >= jd_years - 5:
            score += EXPERIENCE_SCORES["years_within_5"]
        logger.debug(f"Experience: {resume_years} vs {jd_years} years required")
    elif resume_years is not None and resume_years >= SENIOR_YEARS_THRESHOLD:
        score += EXPERIENCE_SCORES["years_unspecified_senior"]

    jd_team = extract_team_size_from_jd(jd)
    resume_team = extract_team_size_from_resume(resume_data)
    if jd_team is not None and resume_team is not None:
        if resume_team >= jd_team:
            score += EXPERIENCE_SCORES["team_meets"]
        elif resume_team >= jd_team * 0.7:
            score += EXPERIENCE_SCORES["team_70_percent"]
        elif resume_team >= jd_team * 0.5:
            score += EXPERIENCE_SCORES["team_50_percent"]
        logger.debug(f"Team size: {resume_team} vs {jd_team} in JD")
    elif resume_team is not None and resume_team > 0:
        score += EXPERIENCE_SCORES["team_resume_only"]

    resume_title = (resume_data.title or "").lower()
    title_keywords = [keyword.lower() for keyword in extracted.from_title]
    if title_keywords:
        title_matches = sum(
            1 for keyword in title_keywords
            if keyword in resume_title or stem_word(keyword) in stem_word(resume_title)
        )
        score += title_matches / len(title_keywords) * EXPERIENCE_SCORES["title_match"]
    elif GENERIC_ROLE_PATTERN.search(resume_title):
        score += EXPERIENCE_SCORES["title_generic_role"]

    score = round_half_up(score, 1)
    logger.info(f"Experience alignment score: {score:.1f}")
    return score


def calculate_content_quality_score(
    resume_text: str,
    density: ActualKeywordDensity,
    reference: Optional[ReferenceData] = None,
) -> float:
    """
    Calculate content quality score (0-15).

    Formula:
    - 2 pts per distinct action verb in the resume, up to 10
    - 5 pts for no stuffing, minus 2 per stuffed keyword (floored at 0)

    Args:
        resume_text: Full resume text
        density: Output of calculate_actual_keyword_density
        reference: Reference data bundle

    Returns:
        Score from 0-15, one decimal
    """
    reference = reference or get_reference_data()
    verbs_used = {token for token in tokenize(resume_text, reference) if token in reference.action_verbs}
    verb_points = min(
        CONTENT_QUALITY_SCORES["action_verbs_max"],
        len(verbs_used) * CONTENT_QUALITY_SCORES["points_per_action_verb"],
    )
    stuffing_points = max(
        0,
        CONTENT_QUALITY_SCORES["no_stuffing"]
        - len(density.stuffed_keywords) * CONTENT_QUALITY_SCORES["penalty_per_stuffed_keyword"],
    )

    score = round_half_up(float(verb_points + stuffing_points), 1)
    logger.info(f"Content quality score: {score:.1f}")
    return score


def calculate_ats_score(
    job_description: str,
    resume_text: str,
    resume_data: Optional[ResumeData] = None,
    reference: Optional[ReferenceData] = None,
) -> ATSScore:
    """
    Calculate the ATS score for a resume against a job description.

    Args:
        job_description: Job description text
        resume_text: Full resume text used for keyword matching
        resume_data: Structured resume data (optional)
        reference: Reference data bundle

    Returns:
        ATSScore with total, breakdown and matching details
    """
    reference = reference or get_reference_data()
    resume_data = resume_data or ResumeData()

    if not job_description.strip():
        logger.info("Empty job description, nothing to score")
        return ATSScore(assessment=format_score_assessment(0))

    extracted = extract_keywords(job_description, DEFAULT_KEYWORD_COUNT, reference)

    if not resume_text.strip():
        logger.info("Empty resume text, every keyword is missing")
        return ATSScore(
            details=ScoreDetails(missing_keywords=extracted.all, extracted_keywords=extracted),
            assessment=format_score_assessment(0),
        )

    match_result = match_keywords(extracted.all, resume_text, reference)
    density = calculate_actual_keyword_density(resume_text, match_result.matched, reference)
    resume_words = word_count(resume_text, reference)

    breakdown = ScoreBreakdown(
        keyword_relevance=calculate_keyword_score(match_result, resume_words),
        skills_quality=calculate_skills_score(extracted, resume_data),
        experience_alignment=calculate_experience_score(job_description, resume_data, extracted),
        content_quality=calculate_content_quality_score(resume_text, density, reference),
    )
    total = min(100.0, round_half_up(
        breakdown.keyword_relevance + breakdown.skills_quality
        + breakdown.experience_alignment + breakdown.content_quality,
        1,
    ))

    logger.info(f"ATS score: {total:.1f}")

    return ATSScore(
        total=total,
        breakdown=breakdown,
        details=ScoreDetails(
            matched_keywords=match_result.matched,
            missing_keywords=match_result.missing,
            keyword_density=calculate_keyword_density(len(match_result.matched), resume_words),
            match_rate=calculate_match_rate(len(match_result.matched), len(extracted.all)),
            extracted_keywords=extracted,
            match_details=match_result.match_details,
            density=density,
        ),
        assessment=format_score_assessment(total),
    )


def resume_data_to_text(resume_data: ResumeData) -> str:
    """Flatten structured resume data into plain text for keyword matching."""
    parts: List[str] = []
    for value in (resume_data.name, resume_data.title, resume_data.summary):
        if value:
            parts.append(value)

    if resume_data.skills_by_category:
        for category in resume_data.skills_by_category:
            parts.append(f"{category.category}: {', '.join(category.items)}")
    elif resume_data.skills:
        parts.append(f"Skills: {', '.join(resume_data.skills)}")

    for experience in resume_data.experiences:
        if experience.title:
            parts.append(experience.title)
        if experience.company:
            parts.append(experience.company)
        parts.extend(experience.highlights)

    for education in resume_data.education:
        if education.degree:
            parts.append(education.degree)
        if education.institution:
            parts.append(education.institution)

    return "\n".join(parts)


def format_score_assessment(score: float) -> str:
    """One-line verdict for a total score."""
    for threshold, label in ASSESSMENT_BANDS:
        if score >= threshold:
            return label
    return ASSESSMENT_FALLBACK


def sanitize_score_value(value, minimum: float, maximum: float) -> float:
    """Coerce value to a finite number clamped to [minimum, maximum]; garbage becomes minimum."""
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return minimum
    if not math.isfinite(numeric):
        return minimum
    return max(minimum, min(maximum, numeric))


def sanitize_breakdown(breakdown: ScoreBreakdown) -> ScoreBreakdown:
    """Clamp every category of a breakdown to its allowed range."""
    return ScoreBreakdown(**{
        name: sanitize_score_value(getattr(breakdown, name), low, high)
        for name, (low, high) in BREAKDOWN_BOUNDS.items()
    })


def compute_capped_score(current_score: float, delta: float, ceiling: Optional[float] = None) -> float:
    """Add a non-negative delta to a score without passing the ceiling (default 100)."""
    base = sanitize_score_value(current_score, 0, 100)
    increment = sanitize_score_value(delta, 0, 100)
    cap = sanitize_score_value(100 if ceiling is None else ceiling, 0, 100)
    return round_half_up(min(cap, base + increment), 1)


def compute_possible_max_score(
    current_score: float, impact_points: Iterable[float], ceiling: Optional[float] = None
) -> float:
    """Best reachable score if every proposed change lands."""
    total_delta = sum(sanitize_score_value(points, 0, 100) for points in impact_points)
    return compute_capped_score(current_score, total_delta, ceiling)
