"""
Main Matcher Module

Orchestrates the keyword engine for one or many job descriptions:
1. Extract prioritised keywords from the JD
2. Match them against the resume (exact -> stem -> synonym)
3. Measure keyword density / stuffing
4. Optionally compose the 0-100 ATS score
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from .density import calculate_actual_keyword_density, calculate_keyword_density
from .errors import InvalidInputError
from .extractor import calculate_dynamic_keyword_count, extract_keywords
from .keyword_matcher import calculate_match_rate, match_keywords
from .models import ATSScore, JobMatch, KeywordAnalysis, ResumeData
from .reference_data import ReferenceData, get_reference_data
from .scoring_engine import calculate_ats_score, format_score_assessment
from .tokenizer import word_count

logger = logging.getLogger(__name__)


def _require_text(value, name: str) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be a string, got {type(value).__name__}")
    return value


def analyze_keywords(
    job_description: str,
    resume_text: str,
    keyword_count: Optional[int] = None,
    reference: Optional[ReferenceData] = None,
) -> KeywordAnalysis:
    """
    Run extraction, matching and density analysis for one JD/resume pair.

    Args:
        job_description: Full job description text
        resume_text: Full resume text
        keyword_count: Keyword budget; derived from the JD when None
        reference: Reference data bundle (defaults to the shared one)

    Returns:
        KeywordAnalysis with extracted keywords, match result and density

    Raises:
        InvalidInputError: If either input is not a string

    Example:
        >>> analysis = analyze_keywords(jd_text, resume_text)
        >>> print(f"Matched {analysis.match_rate}% of keywords")
    """
    _require_text(job_description, "job_description")
    _require_text(resume_text, "resume_text")
    reference = reference or get_reference_data()

    if keyword_count is None:
        keyword_count = calculate_dynamic_keyword_count(job_description, reference)

    extracted = extract_keywords(job_description, keyword_count, reference)
    match_result = match_keywords(extracted.all, resume_text, reference)
    density = calculate_actual_keyword_density(resume_text, match_result.matched, reference)
    resume_words = word_count(resume_text, reference)

    analysis = KeywordAnalysis(
        extracted_keywords=extracted,
        match_result=match_result,
        density=density,
        match_rate=calculate_match_rate(len(match_result.matched), len(extracted.all)),
        keyword_density=calculate_keyword_density(len(match_result.matched), resume_words),
        resume_word_count=resume_words,
    )
    logger.info(
        f"Keyword analysis: {len(match_result.matched)}/{len(extracted.all)} matched "
        f"({analysis.match_rate}%), {len(density.stuffed_keywords)} stuffed"
    )
    return analysis


def match_job_resume(
    job_description: str,
    resume_text: str,
    resume_data: Optional[ResumeData] = None,
    reference: Optional[ReferenceData] = None,
) -> ATSScore:
    """
    Calculate the ATS score between a job and a resume.

    Args:
        job_description: Full job description text
        resume_text: Full resume text
        resume_data: Structured resume facts (title, years, skills, ...)
        reference: Reference data bundle

    Returns:
        ATSScore with total, breakdown and details

    Raises:
        InvalidInputError: If either input is not a string
    """
    _require_text(job_description, "job_description")
    _require_text(resume_text, "resume_text")

    logger.info("=" * 60)
    logger.info("STARTING ATS KEYWORD SCORING")
    logger.info("=" * 60)

    score = calculate_ats_score(job_description, resume_text, resume_data, reference)

    logger.info(f"SCORING COMPLETE - Score: {score.total} ({score.assessment})")
    return score


def match_multiple_jobs(
    job_descriptions: Sequence[str],
    resume_text: str,
    resume_data: Optional[ResumeData] = None,
    max_workers: Optional[int] = None,
) -> List[JobMatch]:
    """
    Score a resume against multiple job descriptions.

    Each JD is scored independently, so the work fans out over a thread
    pool. A JD that fails validation produces a zero-score entry with the
    error message instead of aborting the batch.

    Args:
        job_descriptions: List of job description texts
        resume_text: Resume text
        resume_data: Structured resume facts
        max_workers: Thread pool size (executor default when None)

    Returns:
        List of JobMatch, sorted by total score (highest first, ties by index)

    Example:
        >>> results = match_multiple_jobs([jd1, jd2, jd3], resume_text)
        >>> for result in results:
        >>>     print(f"#{result.job_index}: {result.score.total}")
    """
    _require_text(resume_text, "resume_text")
    logger.info(f"Matching resume against {len(job_descriptions)} jobs")

    reference = get_reference_data()

    def score_one(index: int, job_description: str) -> JobMatch:
        try:
            score = match_job_resume(job_description, resume_text, resume_data, reference)
            return JobMatch(job_index=index, score=score)
        except InvalidInputError as e:
            logger.error(f"Failed to match job {index}: {e}")
            return JobMatch(
                job_index=index,
                score=ATSScore(assessment=format_score_assessment(0)),
                error=str(e),
            )

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(score_one, index, job_description)
            for index, job_description in enumerate(job_descriptions)
        ]
        results = [future.result() for future in futures]

    results.sort(key=lambda result: result.score.total, reverse=True)

    if results:
        logger.info(f"Completed matching {len(results)} jobs, top score {results[0].score.total}")
    return results
