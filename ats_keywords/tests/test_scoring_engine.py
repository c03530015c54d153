"""
Unit tests for the deterministic score composer.
"""

import logging
import math
import unittest

from ats_keywords.config import ASSESSMENT_FALLBACK, SCORE_WEIGHTS
from ats_keywords.keyword_matcher import round_half_up
from ats_keywords.models import (
    ActualKeywordDensity,
    ExperienceEntry,
    ExtractedKeywords,
    MatchDetail,
    MatchResult,
    MatchType,
    ResumeData,
    ScoreBreakdown,
    SkillCategory,
)
from ats_keywords.scoring_engine import (
    calculate_ats_score,
    calculate_content_quality_score,
    calculate_experience_score,
    calculate_keyword_score,
    calculate_skills_score,
    compute_capped_score,
    compute_possible_max_score,
    extract_team_size_from_jd,
    extract_team_size_from_resume,
    extract_years_from_jd,
    format_score_assessment,
    resume_data_to_text,
    sanitize_breakdown,
    sanitize_score_value,
)

# Configure logging for tests
logging.basicConfig(level=logging.INFO)


SAMPLE_JOB_DESCRIPTION = """Job Title: Senior Platform Engineer

Required:
- 5+ years of experience
- Kubernetes, Docker, Python

Responsibilities:
- Lead a team of 6 engineers
- Automate deployments with Terraform

Nice to Have:
- Rust
"""

SAMPLE_RESUME = """Jordan Lee
Senior Platform Engineer

Built and scaled Kubernetes clusters running Docker workloads.
Automated deployments with Terraform and Python tooling.
Led a team of 8 engineers through a cloud migration.
"""

SAMPLE_RESUME_DATA = ResumeData(
    name="Jordan Lee",
    title="Senior Platform Engineer",
    years_experience=7,
    skills_by_category=[
        SkillCategory(category="Infrastructure", items=["Kubernetes", "Docker", "Terraform"]),
        SkillCategory(category="Languages", items=["Python", "Go"]),
    ],
    experiences=[
        ExperienceEntry(
            title="Platform Engineer",
            company="Acme",
            highlights=["Led a team of 8 engineers through a cloud migration"],
        )
    ],
)


def _exact(keyword):
    return MatchDetail(keyword=keyword, match_type=MatchType.EXACT)


class TestScoringComponents(unittest.TestCase):
    """Test individual scoring components."""

    def test_keyword_score_by_tier(self):
        result = MatchResult(
            matched=["python", "docker", "managing"],
            match_details=[
                _exact("python"),
                _exact("docker"),
                MatchDetail(keyword="managing", match_type=MatchType.STEM, matched_as="manag"),
            ],
        )
        self.assertEqual(calculate_keyword_score(result, 1000), 5.5)

    def test_keyword_score_density_penalty(self):
        result = MatchResult(
            matched=["python", "docker", "sql"],
            match_details=[_exact("python"), _exact("docker"), _exact("sql")],
        )
        # 3 unique matches in 50 words is 6% density
        self.assertEqual(calculate_keyword_score(result, 50), 1.0)

    def test_keyword_score_capped(self):
        keywords = [f"skill{i}" for i in range(25)]
        result = MatchResult(matched=keywords, match_details=[_exact(k) for k in keywords])
        self.assertEqual(calculate_keyword_score(result, 10000), SCORE_WEIGHTS["keyword_relevance"])

    def test_skills_score_flat_list(self):
        extracted = ExtractedKeywords(all=["python", "docker", "kafka"], technologies=["python", "docker"])
        resume = ResumeData(skills=["Python", "Kafka"])
        self.assertEqual(calculate_skills_score(extracted, resume), 13.8)

    def test_skills_score_categorized(self):
        extracted = ExtractedKeywords(all=["python", "docker", "kafka"], technologies=["python", "docker"])
        resume = ResumeData(skills_by_category=[
            SkillCategory(category="Languages", items=["Python", "Docker"]),
        ])
        self.assertEqual(calculate_skills_score(extracted, resume), 23.3)

    def test_skills_score_no_skills(self):
        extracted = ExtractedKeywords(all=["python"], technologies=["python"])
        self.assertEqual(calculate_skills_score(extracted, ResumeData()), 0.0)

    def test_experience_score_years(self):
        jd = "Requires 8+ years of experience"
        extracted = ExtractedKeywords()
        self.assertEqual(calculate_experience_score(jd, ResumeData(years_experience=9), extracted), 8.0)
        self.assertEqual(calculate_experience_score(jd, ResumeData(years_experience=6), extracted), 5.0)
        self.assertEqual(calculate_experience_score(jd, ResumeData(years_experience=3), extracted), 2.0)
        self.assertEqual(calculate_experience_score(jd, ResumeData(years_experience=1), extracted), 0.0)

    def test_experience_score_team_size(self):
        jd = "You will manage 10 engineers"
        resume = ResumeData(team_size="7 engineers")
        self.assertEqual(calculate_experience_score(jd, resume, ExtractedKeywords()), 4.0)

    def test_experience_score_title(self):
        extracted = ExtractedKeywords(from_title=["senior", "platform", "engineer"])
        resume = ResumeData(title="Senior Platform Engineer")
        self.assertEqual(calculate_experience_score("", resume, extracted), 6.0)

    def test_content_quality_score(self):
        resume = "Led migrations. Built services. Scaled clusters."
        self.assertEqual(calculate_content_quality_score(resume, ActualKeywordDensity()), 11.0)
        stuffed = ActualKeywordDensity(stuffed_keywords=["python", "sql"])
        self.assertEqual(calculate_content_quality_score(resume, stuffed), 7.0)

    def test_content_quality_verbs_capped(self):
        resume = (
            "led built scaled automated migrated deployed designed launched "
            "improved reduced"
        )
        self.assertEqual(
            calculate_content_quality_score(resume, ActualKeywordDensity()),
            SCORE_WEIGHTS["content_quality"],
        )


class TestPatternExtraction(unittest.TestCase):

    def test_years_patterns(self):
        self.assertEqual(extract_years_from_jd("5+ years of experience with Go"), 5)
        self.assertEqual(extract_years_from_jd("3-5 years building APIs"), 3)
        self.assertEqual(extract_years_from_jd("Minimum of 4 years in a similar role"), 4)
        self.assertIsNone(extract_years_from_jd("No stated requirement"))

    def test_team_size_patterns(self):
        self.assertEqual(extract_team_size_from_jd("Lead a team of 6 engineers"), 6)
        self.assertIsNone(extract_team_size_from_jd("Individual contributor"))

    def test_team_size_from_resume(self):
        resume = ResumeData(experiences=[ExperienceEntry(highlights=["Led 12 engineers across two sites"])])
        self.assertEqual(extract_team_size_from_resume(resume), 12)
        self.assertEqual(extract_team_size_from_resume(ResumeData(team_size="about 9 people")), 9)
        self.assertIsNone(extract_team_size_from_resume(ResumeData()))


class TestCalculateATSScore(unittest.TestCase):

    def test_empty_job_description(self):
        score = calculate_ats_score("   ", SAMPLE_RESUME)
        self.assertEqual(score.total, 0.0)
        self.assertEqual(score.assessment, ASSESSMENT_FALLBACK)
        self.assertEqual(score.details.extracted_keywords.all, [])

    def test_empty_resume(self):
        score = calculate_ats_score(SAMPLE_JOB_DESCRIPTION, "")
        self.assertEqual(score.total, 0.0)
        self.assertEqual(score.details.matched_keywords, [])
        self.assertEqual(score.details.missing_keywords, score.details.extracted_keywords.all)
        self.assertTrue(score.details.missing_keywords)

    def test_sample_score(self):
        score = calculate_ats_score(SAMPLE_JOB_DESCRIPTION, SAMPLE_RESUME, SAMPLE_RESUME_DATA)
        breakdown = score.breakdown

        self.assertGreater(score.total, 0)
        self.assertLessEqual(score.total, 100)
        for name, maximum in SCORE_WEIGHTS.items():
            self.assertGreaterEqual(getattr(breakdown, name), 0)
            self.assertLessEqual(getattr(breakdown, name), maximum)

        expected = min(100.0, round_half_up(
            breakdown.keyword_relevance + breakdown.skills_quality
            + breakdown.experience_alignment + breakdown.content_quality,
            1,
        ))
        self.assertEqual(score.total, expected)
        self.assertEqual(score.assessment, format_score_assessment(score.total))
        self.assertIn("kubernetes", score.details.matched_keywords)
        self.assertIn("rust", score.details.missing_keywords)

    def test_deterministic(self):
        first = calculate_ats_score(SAMPLE_JOB_DESCRIPTION, SAMPLE_RESUME, SAMPLE_RESUME_DATA)
        second = calculate_ats_score(SAMPLE_JOB_DESCRIPTION, SAMPLE_RESUME, SAMPLE_RESUME_DATA)
        self.assertEqual(first, second)


class TestScoreHelpers(unittest.TestCase):

    def test_assessment_bands(self):
        self.assertTrue(format_score_assessment(90).startswith("Excellent"))
        self.assertTrue(format_score_assessment(70).startswith("Good"))
        self.assertTrue(format_score_assessment(55).startswith("Fair"))
        self.assertEqual(format_score_assessment(54.9), ASSESSMENT_FALLBACK)

    def test_sanitize_score_value(self):
        self.assertEqual(sanitize_score_value(math.nan, 0, 100), 0)
        self.assertEqual(sanitize_score_value("abc", 0, 100), 0)
        self.assertEqual(sanitize_score_value(None, 0, 100), 0)
        self.assertEqual(sanitize_score_value(150, 0, 100), 100)
        self.assertEqual(sanitize_score_value("42.5", 0, 100), 42.5)

    def test_sanitize_breakdown(self):
        breakdown = ScoreBreakdown(
            keyword_relevance=55, skills_quality=-3, experience_alignment=12, content_quality=math.inf
        )
        clean = sanitize_breakdown(breakdown)
        self.assertEqual(clean.keyword_relevance, 40)
        self.assertEqual(clean.skills_quality, 0)
        self.assertEqual(clean.experience_alignment, 12)
        self.assertEqual(clean.content_quality, 0)

    def test_capped_scores(self):
        self.assertEqual(compute_capped_score(90, 20), 100)
        self.assertEqual(compute_capped_score(50, 5, ceiling=60), 55)
        self.assertEqual(compute_capped_score(50, -10), 50)
        self.assertEqual(compute_possible_max_score(40, [10, -5, 20]), 70)

    def test_resume_data_to_text(self):
        text = resume_data_to_text(SAMPLE_RESUME_DATA)
        self.assertIn("Senior Platform Engineer", text)
        self.assertIn("Languages: Python, Go", text)
        self.assertIn("Led a team of 8 engineers", text)


if __name__ == "__main__":
    unittest.main()
