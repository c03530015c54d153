"""
Result and input models.

Result models are frozen: fields cannot be reassigned once built. Their
list and dict fields are plain collections so callers can compare them
against literals; every engine call builds fresh ones, so a caller that
mutates a result only changes its own copy.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SectionType(str, Enum):
    REQUIRED = "required"
    NICE_TO_HAVE = "niceToHave"
    RESPONSIBILITIES = "responsibilities"
    ABOUT = "about"
    UNKNOWN = "unknown"


class KeywordPriority(str, Enum):
    """JD-derived importance tier, declared from most to least important."""
    TITLE = "title"
    REQUIRED = "required"
    RESPONSIBILITIES = "responsibilities"
    NICE_TO_HAVE = "niceToHave"
    GENERAL = "general"

    @property
    def rank(self) -> int:
        """0 for title, increasing as importance drops."""
        return list(KeywordPriority).index(self)


class MatchType(str, Enum):
    EXACT = "exact"
    STEM = "stem"
    SYNONYM = "synonym"


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class ParsedSection(FrozenModel):
    section_type: SectionType
    header: str = ""
    content: str = ""


class ExtractedKeywords(FrozenModel):
    all: List[str] = Field(default_factory=list)
    from_title: List[str] = Field(default_factory=list)
    from_required: List[str] = Field(default_factory=list)
    from_nice_to_have: List[str] = Field(default_factory=list)
    technologies: List[str] = Field(default_factory=list)
    action_verbs: List[str] = Field(default_factory=list)
    keyword_priorities: Dict[str, KeywordPriority] = Field(default_factory=dict)
    keyword_frequency: Dict[str, int] = Field(default_factory=dict)


class MatchDetail(FrozenModel):
    keyword: str
    match_type: MatchType
    matched_as: Optional[str] = None


class MatchResult(FrozenModel):
    matched: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)
    match_details: List[MatchDetail] = Field(default_factory=list)


class ActualKeywordDensity(FrozenModel):
    overall_density: float = 0.0
    stuffed_keywords: List[str] = Field(default_factory=list)
    total_occurrences: int = 0


class KeywordAnalysis(FrozenModel):
    """Engine output for one (job description, resume) pair."""
    extracted_keywords: ExtractedKeywords
    match_result: MatchResult
    density: ActualKeywordDensity
    match_rate: int = 0
    keyword_density: float = 0.0
    resume_word_count: int = 0


# Score composer ---------------------------------------------------------------

class SkillCategory(BaseModel):
    category: str
    items: List[str] = Field(default_factory=list)


class ExperienceEntry(BaseModel):
    title: Optional[str] = None
    company: Optional[str] = None
    highlights: List[str] = Field(default_factory=list)


class EducationEntry(BaseModel):
    degree: Optional[str] = None
    institution: Optional[str] = None


class ResumeData(BaseModel):
    """Structured resume facts the score composer can use beyond raw text."""
    name: Optional[str] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    years_experience: Optional[float] = None
    skills: List[str] = Field(default_factory=list)
    skills_by_category: List[SkillCategory] = Field(default_factory=list)
    team_size: Optional[str] = None
    experiences: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)


class ScoreBreakdown(FrozenModel):
    keyword_relevance: float = 0.0
    skills_quality: float = 0.0
    experience_alignment: float = 0.0
    content_quality: float = 0.0


class ScoreDetails(FrozenModel):
    matched_keywords: List[str] = Field(default_factory=list)
    missing_keywords: List[str] = Field(default_factory=list)
    keyword_density: float = 0.0
    match_rate: int = 0
    extracted_keywords: ExtractedKeywords = Field(default_factory=ExtractedKeywords)
    match_details: List[MatchDetail] = Field(default_factory=list)
    density: ActualKeywordDensity = Field(default_factory=ActualKeywordDensity)


class ATSScore(FrozenModel):
    total: float = Field(default=0.0, ge=0.0, le=100.0)
    breakdown: ScoreBreakdown = Field(default_factory=ScoreBreakdown)
    details: ScoreDetails = Field(default_factory=ScoreDetails)
    assessment: str = ""


class JobMatch(FrozenModel):
    """One entry of a multi-job run."""
    job_index: int
    score: ATSScore
    error: Optional[str] = None
