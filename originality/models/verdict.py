"""
Data models for uniqueness analysis requests and verdicts.
"""

from enum import Enum
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, confloat, conint, model_validator

from originality.utils.constants import (
    HIGH_RISK_THRESHOLD,
    MEDIUM_RISK_THRESHOLD,
    MAX_SIMILAR_CONCEPTS,
)


class RiskLevel(str, Enum):
    """How likely a submission is to overlap conceptually with others."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


# Whole percentages stay ints; fractional ones from Gemini stay floats
Percentage = Union[
    conint(strict=True, ge=0, le=100),
    confloat(strict=True, ge=0, le=100, allow_inf_nan=False),
]


def risk_level_for(overall_similarity: float) -> RiskLevel:
    """Classify an overall similarity percentage into a risk level."""
    if overall_similarity > HIGH_RISK_THRESHOLD:
        return RiskLevel.HIGH
    if overall_similarity > MEDIUM_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


class CompetingEntry(BaseModel):
    """Snapshot of another team's submission text at analysis time."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    title: StrictStr = ""
    description: StrictStr
    teamName: StrictStr = ""


class AnalysisRequest(BaseModel):
    """A candidate description checked against the other submissions of an event."""

    candidateText: str = Field(..., description="Description of the new submission")
    corpus: List[CompetingEntry] = Field(default_factory=list)


class SimilarityVerdict(BaseModel):
    """Result of a uniqueness analysis."""

    overallSimilarity: Percentage = Field(
        ...,
        description="Overall similarity percentage (0-100)",
    )
    uniquenessScore: Percentage = Field(
        ...,
        description="Uniqueness score (100 - similarity)",
    )
    similarConcepts: List[StrictStr] = Field(
        ..., max_length=MAX_SIMILAR_CONCEPTS,
        description="Concepts shared with existing submissions",
    )
    riskLevel: RiskLevel = Field(..., description="Plagiarism risk level")
    suggestions: List[StrictStr] = Field(
        ..., min_length=1,
        description="Suggestions to improve uniqueness",
    )

    @model_validator(mode="after")
    def check_scores_consistent(self) -> "SimilarityVerdict":
        if abs(self.uniquenessScore - (100 - self.overallSimilarity)) > 1e-9:
            raise ValueError("uniquenessScore must equal 100 - overallSimilarity")
        if self.riskLevel != risk_level_for(self.overallSimilarity):
            raise ValueError(
                f"riskLevel {self.riskLevel.value} does not match similarity {self.overallSimilarity}"
            )
        return self


class UniquenessMetrics(BaseModel):
    """Aggregate keyword uniqueness across an event's submissions."""

    averageUniqueness: int
    totalAnalyzed: int
