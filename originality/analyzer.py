"""
Uniqueness analyzer: compares a submission with the rest of an event's submissions.

The Gemini comparison is tried first when a service is configured. Any failure
there falls back to keyword overlap, and a failure of the keyword comparison
returns a conservative default verdict. `analyze` never raises.
"""

import logging
from typing import Any, Optional, Sequence

from originality.services.similarity_service import SimilarityService
from originality.services.keyword_service import KeywordService
from originality.models.verdict import CompetingEntry, RiskLevel, SimilarityVerdict
from originality.utils.logger import logger as default_logger
from originality.utils.constants import (
    DEGRADED_ANALYSIS_SUGGESTION,
    FAILURE_AUTH,
    FAILURE_FORBIDDEN,
    FAILURE_QUOTA,
    FAILURE_OTHER,
)


def classify_failure(error: BaseException) -> str:
    """Map an AI comparison failure to one of auth, forbidden, quota or other."""
    code = getattr(error, "code", None)
    if code == 401:
        return FAILURE_AUTH
    if code == 403:
        return FAILURE_FORBIDDEN
    if code == 429:
        return FAILURE_QUOTA

    message = str(error).lower()
    if "401" in message or "unauthorized" in message or "unauthenticated" in message:
        return FAILURE_AUTH
    if "403" in message or "forbidden" in message or "permission_denied" in message:
        return FAILURE_FORBIDDEN
    if "quota" in message or "limit" in message or "resource_exhausted" in message:
        return FAILURE_QUOTA
    return FAILURE_OTHER


def default_verdict() -> SimilarityVerdict:
    """Verdict reported when no analysis could be completed."""
    return SimilarityVerdict(
        overallSimilarity=0,
        uniquenessScore=100,
        similarConcepts=[],
        riskLevel=RiskLevel.LOW,
        suggestions=[DEGRADED_ANALYSIS_SUGGESTION],
    )


class UniquenessAnalyzer:
    """Produces a similarity verdict for a candidate submission."""

    def __init__(
        self,
        ai_service: Optional[SimilarityService] = None,
        keyword_service: Optional[KeywordService] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the analyzer.

        Args:
            ai_service: Semantic comparison to try first; None skips it
            keyword_service: Fallback keyword comparison
            logger: Logger receiving diagnostics (defaults to the package logger)
        """
        self.ai_service = ai_service
        self.logger = logger or default_logger
        self.keyword_service = keyword_service or KeywordService(logger=self.logger)

    def analyze(self, candidate_text: str, corpus: Sequence[Any]) -> SimilarityVerdict:
        """
        Analyze how unique the candidate is among the competing submissions.

        Args:
            candidate_text: Description of the new submission
            corpus: Competing entries, as CompetingEntry instances, mappings
                or objects with title/description/teamName attributes

        Returns:
            A similarity verdict; never raises
        """
        try:
            self.logger.info(
                f"Starting uniqueness analysis ({len(candidate_text)} chars, {len(corpus)} submissions)"
            )
            entries = [CompetingEntry.model_validate(entry) for entry in corpus]

            if self.ai_service is None:
                self.logger.info("No AI service configured, using keyword analysis")
            else:
                try:
                    verdict = self.ai_service.compare(candidate_text, entries)
                    self.logger.info(f"AI analysis succeeded with risk level {verdict.riskLevel.value}")
                    return verdict
                except Exception as e:
                    category = classify_failure(e)
                    self.logger.warning(
                        f"AI analysis failed ({category}), falling back to keyword analysis: {e}",
                        extra={"category": category, "detail": str(e)},
                    )

            verdict = self.keyword_service.compare(candidate_text, entries)
            self.logger.info(f"Keyword analysis result: {verdict.overallSimilarity}% similar")
            return verdict
        except Exception as e:
            self.logger.error(f"Uniqueness analysis failed: {e}")
            return default_verdict()
