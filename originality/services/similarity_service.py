"""
Abstract base class for similarity services used by the analyzer.
This provides a common interface for the AI-backed and keyword comparisons.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from originality.models.verdict import CompetingEntry, SimilarityVerdict

class SimilarityService(ABC):
    """Abstract base class for similarity services."""

    @abstractmethod
    def compare(self, candidate_text: str, corpus: Sequence[CompetingEntry]) -> SimilarityVerdict:
        """
        Compare a candidate description against competing submissions.

        Args:
            candidate_text: Description of the new submission
            corpus: Other teams' submissions for the same event

        Returns:
            Validated similarity verdict
        """
        pass
