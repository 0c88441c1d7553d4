"""
Keyword overlap service: the deterministic fallback comparison.
"""

import logging
import math
import re
from typing import List, Optional, Sequence

from originality.services.similarity_service import SimilarityService
from originality.models.verdict import (
    CompetingEntry,
    SimilarityVerdict,
    UniquenessMetrics,
    risk_level_for,
)
from originality.utils.logger import logger as default_logger
from originality.utils.constants import (
    MIN_KEYWORD_LENGTH,
    MAX_SIMILAR_CONCEPTS,
    KEYWORD_SUGGESTIONS,
)

# ASCII so that only [A-Za-z0-9_] counts as a word character
_NON_WORD = re.compile(r"\W+", re.ASCII)


def tokenize(text: str) -> List[str]:
    """Lower-case the text and return its significant words, in order, with repeats."""
    return [word for word in _NON_WORD.split(text.lower()) if len(word) > MIN_KEYWORD_LENGTH]


def extract_keywords(text: str) -> List[str]:
    """Return the distinct significant words of the text in first-seen order."""
    return list(dict.fromkeys(tokenize(text)))


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class KeywordService(SimilarityService):
    """Service comparing submissions by shared significant words."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or default_logger

    def compare(self, candidate_text: str, corpus: Sequence[CompetingEntry]) -> SimilarityVerdict:
        """
        Score the candidate by the fraction of its keywords found anywhere in the corpus.

        Args:
            candidate_text: Description of the new submission
            corpus: Other teams' submissions for the same event

        Returns:
            Similarity verdict built from the keyword overlap
        """
        candidate_keywords = extract_keywords(candidate_text)

        pooled_keywords = set()
        for entry in corpus:
            pooled_keywords.update(tokenize(entry.description))

        common_keywords = [keyword for keyword in candidate_keywords if keyword in pooled_keywords]

        if candidate_keywords:
            similarity = round_half_up(len(common_keywords) / len(candidate_keywords) * 100)
        else:
            similarity = 0

        self.logger.debug(
            f"Keyword overlap: {len(common_keywords)}/{len(candidate_keywords)} "
            f"candidate keywords against {len(pooled_keywords)} pooled keywords"
        )

        return SimilarityVerdict(
            overallSimilarity=similarity,
            uniquenessScore=100 - similarity,
            similarConcepts=common_keywords[:MAX_SIMILAR_CONCEPTS],
            riskLevel=risk_level_for(similarity),
            suggestions=list(KEYWORD_SUGGESTIONS),
        )

    def calculate_uniqueness_metrics(self, submissions: Sequence[CompetingEntry]) -> UniquenessMetrics:
        """
        Measure how much vocabulary an event's submissions share.

        Every significant word of every description is pooled with repeats;
        the average uniqueness is the share of distinct words in that pool.
        """
        if not submissions:
            return UniquenessMetrics(averageUniqueness=100, totalAnalyzed=0)

        all_keywords = []
        for submission in submissions:
            all_keywords.extend(tokenize(submission.description))

        if not all_keywords:
            average = 100.0
        else:
            average = min(100.0, len(set(all_keywords)) / len(all_keywords) * 100)

        return UniquenessMetrics(
            averageUniqueness=round_half_up(average),
            totalAnalyzed=len(submissions),
        )
