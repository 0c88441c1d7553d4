"""
Tests for the UniquenessAnalyzer.
"""

from types import SimpleNamespace

import pytest
from unittest.mock import MagicMock, patch
from google.genai import errors

from originality.analyzer import UniquenessAnalyzer, classify_failure, default_verdict
from originality.models.verdict import RiskLevel, SimilarityVerdict, risk_level_for
from originality.services.gemini_service import GeminiService
from originality.utils.constants import DEGRADED_ANALYSIS_SUGGESTION
from originality.utils.exceptions import ResponseInvalidError, TransportError


CANDIDATE = "An AI powered sustainability tracker for carbon footprint reduction"


@pytest.fixture
def corpus():
    """Fixture providing competing submissions as plain mappings."""
    return [
        {
            "title": "GreenSteps",
            "description": "Carbon footprint tracker using AI for sustainability insights",
            "teamName": "Team Leaf",
        },
        {
            "title": "FloodWatch",
            "description": "River level alerts from community sensors",
            "teamName": "Team River",
        },
    ]


@pytest.fixture
def ai_verdict():
    """Fixture providing a verdict as the AI service would return it."""
    return SimilarityVerdict(
        overallSimilarity=20,
        uniquenessScore=80,
        similarConcepts=["emissions tracking"],
        riskLevel=RiskLevel.LOW,
        suggestions=["Describe the reduction planner in more detail"],
    )


@pytest.fixture
def mock_logger():
    """Fixture providing a mocked logger collaborator."""
    return MagicMock()


@pytest.fixture
def mock_ai_service():
    """Fixture providing a mocked AI similarity service."""
    return MagicMock()


def keyword_only(candidate, corpus):
    return UniquenessAnalyzer(logger=MagicMock()).analyze(candidate, corpus)


class TestUniquenessAnalyzer:
    """Tests for the analyzer's fallback policy."""

    def test_without_ai_service_uses_keywords(self, corpus, mock_logger):
        analyzer = UniquenessAnalyzer(logger=mock_logger)

        verdict = analyzer.analyze(CANDIDATE, corpus)

        assert verdict.overallSimilarity == 67
        assert verdict.riskLevel == RiskLevel.HIGH
        assert verdict.similarConcepts == ["sustainability", "tracker", "carbon", "footprint"]
        mock_logger.warning.assert_not_called()

    def test_ai_success_is_returned(self, corpus, mock_logger, mock_ai_service, ai_verdict):
        mock_ai_service.compare.return_value = ai_verdict
        keyword_service = MagicMock()
        analyzer = UniquenessAnalyzer(ai_service=mock_ai_service, keyword_service=keyword_service, logger=mock_logger)

        verdict = analyzer.analyze(CANDIDATE, corpus)

        assert verdict == ai_verdict
        keyword_service.compare.assert_not_called()

        # The AI service receives validated entries
        _, entries = mock_ai_service.compare.call_args.args
        assert [e.teamName for e in entries] == ["Team Leaf", "Team River"]

    def test_ai_failure_falls_back_and_logs_category(self, corpus, mock_logger, mock_ai_service):
        mock_ai_service.compare.side_effect = TransportError("Gemini request failed", code=401)
        analyzer = UniquenessAnalyzer(ai_service=mock_ai_service, logger=mock_logger)

        verdict = analyzer.analyze(CANDIDATE, corpus)

        assert verdict == keyword_only(CANDIDATE, corpus)
        mock_ai_service.compare.assert_called_once()
        mock_logger.warning.assert_called_once()
        extra = mock_logger.warning.call_args.kwargs["extra"]
        assert extra["category"] == "auth"
        assert extra["detail"] == "Gemini request failed"

    def test_invalid_ai_response_falls_back(self, corpus, mock_logger, mock_ai_service):
        mock_ai_service.compare.side_effect = ResponseInvalidError("Gemini response is not valid JSON")
        analyzer = UniquenessAnalyzer(ai_service=mock_ai_service, logger=mock_logger)

        verdict = analyzer.analyze(CANDIDATE, corpus)

        assert verdict == keyword_only(CANDIDATE, corpus)
        assert mock_logger.warning.call_args.kwargs["extra"]["category"] == "other"

    def test_malformed_gemini_json_matches_keyword_result(self, corpus, mock_logger):
        """No partial AI data leaks into the fallback verdict."""
        with patch('google.genai.Client') as mock_client:
            response = MagicMock()
            response.text = '{"overallSimilarity": 5, "uniquenessScore": 95, "similarConcepts": ['
            mock_client.return_value.models.generate_content.return_value = response
            gemini = GeminiService(google_api_key="test_google_key", model="gemini-pro")

            verdict = UniquenessAnalyzer(ai_service=gemini, logger=mock_logger).analyze(CANDIDATE, corpus)

        assert verdict == keyword_only(CANDIDATE, corpus)
        assert verdict.overallSimilarity == 67

    def test_entry_missing_description_returns_default(self, mock_logger):
        analyzer = UniquenessAnalyzer(logger=mock_logger)

        verdict = analyzer.analyze(CANDIDATE, [{"title": "Untitled", "teamName": "Team X"}])

        assert verdict == default_verdict()
        assert verdict.suggestions == [DEGRADED_ANALYSIS_SUGGESTION]
        mock_logger.error.assert_called_once()

    def test_entry_with_null_description_returns_default(self, mock_logger, mock_ai_service):
        analyzer = UniquenessAnalyzer(ai_service=mock_ai_service, logger=mock_logger)

        verdict = analyzer.analyze(CANDIDATE, [{"title": "x", "description": None, "teamName": "y"}])

        assert verdict == default_verdict()
        mock_ai_service.compare.assert_not_called()

    def test_keyword_failure_returns_default(self, corpus, mock_logger):
        keyword_service = MagicMock()
        keyword_service.compare.side_effect = RuntimeError("boom")
        analyzer = UniquenessAnalyzer(keyword_service=keyword_service, logger=mock_logger)

        verdict = analyzer.analyze(CANDIDATE, corpus)

        assert verdict.overallSimilarity == 0
        assert verdict.uniquenessScore == 100
        assert verdict.similarConcepts == []
        assert verdict.riskLevel == RiskLevel.LOW
        assert len(verdict.suggestions) == 1

    def test_empty_corpus(self, mock_logger):
        verdict = UniquenessAnalyzer(logger=mock_logger).analyze(CANDIDATE, [])

        assert verdict.overallSimilarity == 0
        assert verdict.uniquenessScore == 100

    def test_short_word_candidate(self, corpus, mock_logger):
        verdict = UniquenessAnalyzer(logger=mock_logger).analyze("a an if to", corpus)

        assert verdict.overallSimilarity == 0
        assert verdict.riskLevel == RiskLevel.LOW

    def test_accepts_objects_with_attributes(self, mock_logger):
        submission = SimpleNamespace()
        submission.title = "GreenSteps"
        submission.description = "Carbon footprint tracker"
        submission.teamName = "Team Leaf"

        verdict = UniquenessAnalyzer(logger=mock_logger).analyze("carbon tracker", [submission])

        assert verdict.overallSimilarity == 100

    @pytest.mark.parametrize("candidate", [
        CANDIDATE,
        "Blockchain voting platform",
        "a an if to",
        "river sensors community alerts carbon",
    ])
    def test_verdict_invariants(self, corpus, candidate):
        verdict = keyword_only(candidate, corpus)

        assert 0 <= verdict.overallSimilarity <= 100
        assert verdict.uniquenessScore == 100 - verdict.overallSimilarity
        assert verdict.riskLevel == risk_level_for(verdict.overallSimilarity)
        assert verdict.suggestions

    @pytest.mark.parametrize("code,status,category", [
        (401, "UNAUTHENTICATED", "auth"),
        (403, "PERMISSION_DENIED", "forbidden"),
        (429, "RESOURCE_EXHAUSTED", "quota"),
    ])
    def test_gemini_api_error_category(self, corpus, mock_logger, code, status, category):
        """The status code of a Google API error decides the logged category."""
        with patch('google.genai.Client') as mock_client:
            mock_client.return_value.models.generate_content.side_effect = errors.ClientError(
                code, {"error": {"code": code, "message": "Request rejected", "status": status}}
            )
            gemini = GeminiService(google_api_key="test_google_key", model="gemini-pro")

            verdict = UniquenessAnalyzer(ai_service=gemini, logger=mock_logger).analyze(CANDIDATE, corpus)

        assert verdict == keyword_only(CANDIDATE, corpus)
        mock_client.return_value.models.generate_content.assert_called_once()
        assert mock_logger.warning.call_args.kwargs["extra"]["category"] == category

    def test_default_keyword_service_shares_logger(self, corpus, mock_logger):
        analyzer = UniquenessAnalyzer(logger=mock_logger)

        analyzer.analyze(CANDIDATE, corpus)

        assert analyzer.keyword_service.logger is mock_logger
        mock_logger.debug.assert_called_once()

    def test_integer_scores_serialize_as_integers(self, corpus, mock_logger):
        verdict = UniquenessAnalyzer(logger=mock_logger).analyze(CANDIDATE, corpus)

        dumped = verdict.model_dump_json()
        assert '"overallSimilarity":67,' in dumped
        assert '"uniquenessScore":33,' in dumped


class TestClassifyFailure:
    """Tests for AI failure categorisation."""

    @pytest.mark.parametrize("error,category", [
        (TransportError("request failed", code=401), "auth"),
        (TransportError("request failed", code=403), "forbidden"),
        (TransportError("request failed", code=429), "quota"),
        (TransportError("request failed", code=500), "other"),
        (Exception("401 Unauthorized"), "auth"),
        (Exception("403 Forbidden"), "forbidden"),
        (Exception("Quota exceeded for requests"), "quota"),
        (Exception("Rate limit reached"), "quota"),
        (TimeoutError("Read timed out"), "other"),
        (ResponseInvalidError("not valid JSON"), "other"),
    ])
    def test_categories(self, error, category):
        assert classify_failure(error) == category


if __name__ == "__main__":
    import sys
    sys.exit(pytest.main(["-v", __file__]))
