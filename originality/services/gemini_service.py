"""
Gemini service implementation.
Compares a submission against its competitors using Google's Gemini models.
"""

import json
import logging
from typing import Optional, Sequence
from google import genai
from google.genai import errors, types
from pydantic import ValidationError

from originality.services.similarity_service import SimilarityService
from originality.models.verdict import CompetingEntry, SimilarityVerdict
from originality.utils.logger import logger as default_logger
from originality.utils.exceptions import (
    ConfigurationAbsentError,
    ResponseInvalidError,
    TransportError,
)
from originality.utils.constants import (
    GEMINI_TEMPERATURE,
    RESPONSE_MIME_TYPE,
    MAX_SIMILAR_CONCEPTS,
)

PROMPT_TEMPLATE = """Analyze the following project description for uniqueness compared to existing submissions:

Current Project: "{candidate}"

Existing Submissions:
{submissions}

Please provide a JSON object with exactly these fields:
- overallSimilarity: number (0-100)
- uniquenessScore: number (0-100, equal to 100 - overallSimilarity)
- similarConcepts: array of at most {max_concepts} strings (concepts found in multiple submissions)
- riskLevel: "LOW" if overallSimilarity <= 30, "MEDIUM" if <= 60, otherwise "HIGH"
- suggestions: array of strings (how to improve uniqueness), at least one

Focus on conceptual similarity, not just keyword matching."""


def build_prompt(candidate_text: str, corpus: Sequence[CompetingEntry]) -> str:
    """Embed the candidate and an enumerated list of existing submissions into the prompt."""
    submissions = "\n".join(
        f"{i}. {entry.title}: {entry.description}" for i, entry in enumerate(corpus, 1)
    )
    return PROMPT_TEMPLATE.format(
        candidate=candidate_text,
        submissions=submissions or "(none)",
        max_concepts=MAX_SIMILAR_CONCEPTS,
    )


class GeminiService(SimilarityService):
    """Gemini service implementation."""

    def __init__(
        self,
        google_api_key: Optional[str],
        model: str,
        timeout_seconds: float = 30,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the Gemini service.

        Args:
            google_api_key: Google AI API key
            model: Gemini model to use
            timeout_seconds: Upper bound for a single request
            logger: Logger receiving diagnostics (defaults to the package logger)
        """
        if not google_api_key:
            raise ConfigurationAbsentError("Google AI API key is not configured")
        self.model = model
        self.logger = logger or default_logger
        self.timeout_seconds = timeout_seconds
        self.gemini_client = genai.Client(
            api_key=google_api_key,
            http_options=types.HttpOptions(timeout=int(timeout_seconds * 1000)),
        )

    def compare(self, candidate_text: str, corpus: Sequence[CompetingEntry]) -> SimilarityVerdict:
        """
        Ask Gemini for a semantic similarity verdict.
        Makes exactly one request; errors are raised, never retried.

        Args:
            candidate_text: Description of the new submission
            corpus: Other teams' submissions for the same event

        Returns:
            Verdict validated against the SimilarityVerdict schema

        Raises:
            TransportError: The request failed or timed out
            ResponseInvalidError: The reply was not a valid verdict
        """
        prompt = build_prompt(candidate_text, corpus)
        self.logger.info(f"Requesting Gemini similarity analysis against {len(corpus)} submissions")

        config = {
            "temperature": GEMINI_TEMPERATURE,
            "response_mime_type": RESPONSE_MIME_TYPE,
        }

        try:
            response = self.gemini_client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config
            )
        except errors.APIError as e:
            raise TransportError(f"Gemini request failed: {e}", code=e.code) from e
        except Exception as e:
            raise TransportError(f"Gemini request failed: {e}") from e

        return self.parse_response(response.text)

    def parse_response(self, text: Optional[str]) -> SimilarityVerdict:
        """Parse and validate the raw JSON text returned by Gemini."""
        if not text:
            raise ResponseInvalidError("Gemini returned an empty response")

        self.logger.debug(f"Gemini response received: {text[:200]}")

        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as e:
            raise ResponseInvalidError(f"Gemini response is not valid JSON: {e}") from e

        if not isinstance(parsed, dict):
            raise ResponseInvalidError("Gemini response is not a JSON object")

        try:
            return SimilarityVerdict.model_validate(parsed)
        except ValidationError as e:
            raise ResponseInvalidError(f"Gemini response failed validation: {e}") from e
