"""
Factory for creating service instances and the analyzer.
"""

from originality.analyzer import UniquenessAnalyzer
from originality.services.gemini_service import GeminiService
from originality.services.keyword_service import KeywordService
from originality.utils.config import config
from originality.utils.logger import logger as default_logger

def create_analyzer(use_ai: bool = True, settings=config, logger=None) -> UniquenessAnalyzer:
    """
    Factory to create the analyzer from configuration.

    Args:
        use_ai: Whether to try the Gemini comparison before keyword analysis
        settings: Configuration to read credentials and model from
        logger: Logger shared by the analyzer and its services

    Returns:
        UniquenessAnalyzer instance
    """
    logger = logger or default_logger

    ai_service = None
    if use_ai and settings.google_ai_api_key:
        ai_service = GeminiService(
            settings.google_ai_api_key,
            settings.google_ai_model,
            timeout_seconds=settings.ai_timeout_seconds,
            logger=logger,
        )
    elif use_ai:
        logger.info("GOOGLE_AI_API_KEY not set, analyzer will use keyword analysis only")

    return UniquenessAnalyzer(
        ai_service=ai_service,
        keyword_service=KeywordService(logger=logger),
        logger=logger,
    )
