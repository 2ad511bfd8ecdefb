"""
Build the keyword analyzer for the API (used in lifespan).
"""

from __future__ import annotations

import logging

from src.keywords import KeywordConfig, KeywordResources, TFIDFAnalyzer, load_resources

logger = logging.getLogger(__name__)


def build_analyzer() -> tuple[TFIDFAnalyzer | None, KeywordResources | None]:
    """
    Load config and resources, build the analyzer.
    Returns (analyzer, resources); both None when a resource file is missing.
    """
    config = KeywordConfig.from_env()
    try:
        resources = load_resources(config)
    except FileNotFoundError as e:
        # Return None analyzer so routes can return 503
        logger.warning("Keyword resources unavailable: %s", e)
        return None, None
    analyzer = TFIDFAnalyzer(resources, config=config)
    return analyzer, resources
