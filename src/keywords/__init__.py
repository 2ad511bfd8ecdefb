"""
Keyword extraction module.

Provides TF-IDF keyword extraction for short documents:
- Stopword and IDF dictionary loading
- Term frequency counting
- TF-IDF scoring with a fallback weight for unknown terms
- Ranking and top-N truncation
"""

from .analyzer import TFIDFAnalyzer
from .config import KeywordConfig
from .resources import (
    KeywordResources,
    LoadReport,
    load_idf_table,
    load_resources,
    load_stopwords,
)
from .scorer import Keyword, analyze_top_n, rank_keywords, score_keywords
from .segmenter import JiebaSegmenter, Segmenter
from .term_frequency import compute_term_frequencies

__all__ = [
    "TFIDFAnalyzer",
    "KeywordConfig",
    "KeywordResources",
    "LoadReport",
    "load_idf_table",
    "load_resources",
    "load_stopwords",
    "Keyword",
    "analyze_top_n",
    "rank_keywords",
    "score_keywords",
    "JiebaSegmenter",
    "Segmenter",
    "compute_term_frequencies",
]
