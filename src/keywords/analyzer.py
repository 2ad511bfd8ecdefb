"""
TF-IDF keyword analyzer: raw document in, ranked keywords out.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .config import KeywordConfig
from .resources import KeywordResources
from .scorer import Keyword, analyze_top_n, score_keywords
from .segmenter import JiebaSegmenter, Segmenter
from .term_frequency import compute_term_frequencies


class TFIDFAnalyzer:
    """
    Extract keywords from a single document.

    The analyzer holds references to shared, read-only resources and keeps no
    per-call state, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        resources: KeywordResources,
        segmenter: Optional[Segmenter] = None,
        config: Optional[KeywordConfig] = None,
    ):
        self.config = config or KeywordConfig()
        self.resources = resources
        self.segmenter = segmenter or JiebaSegmenter(self.config.user_dict_path)

    def term_frequencies(self, content: Optional[str]) -> Dict[str, float]:
        """Segment the document and count qualifying terms."""
        if not content:
            return {}
        tokens = self.segmenter.segment(content)
        return compute_term_frequencies(
            tokens,
            self.resources.stopwords,
            min_length=self.config.min_term_length,
        )

    def analyze(self, content: Optional[str]) -> List[Keyword]:
        """Score every qualifying term; order is not meaningful."""
        return score_keywords(
            self.term_frequencies(content),
            self.resources.idf,
            fallback_idf=self.config.fallback_idf,
        )

    def analyze_top_n(
        self,
        content: Optional[str],
        top_flag: bool = True,
        n: Optional[int] = None,
    ) -> List[Keyword]:
        """
        Return the n best keywords (highest first when top_flag is set).

        If the document has fewer than n distinct terms, all of them are
        returned. n defaults to ``config.top_n``.
        """
        if n is None:
            n = self.config.top_n
        return analyze_top_n(
            self.term_frequencies(content),
            self.resources.idf,
            n,
            highest_first=top_flag,
            fallback_idf=self.config.fallback_idf,
        )
