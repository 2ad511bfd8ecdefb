"""
Text segmentation backends.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Protocol

import jieba

logger = logging.getLogger(__name__)


class Segmenter(Protocol):
    """Anything that splits a document into candidate terms."""

    def segment(self, text: str) -> Iterable[str]:
        ...


class JiebaSegmenter:
    """Chinese word segmentation via a private jieba tokenizer (precise mode, HMM on)."""

    def __init__(self, user_dict_path: Optional[Path] = None):
        self.tokenizer = jieba.Tokenizer()
        # Load the dictionary now rather than on the first cut.
        self.tokenizer.initialize()
        if user_dict_path is not None:
            logger.info("Loading jieba user dictionary: %s", user_dict_path)
            self.tokenizer.load_userdict(str(user_dict_path))

    def segment(self, text: str) -> Iterable[str]:
        return self.tokenizer.cut(text, cut_all=False, HMM=True)
