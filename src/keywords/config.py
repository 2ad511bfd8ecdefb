"""
Configuration for TF-IDF keyword extraction.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import jieba
from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = ROOT / "data"
STOPWORDS_PATH = DATA_DIR / "stop_words.txt"
USER_IDF_PATH = DATA_DIR / "idf_user.txt"
# jieba ships a general-purpose IDF dictionary alongside its analyse module
JIEBA_IDF_PATH = Path(jieba.__file__).resolve().parent / "analyse" / "idf.txt"

DEFAULT_FALLBACK_IDF = 0.001


def _default_idf_paths() -> List[Path]:
    return [JIEBA_IDF_PATH, USER_IDF_PATH]


@dataclass
class KeywordConfig:
    """Settings for keyword extraction."""

    fallback_idf: float = DEFAULT_FALLBACK_IDF
    min_term_length: int = 2
    top_n: int = 5
    stopwords_path: Path = STOPWORDS_PATH
    idf_paths: List[Path] = field(default_factory=_default_idf_paths)
    user_dict_path: Optional[Path] = None

    def __post_init__(self):
        if self.min_term_length < 2:
            raise ValueError(f"min_term_length must be at least 2, got {self.min_term_length}")
        if self.fallback_idf < 0:
            raise ValueError(f"fallback_idf must be non-negative, got {self.fallback_idf}")

    @classmethod
    def from_env(cls) -> "KeywordConfig":
        """Build config from KEYWORDS_* environment variables (and .env if present)."""
        env_file = ROOT / ".env"
        if env_file.exists():
            load_dotenv(env_file)

        kwargs: dict = {}
        fallback = os.getenv("KEYWORDS_FALLBACK_IDF")
        if fallback:
            kwargs["fallback_idf"] = float(fallback)
        min_len = os.getenv("KEYWORDS_MIN_TERM_LENGTH")
        if min_len:
            kwargs["min_term_length"] = int(min_len)
        top_n = os.getenv("KEYWORDS_TOP_N")
        if top_n:
            kwargs["top_n"] = int(top_n)
        stopwords = os.getenv("KEYWORDS_STOPWORDS_PATH")
        if stopwords:
            kwargs["stopwords_path"] = Path(stopwords)
        idf_paths = os.getenv("KEYWORDS_IDF_PATHS")
        if idf_paths:
            kwargs["idf_paths"] = [Path(p) for p in idf_paths.split(os.pathsep) if p]
        user_dict = os.getenv("KEYWORDS_USER_DICT")
        if user_dict:
            kwargs["user_dict_path"] = Path(user_dict)
        return cls(**kwargs)
