"""
TF-IDF scoring and ranking of document terms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Sequence

from .config import DEFAULT_FALLBACK_IDF


@dataclass(frozen=True)
class Keyword:
    """A scored term."""

    name: str
    tfidf_value: float


def score_keywords(
    tf_map: Mapping[str, float],
    idf: Mapping[str, float],
    fallback_idf: float = DEFAULT_FALLBACK_IDF,
) -> List[Keyword]:
    """
    Score each term as idf * tf.

    Terms missing from the IDF table get ``fallback_idf`` instead, so they rank
    low but still show up. Output follows ``tf_map`` iteration order.
    """
    keywords: List[Keyword] = []
    for word, tf in tf_map.items():
        if word in idf:
            keywords.append(Keyword(word, idf[word] * tf))
        else:
            keywords.append(Keyword(word, fallback_idf * tf))
    return keywords


def rank_keywords(
    keywords: Sequence[Keyword],
    n: int,
    highest_first: bool = True,
) -> List[Keyword]:
    """Sort by score (descending when highest_first) and keep the first n."""
    if n <= 0:
        return []
    # Stable in both directions: equal scores keep document order.
    ranked = sorted(keywords, key=lambda k: k.tfidf_value, reverse=highest_first)
    return ranked[:n]


def analyze_top_n(
    tf_map: Mapping[str, float],
    idf: Mapping[str, float],
    n: int,
    highest_first: bool = True,
    fallback_idf: float = DEFAULT_FALLBACK_IDF,
) -> List[Keyword]:
    """Score every term, then rank and truncate to min(n, len(tf_map)) keywords."""
    return rank_keywords(
        score_keywords(tf_map, idf, fallback_idf=fallback_idf),
        n,
        highest_first=highest_first,
    )
