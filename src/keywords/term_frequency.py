"""
Term frequency counting over a segmented document.
"""

from __future__ import annotations

from typing import AbstractSet, Dict, Iterable, Optional


def compute_term_frequencies(
    tokens: Optional[Iterable[str]],
    stopwords: AbstractSet[str],
    min_length: int = 2,
) -> Dict[str, float]:
    """
    Compute normalized term frequencies for one document.

    tf = N(term) / sum(N(k) for all qualifying k)

    Stopwords and tokens shorter than ``min_length`` characters are dropped
    before counting; single characters are dropped even when ``min_length``
    is lower. Returns an empty dict when nothing qualifies; otherwise
    the values sum to 1.0. Keys keep first-occurrence order.
    """
    if not tokens:
        return {}
    min_length = max(min_length, 2)

    counts: Dict[str, int] = {}
    word_sum = 0
    for token in tokens:
        if token in stopwords or len(token) < min_length:
            continue
        counts[token] = counts.get(token, 0) + 1
        word_sum += 1

    if word_sum == 0:
        return {}
    return {term: count / word_sum for term, count in counts.items()}
