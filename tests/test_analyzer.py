"""
Tests for the TF-IDF analyzer facade.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List

import pytest

from src.keywords import JiebaSegmenter, KeywordConfig, KeywordResources, TFIDFAnalyzer


class FakeSegmenter:
    """Returns canned tokens and records calls."""

    def __init__(self, tokens: List[str]):
        self.tokens = tokens
        self.calls: List[str] = []

    def segment(self, text: str) -> Iterable[str]:
        self.calls.append(text)
        return iter(self.tokens)


@pytest.fixture
def resources() -> KeywordResources:
    return KeywordResources(
        stopwords=frozenset({"了", "要"}),
        idf=MappingProxyType({"孩子": 5.0, "幼儿": 8.0, "教育": 6.0}),
    )


@pytest.fixture
def segmenter() -> FakeSegmenter:
    return FakeSegmenter(["孩子", "上", "了", "幼儿", "园", "安全", "防拐", "教育", "要", "做", "好"])


def test_analyze_top_n_highest_first(resources, segmenter):
    analyzer = TFIDFAnalyzer(resources, segmenter=segmenter)
    top = analyzer.analyze_top_n("孩子上了幼儿园 安全防拐教育要做好", top_flag=True, n=2)

    assert [k.name for k in top] == ["幼儿", "教育"]
    assert segmenter.calls == ["孩子上了幼儿园 安全防拐教育要做好"]


def test_analyze_top_n_lowest_first(resources, segmenter):
    analyzer = TFIDFAnalyzer(resources, segmenter=segmenter)
    bottom = analyzer.analyze_top_n("text", top_flag=False, n=2)

    # 安全 and 防拐 tie on the fallback score; document order is kept.
    assert [k.name for k in bottom] == ["安全", "防拐"]
    assert bottom[0].tfidf_value == 0.001 * 0.2


def test_analyze_returns_every_term(resources, segmenter):
    analyzer = TFIDFAnalyzer(resources, segmenter=segmenter)
    keywords = analyzer.analyze("text")
    assert {k.name for k in keywords} == {"孩子", "幼儿", "安全", "防拐", "教育"}


def test_n_defaults_to_config(resources, segmenter):
    analyzer = TFIDFAnalyzer(resources, segmenter=segmenter, config=KeywordConfig(top_n=3))
    assert len(analyzer.analyze_top_n("text")) == 3


@pytest.mark.parametrize("content", [None, ""])
def test_empty_document_skips_segmenter(resources, segmenter, content):
    analyzer = TFIDFAnalyzer(resources, segmenter=segmenter)

    assert analyzer.term_frequencies(content) == {}
    assert analyzer.analyze(content) == []
    assert analyzer.analyze_top_n(content, n=10) == []
    assert segmenter.calls == []


def test_config_fallback_idf_is_used(resources, segmenter):
    analyzer = TFIDFAnalyzer(resources, segmenter=segmenter, config=KeywordConfig(fallback_idf=1.0))
    scores = {k.name: k.tfidf_value for k in analyzer.analyze("text")}
    assert scores["防拐"] == pytest.approx(0.2)


def test_jieba_segmenter_covers_text():
    text = "孩子上了幼儿园 安全防拐教育要做好"
    tokens = list(JiebaSegmenter().segment(text))

    assert tokens
    assert "".join(tokens) == text


def test_jieba_segmenter_loads_dictionary_up_front():
    segmenter = JiebaSegmenter()
    assert segmenter.tokenizer.initialized
    assert segmenter.tokenizer.FREQ
