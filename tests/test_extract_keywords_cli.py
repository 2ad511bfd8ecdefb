from __future__ import annotations

from pathlib import Path

from scripts.extract_keywords import DEMO_CONTENT, format_keywords, run
from src.keywords import Keyword, KeywordConfig


def test_format_keywords():
    keywords = [Keyword("幼儿园", 1.5), Keyword("教育", 0.25)]
    assert format_keywords(keywords) == "幼儿园:1.5,教育:0.25"


def test_run_demo_sentence(tmp_path: Path):
    stop = tmp_path / "stop.txt"
    stop.write_text("了\n要\n", encoding="utf-8")
    idf = tmp_path / "idf.txt"
    idf.write_text("孩子 5.0\n教育 6.0\n", encoding="utf-8")
    config = KeywordConfig(stopwords_path=stop, idf_paths=[idf])

    keywords = run(DEMO_CONTENT, n=2, config=config)

    assert len(keywords) == 2
    assert keywords[0].tfidf_value >= keywords[1].tfidf_value
    assert all(k.name not in {"了", "要"} for k in keywords)
