"""
Extract TF-IDF keywords from a piece of text.

Usage:
  uv run python -m scripts.extract_keywords
  uv run python -m scripts.extract_keywords "孩子上了幼儿园 安全防拐教育要做好" -n 3
  uv run python -m scripts.extract_keywords "..." --idf data/idf_user.txt --ascending
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List

from src.keywords import Keyword, KeywordConfig, TFIDFAnalyzer, load_resources

DEMO_CONTENT = "孩子上了幼儿园 安全防拐教育要做好"


def format_keywords(keywords: List[Keyword]) -> str:
    return ",".join(f"{k.name}:{k.tfidf_value}" for k in keywords)


def run(
    content: str,
    *,
    n: int,
    highest_first: bool = True,
    config: KeywordConfig | None = None,
) -> List[Keyword]:
    config = config or KeywordConfig.from_env()
    resources = load_resources(config)
    analyzer = TFIDFAnalyzer(resources, config=config)
    return analyzer.analyze_top_n(content, top_flag=highest_first, n=n)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Print the top-N TF-IDF keywords of a document.",
    )
    parser.add_argument(
        "content",
        nargs="?",
        default=DEMO_CONTENT,
        help="Document text (defaults to a short demo sentence)",
    )
    parser.add_argument("-n", "--top-n", type=int, default=5, help="Number of keywords to print")
    parser.add_argument(
        "--ascending",
        action="store_true",
        help="Lowest-scoring keywords first",
    )
    parser.add_argument("--stopwords", type=Path, default=None, help="Stopword file, one word per line")
    parser.add_argument(
        "--idf",
        type=Path,
        action="append",
        default=None,
        help="IDF file with 'term value' lines; repeat to layer files (later wins)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log resource loading")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = KeywordConfig.from_env()
    if args.stopwords is not None:
        config.stopwords_path = args.stopwords
    if args.idf:
        config.idf_paths = list(args.idf)

    keywords = run(args.content, n=args.top_n, highest_first=not args.ascending, config=config)
    print(format_keywords(keywords))


if __name__ == "__main__":
    main()
