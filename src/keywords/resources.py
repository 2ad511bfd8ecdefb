"""
Loading of the stopword list and IDF dictionaries.

Both resources are plain UTF-8 text files. Malformed lines are skipped and
counted rather than raised, so a slightly dirty dictionary still loads; a
missing file is an error.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Tuple

from .config import KeywordConfig

logger = logging.getLogger(__name__)


@dataclass
class LoadReport:
    """Outcome of loading one resource file."""

    path: Path
    loaded: int = 0
    skipped: int = 0


@dataclass(frozen=True)
class KeywordResources:
    """Read-only lookup tables shared by every analysis call."""

    stopwords: FrozenSet[str]
    idf: Mapping[str, float]
    reports: List[LoadReport] = field(default_factory=list)

    @property
    def skipped_lines(self) -> int:
        return sum(r.skipped for r in self.reports)


def load_stopwords(path: Path) -> Tuple[FrozenSet[str], LoadReport]:
    """Load one stopword per line."""
    if not path.exists():
        raise FileNotFoundError(f"stopword file not found at {path}")

    report = LoadReport(path=path)
    words = set()
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            word = line.rstrip("\r\n")
            if not word:
                report.skipped += 1
                continue
            words.add(word)
            report.loaded += 1
    logger.info("Loaded %s stopwords from %s (%s lines skipped)", report.loaded, path, report.skipped)
    return frozenset(words), report


def _parse_idf_line(line: str) -> Tuple[str, float] | None:
    parts = line.split()
    if len(parts) != 2:
        return None
    try:
        value = float(parts[1])
    except ValueError:
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return parts[0], value


def load_idf_table(paths: Iterable[Path]) -> Tuple[Mapping[str, float], List[LoadReport]]:
    """
    Load "term value" lines from one or more IDF files.

    Files are applied in order, so entries in a later file (e.g. a user
    supplement) override the same term from an earlier one.
    """
    table: Dict[str, float] = {}
    reports: List[LoadReport] = []
    for path in paths:
        if not path.exists():
            raise FileNotFoundError(f"IDF file not found at {path}")
        report = LoadReport(path=path)
        with path.open("r", encoding="utf-8") as f:
            for line in f:
                entry = _parse_idf_line(line)
                if entry is None:
                    report.skipped += 1
                    continue
                term, value = entry
                table[term] = value
                report.loaded += 1
        logger.info("Loaded %s IDF entries from %s (%s lines skipped)", report.loaded, path, report.skipped)
        reports.append(report)
    return MappingProxyType(table), reports


def load_resources(config: KeywordConfig | None = None) -> KeywordResources:
    """Load stopwords and IDF tables once; the result is safe to share across threads."""
    if config is None:
        config = KeywordConfig()
    stopwords, stop_report = load_stopwords(config.stopwords_path)
    idf, idf_reports = load_idf_table(config.idf_paths)
    return KeywordResources(stopwords=stopwords, idf=idf, reports=[stop_report, *idf_reports])
