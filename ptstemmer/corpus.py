"""
Validation corpus for the Portuguese stemmer.

A corpus is a UTF-8 text resource with one "word stem" pair per line:

    ajuda ajud
    ajudado ajud
    abafaram abaf

Blank lines are skipped. The word and the expected stem are separated by
the first run of whitespace.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .stemming.porter import PortugueseStemmer
from .stemming.stemmer import get_stemmer

logger = logging.getLogger(__name__)


class CorpusFormatError(ValueError):
    """Raised for a corpus line that is not a "word stem" pair"""

    def __init__(self, path: Union[str, Path], line_number: int, line: str):
        self.path = str(path)
        self.line_number = line_number
        self.line = line
        super().__init__(f"{self.path}:{line_number}: expected 'word stem', got {line!r}")


@dataclass
class CorpusEntry:
    """Single (word, expected stem) pair"""
    line_number: int
    word: str
    stem: str


@dataclass
class CorpusMismatch:
    """Word whose computed stem differs from the expected one"""
    line_number: int
    word: str
    expected: str
    actual: str


@dataclass
class CorpusReport:
    """Result of validating a stemmer against a corpus"""
    path: str
    total: int = 0
    mismatches: List[CorpusMismatch] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.mismatches

    @property
    def accuracy(self) -> float:
        if self.total == 0:
            return 1.0
        return (self.total - len(self.mismatches)) / self.total


def read_corpus(path: Union[str, Path]) -> Iterator[CorpusEntry]:
    """
    Read (word, stem) pairs from a corpus file.

    Args:
        path: Corpus file path

    Yields:
        CorpusEntry for every non-blank line

    Raises:
        FileNotFoundError: If the file does not exist
        CorpusFormatError: If a line holds fewer than two fields
    """
    with open(path, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            stripped = line.strip()
            if not stripped:
                continue

            parts = stripped.split(None, 1)
            if len(parts) != 2:
                raise CorpusFormatError(path, line_number, line.rstrip("\n"))

            word, stem = parts[0].strip(), parts[1].strip()
            yield CorpusEntry(line_number=line_number, word=word, stem=stem)


def validate_corpus(path: Union[str, Path], stemmer: Optional[PortugueseStemmer] = None) -> CorpusReport:
    """
    Stem every word of a corpus and compare with the expected stems.

    Args:
        path: Corpus file path
        stemmer: Stemmer to check (default: shared instance)

    Returns:
        CorpusReport with total count and mismatches
    """
    stemmer = stemmer or get_stemmer()
    report = CorpusReport(path=str(path))

    for entry in read_corpus(path):
        report.total += 1
        actual = stemmer.stem(entry.word)
        if actual != entry.stem:
            logger.warning(
                f"Stem mismatch at {path}:{entry.line_number}: "
                f"word={entry.word} expected={entry.stem} actual={actual}"
            )
            report.mismatches.append(CorpusMismatch(
                line_number=entry.line_number,
                word=entry.word,
                expected=entry.stem,
                actual=actual,
            ))

    logger.info(f"Validated {report.total} words from {path}: {len(report.mismatches)} mismatches")
    return report
