#!/usr/bin/env python3
"""
Validate the Portuguese stemmer against a "word stem" corpus file.

Exits with status 1 when any word stems differently from the corpus, or
when the corpus is missing or malformed.
"""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Allow running from a checkout without installing the package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
load_dotenv(project_root / ".env.local")

from ptstemmer.corpus import CorpusFormatError, validate_corpus
from ptstemmer.logging_config import setup_logging

DEFAULT_CORPUS = project_root / "tests" / "fixtures" / "ptstems.txt"


def main():
    """Main entry point."""
    if len(sys.argv) > 2:
        print("Usage:")
        print("  python scripts/validate_corpus.py [CORPUS_FILE]")
        print("\nDefault corpus: $PTSTEMMER_CORPUS or tests/fixtures/ptstems.txt")
        sys.exit(1)

    corpus_path = sys.argv[1] if len(sys.argv) == 2 else os.getenv("PTSTEMMER_CORPUS", str(DEFAULT_CORPUS))

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    setup_logging(
        log_file=os.getenv("LOG_FILE", "logs/ptstemmer.log"),
        console_level=getattr(logging, log_level, logging.INFO),
    )

    try:
        report = validate_corpus(corpus_path)
    except (FileNotFoundError, CorpusFormatError) as e:
        print(f"Error reading corpus: {e}", file=sys.stderr)
        sys.exit(1)

    print("=" * 80)
    print(f"Corpus:     {report.path}")
    print(f"Words:      {report.total}")
    print(f"Mismatches: {len(report.mismatches)}")
    print(f"Accuracy:   {report.accuracy:.2%}")
    for mismatch in report.mismatches:
        print(f"  line {mismatch.line_number}: {mismatch.word} expected={mismatch.expected} actual={mismatch.actual}")
    print("=" * 80)

    if not report.passed:
        sys.exit(1)


if __name__ == "__main__":
    main()
