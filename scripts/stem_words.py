#!/usr/bin/env python3
"""
Print "word -> stem" for Portuguese words.

Words come from the command line, or from stdin (whitespace separated,
any number per line) when no arguments are given.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv

# Allow running from a checkout without installing the package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
load_dotenv(project_root / ".env.local")

from ptstemmer.stemming import stem


def main():
    """Main entry point."""
    if len(sys.argv) > 1:
        words = sys.argv[1:]
    else:
        words = (word for line in sys.stdin for word in line.split())

    for word in words:
        print(f"{word} -> {stem(word)}")


if __name__ == "__main__":
    main()
