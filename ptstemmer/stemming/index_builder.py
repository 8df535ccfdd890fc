"""
Stem index builder - aggregates stemmed term frequencies from text chunks.
"""

import logging
from collections import defaultdict
from typing import Dict, List

from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def build_stem_index(chunks_texts: List[str]) -> Dict[str, Dict[str, int]]:
    """
    Build a document-level term frequency index from chunk texts.

    Inflected variants collapse onto the same stem, so "ajuda", "ajudado"
    and "ajudou" all count towards "ajud".

    Args:
        chunks_texts: List of chunk text strings

    Returns:
        Dict with structure:
        {
            "term_frequencies": {
                "stem1": count1,
                "stem2": count2,
                ...
            }
        }

    Example:
        >>> build_stem_index(["ajuda ajudado", "abafaram"])
        {'term_frequencies': {'ajud': 2, 'abaf': 1}}
    """
    term_frequencies = defaultdict(int)

    for chunk_text in chunks_texts:
        for term in tokenize(chunk_text):
            term_frequencies[term] += 1

    # Plain dict for JSON serialization
    result = {
        "term_frequencies": dict(term_frequencies)
    }

    logger.debug(f"Built stem index: {len(result['term_frequencies'])} unique terms from {len(chunks_texts)} chunks")

    return result
