"""
Portuguese stemming for search indexing.

This package implements the Snowball (Porter) stemming algorithm for
Portuguese, plus the text processing built on top of it.

Components:
- suffix_tree: longest-suffix lookups over reversed suffixes
- regions: vowels, nasalized vowel expansion, R1/R2/RV regions
- tables: suffix tables for each step of the algorithm
- porter: the five-step stemmer
- stemmer: shared process-wide stemmer instance
- tokenizer: text → stemmed index terms
- index_builder: stemmed term frequency aggregation
"""

from .suffix_tree import NO_MATCH, SuffixTree
from .regions import Regions, compute_regions, r_region, rv_region
from .porter import PortugueseStemmer
from .stemmer import get_stemmer, stem
from .tokenizer import tokenize
from .index_builder import build_stem_index

__all__ = [
    "NO_MATCH",
    "SuffixTree",
    "Regions",
    "compute_regions",
    "r_region",
    "rv_region",
    "PortugueseStemmer",
    "get_stemmer",
    "stem",
    "tokenize",
    "build_stem_index",
]
