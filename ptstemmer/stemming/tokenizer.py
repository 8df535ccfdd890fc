"""
Tokenizer for Portuguese text indexing.

Tokenization pipeline:
1. Lowercase conversion
2. Extract words made of letters/digits (inner hyphens preserved, accents kept)
3. Filter stopwords (common Portuguese words)
4. Filter pure numbers
5. Apply stemming (reduce to stem: "ajudado" → "ajud")
6. Return list of meaningful tokens
"""

import re
from typing import List

from .stemmer import stem

# Portuguese stopwords (based on the Snowball Portuguese list)
# These are common words that don't help with ranking
STOPWORDS = frozenset([
    'a', 'à', 'ao', 'aos', 'aquela', 'aquele', 'as', 'às', 'até',
    'com', 'como', 'da', 'das', 'de', 'dela', 'dele', 'do', 'dos',
    'e', 'é', 'ela', 'ele', 'eles', 'em', 'entre', 'era', 'essa', 'esse',
    'esta', 'está', 'este', 'eu', 'foi', 'há', 'isso', 'isto', 'já',
    'lhe', 'mais', 'mas', 'me', 'mesmo', 'meu', 'na', 'nas', 'não', 'nem',
    'no', 'nos', 'nós', 'num', 'numa', 'o', 'os', 'ou', 'para', 'pela',
    'pelas', 'pelo', 'pelos', 'por', 'quando', 'que', 'quem', 'se', 'sem',
    'ser', 'seu', 'sua', 'são', 'também', 'te', 'tem', 'um', 'uma', 'você',
])

# Letters and digits (no underscore), hyphen allowed between parts
_WORD_PATTERN = re.compile(r'[^\W_]+(?:-[^\W_]+)*')
_NUMBER_PATTERN = re.compile(r'^[\d-]+$')


def tokenize(text: str) -> List[str]:
    """
    Tokenize Portuguese text into stemmed index terms.

    Args:
        text: Input text to tokenize

    Returns:
        List of lowercase stemmed tokens without stopwords

    Examples:
        >>> tokenize("A ajuda foi ajudada pelos meninos")
        ['ajud', 'ajud', 'menin']

        >>> tokenize("Lei 8.666 de 1993")
        ['lei']

        >>> tokenize("   ")
        []
    """
    if not text:
        return []

    text = text.lower()

    tokens = _WORD_PATTERN.findall(text)

    # Remove stopwords and pure numbers (keep alphanumeric like "mp3")
    tokens = [
        t for t in tokens
        if t not in STOPWORDS and not _NUMBER_PATTERN.match(t)
    ]

    # "ajudado" → "ajud", "meninos" → "menin"
    return [stem(t) for t in tokens]
