"""
Snowball stemmer for Portuguese.

One stemmer instance is shared by the whole process: its suffix trees are
built at import and never modified afterwards.

Examples:
- "ajudado" → "ajud"
- "abafaram" → "abaf"
- "felicidade" → "felic"
- "nação" → "naçã"
"""

from .porter import PortugueseStemmer

# Initialize stemmer once (thread-safe, reusable)
_stemmer = PortugueseStemmer()


def get_stemmer() -> PortugueseStemmer:
    """Return the shared stemmer instance"""
    return _stemmer


def stem(word: str) -> str:
    """
    Stem a single word using the shared Portuguese stemmer.

    Args:
        word: Lowercase word to stem

    Returns:
        Stemmed word

    Examples:
        >>> stem("ajuda")
        'ajud'
        >>> stem("cheira")
        'cheir'
        >>> stem("anatomicamente")
        'anatom'
    """
    return _stemmer.stem(word)
