"""
Word regions used by the Portuguese stemmer.

Definitions (Snowball):
- R1: region after the first non-vowel following a vowel
- R2: R1 computed over R1
- RV: if the second letter is a consonant, the region after the next
  following vowel; if the first two letters are vowels, the region after the
  next consonant; otherwise (consonant-vowel) the region after the third
  letter. Empty when the position cannot be found.

Regions are computed over words whose nasalized vowels were expanded
("ã" -> "a" + NASAL_MARKER), with the marker counting as a consonant.

Examples:
- r_region("beautiful") -> "iful"
- r_region("iful") -> "ul"
- rv_region("macho") -> "ho"
- rv_region("áureo") -> "eo"
"""

from typing import NamedTuple

VOWELS = frozenset("aeiouáéíóúâêô")

# Private-use code point, never present in real text
NASAL_MARKER = "\ue000"

_NASAL_VOWELS = (
    ("ã", "a" + NASAL_MARKER),
    ("õ", "o" + NASAL_MARKER),
)


class Regions(NamedTuple):
    """R1, R2 and RV of a single word"""
    r1: str
    r2: str
    rv: str


def is_vowel(char: str) -> bool:
    return char in VOWELS


def expand_nasal_vowels(word: str) -> str:
    """Rewrite 'ã'/'õ' as a plain vowel followed by NASAL_MARKER"""
    for nasal, expanded in _NASAL_VOWELS:
        word = word.replace(nasal, expanded)
    return word


def contract_nasal_vowels(word: str) -> str:
    """Inverse of expand_nasal_vowels"""
    for nasal, expanded in _NASAL_VOWELS:
        word = word.replace(expanded, nasal)
    return word


def r_region(word: str) -> str:
    """
    Region after the first vowel followed by a non-vowel.

    Args:
        word: Expanded word

    Returns:
        Trailing part of word after that non-vowel ("" if not found)
    """
    for i in range(len(word) - 1):
        if is_vowel(word[i]) and not is_vowel(word[i + 1]):
            return word[i + 2:]
    return ""


def rv_region(word: str) -> str:
    """
    RV region of a word ("" for words shorter than 3 characters).

    Args:
        word: Expanded word

    Returns:
        Trailing part of word forming RV
    """
    if len(word) < 3:
        return ""

    if not is_vowel(word[1]):
        # Consonant in second position: after the next vowel
        for i in range(2, len(word)):
            if is_vowel(word[i]):
                return word[i + 1:]
        return ""

    if is_vowel(word[0]):
        # Two leading vowels: after the next consonant
        for i in range(2, len(word)):
            if not is_vowel(word[i]):
                return word[i + 1:]
        return ""

    # Consonant-vowel
    return word[3:]


def compute_regions(word: str) -> Regions:
    """Compute R1, R2 and RV of word"""
    r1 = r_region(word)
    return Regions(r1=r1, r2=r_region(r1), rv=rv_region(word))
