"""
Porter (Snowball) stemmer for Portuguese.

Pipeline:
1. Expand nasalized vowels ("ã" -> "a" + marker, "õ" -> "o" + marker)
2. Compute regions R1, R2, RV
3. Step 1: standard suffix removal (always)
4. Step 2: verb suffix removal (only if step 1 changed nothing)
5. Step 3: delete "i" after "c" in RV (only if step 1 or 2 changed the word)
6. Step 4: residual suffix removal (only if steps 1 and 2 changed nothing)
7. Step 5: residual "e"/"é"/"ê" removal and "ç" -> "c" (always)
8. Contract nasalized vowels

Regions are recomputed only after a step that modified the word.

Examples:
- "ajudado" -> "ajud"
- "adequadamente" -> "adequ"
- "abraçada" -> "abrac"

Reference: http://snowball.tartarus.org/algorithms/portuguese/stemmer.html
"""

import logging
from typing import Tuple

from .regions import (
    Regions,
    compute_regions,
    contract_nasal_vowels,
    expand_nasal_vowels,
)
from .suffix_tree import SuffixTree
from .tables import (
    STEP1_SUFFIXES,
    STEP2_SUFFIXES,
    STEP4_SUFFIXES,
    STEP5_SUFFIXES,
    SuffixTable,
    Step1Category,
)

logger = logging.getLogger(__name__)

StepResult = Tuple[str, bool]


def _build_tree(table: SuffixTable) -> SuffixTree:
    return SuffixTree.from_entries(
        (expand_nasal_vowels(suffix), category) for suffix, category in table
    )


def _strip(word: str, suffix: str) -> str:
    """Remove suffix from the end of word (word must end with it)"""
    return word[:len(word) - len(suffix)]


class PortugueseStemmer:
    """
    Snowball stemmer for Portuguese.

    Suffix trees are built once in the constructor and only read afterwards,
    so a single instance can be shared freely between threads.
    """

    def __init__(self):
        self.step1_suffixes = _build_tree(STEP1_SUFFIXES)
        self.step2_suffixes = _build_tree(STEP2_SUFFIXES)
        self.step4_suffixes = _build_tree(STEP4_SUFFIXES)
        self.step5_suffixes = _build_tree(STEP5_SUFFIXES)

        logger.debug(
            f"Built Portuguese stemmer: step1={len(self.step1_suffixes)}, "
            f"step2={len(self.step2_suffixes)}, step4={len(self.step4_suffixes)}, "
            f"step5={len(self.step5_suffixes)} suffixes"
        )

    def regions(self, word: str) -> Regions:
        """R1, R2 and RV of an expanded word"""
        return compute_regions(word)

    def step1(self, word: str, regions: Regions) -> StepResult:
        """
        Standard suffix removal.

        The longest step 1 suffix of the whole word selects the action. A
        suffix that matches but fails its region test leaves the word as is
        and reports no modification.
        """
        suffix, category = self.step1_suffixes.longest_suffix(word)
        if not suffix:
            return word, False

        r1, r2, rv = regions

        if category == Step1Category.STANDARD:
            if r2.endswith(suffix):
                return _strip(word, suffix), True

        elif category == Step1Category.LOGIA:
            if r2.endswith(suffix):
                return _strip(word, suffix) + "log", True

        elif category == Step1Category.UCION:
            if r2.endswith(suffix):
                return _strip(word, suffix) + "u", True

        elif category == Step1Category.ENCIA:
            if r2.endswith(suffix):
                return _strip(word, suffix) + "ente", True

        elif category == Step1Category.AMENTE:
            # R2 is a tail of R1, so nothing below can apply without this
            if not r1.endswith(suffix):
                return word, False
            stem = _strip(word, suffix)
            if r2.endswith("iv" + suffix):
                stem = _strip(stem, "iv")
                if r2.endswith("ativ" + suffix):
                    stem = _strip(stem, "at")
            else:
                for preceding in ("os", "ic", "ad"):
                    if r2.endswith(preceding + suffix):
                        stem = _strip(stem, preceding)
                        break
            return stem, True

        elif category == Step1Category.MENTE:
            return self._delete_in_r2(word, r2, suffix, ("ante", "avel", "ível"))

        elif category == Step1Category.IDADE:
            return self._delete_in_r2(word, r2, suffix, ("abil", "ic", "iv"))

        elif category == Step1Category.IVA:
            return self._delete_in_r2(word, r2, suffix, ("at",))

        elif category == Step1Category.IRA:
            if rv.endswith(suffix) and word.endswith("e" + suffix):
                return _strip(word, suffix) + "ir", True

        return word, False

    @staticmethod
    def _delete_in_r2(word: str, r2: str, suffix: str, preceding: Tuple[str, ...]) -> StepResult:
        # Longer forms (preceding + suffix) win over the bare suffix
        for ending in tuple(p + suffix for p in preceding) + (suffix,):
            if r2.endswith(ending):
                return _strip(word, ending), True
        return word, False

    def step2(self, word: str, regions: Regions) -> StepResult:
        """Verb suffix removal: delete the longest step 2 suffix found in RV"""
        suffix, _ = self.step2_suffixes.longest_suffix(regions.rv)
        if not suffix:
            return word, False
        return _strip(word, suffix), True

    def step3(self, word: str, regions: Regions) -> StepResult:
        """Delete a final 'i' in RV when preceded by 'c'"""
        if word.endswith("ci") and regions.rv.endswith("i"):
            return word[:-1], True
        return word, False

    def step4(self, word: str, regions: Regions) -> StepResult:
        """Residual suffix removal: os a i o á í ó in RV"""
        suffix, _ = self.step4_suffixes.longest_suffix(regions.rv)
        if not suffix:
            return word, False
        return _strip(word, suffix), True

    def step5(self, word: str, regions: Regions) -> StepResult:
        """
        Delete e/é/ê in RV; after "gu" (or "ci") with the "u" (or "i") in RV,
        delete that letter too. Without such a suffix, turn a final "ç"
        into "c".
        """
        rv = regions.rv
        suffix, _ = self.step5_suffixes.longest_suffix(rv)

        if not suffix:
            if word.endswith("ç"):
                return word[:-1] + "c", True
            return word, False

        if rv.endswith("u" + suffix) and word.endswith("gu" + suffix):
            return _strip(word, "u" + suffix), True
        if rv.endswith("i" + suffix) and word.endswith("ci" + suffix):
            return _strip(word, "i" + suffix), True
        return _strip(word, suffix), True

    def stem(self, word: str) -> str:
        """
        Stem a Portuguese word.

        Never raises: words no rule applies to (numbers, punctuation, words
        without vowels, "") come back unchanged. The word is not lowercased.

        Args:
            word: Word to stem

        Returns:
            Stemmed word

        Examples:
            >>> PortugueseStemmer().stem("ajudou")
            'ajud'
            >>> PortugueseStemmer().stem("anatomicamente")
            'anatom'
        """
        stem = expand_nasal_vowels(word)
        regions = self.regions(stem)

        stem, modified = self.step1(stem, regions)
        if not modified:
            stem, modified = self.step2(stem, regions)

        if modified:
            regions = self.regions(stem)
            stem, modified = self.step3(stem, regions)
        else:
            stem, modified = self.step4(stem, regions)

        if modified:
            regions = self.regions(stem)

        stem, _ = self.step5(stem, regions)
        return contract_nasal_vowels(stem)

    def __call__(self, word: str) -> str:
        return self.stem(word)
