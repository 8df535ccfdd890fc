"""
Unit tests for the five-step Portuguese stemmer.
"""

from unittest.mock import patch

import pytest
from ptstemmer.stemming.porter import PortugueseStemmer
from ptstemmer.stemming.regions import compute_regions, expand_nasal_vowels
from ptstemmer.stemming.tables import STEP1_SUFFIXES, STEP2_SUFFIXES, Step1Category


class TestStem:
    """End-to-end stemming of known words"""

    @pytest.mark.parametrize("word,expected", [
        ("á", "á"),
        ("ajuda", "ajud"),
        ("ajudá", "ajud"),
        ("ajudado", "ajud"),
        ("ajudou", "ajud"),
        ("abafaram", "abaf"),
        ("abaixa", "abaix"),
        ("abraçada", "abrac"),
        ("adequadamente", "adequ"),
        ("aérea", "aér"),
        ("anatomicamente", "anatom"),
        ("cheira", "cheir"),
        ("ôôiii", "ôôiii"),
    ])
    def test_known_stems(self, stemmer, word, expected):
        assert stemmer.stem(word) == expected

    @pytest.mark.parametrize("word", ["ajud", "abaf", "anatom"])
    def test_minimal_stems_are_stable(self, stemmer, word):
        """Test that re-stemming an already minimal stem changes nothing"""
        assert stemmer.stem(word) == word
        assert stemmer.stem(stemmer.stem(word + "a")) == stemmer.stem(word + "a")

    @pytest.mark.parametrize("word", ["", "123", "!!!", "xyz", "AJUDA"])
    def test_unmatched_input_unchanged(self, stemmer, word):
        """Test graceful pass-through when no rule applies"""
        assert stemmer.stem(word) == word

    def test_callable(self, stemmer):
        assert stemmer("ajudou") == "ajud"


class TestStep1:
    """Test standard suffix removal"""

    def test_falls_through_to_step2(self, stemmer):
        assert stemmer.stem("boataria") == "boat"  # "aria" is a step 2 suffix

    def test_mente_in_r2(self, stemmer):
        assert stemmer.stem("felizmente") == "feliz"

    def test_idade_in_r2(self, stemmer):
        assert stemmer.stem("felicidade") == "felic"

    def test_amente_preceded_by_ic(self, stemmer):
        """Test amente is deleted in R1 and the preceding "ic" in R2"""
        word = "anatomicamente"
        stem, modified = stemmer.step1(word, compute_regions(word))

        assert modified
        assert stem == "anatom"

    def test_amente_not_preceded(self, stemmer):
        word = "ativamente"
        stem, modified = stemmer.step1(word, compute_regions(word))

        assert modified
        assert stem == "ativ"

    def test_ira_preceded_by_e(self, stemmer):
        """Test ira becomes ir when in RV and preceded by e"""
        word = "cheira"
        stem, modified = stemmer.step1(word, compute_regions(word))

        assert modified
        assert stem == "cheir"

    def test_matched_but_rejected(self, stemmer):
        """Test a lexical match outside its region reports no modification"""
        word = expand_nasal_vowels("nação")
        suffix, category = stemmer.step1_suffixes.longest_suffix(word)
        assert suffix == expand_nasal_vowels("ação")
        assert category == Step1Category.STANDARD

        stem, modified = stemmer.step1(word, compute_regions(word))

        assert not modified
        assert stem == word

    def test_no_match(self, stemmer):
        word = "ajudado"
        assert stemmer.step1(word, compute_regions(word)) == (word, False)

    @pytest.mark.parametrize("word,expected", [
        ("nacionalismo", "nacional"),
        ("organização", "organiz"),
        ("quilométricas", "quilométr"),
    ])
    def test_standard_deleted_in_r2(self, stemmer, word, expected):
        word = expand_nasal_vowels(word)
        assert stemmer.step1(word, compute_regions(word)) == (expected, True)

    @pytest.mark.parametrize("word,expected", [
        ("antropología", "antropolog"),     # logía -> log
        ("antropologías", "antropolog"),
        ("revolución", "revolu"),           # ución -> u
        ("independência", "independente"), # ência -> ente
    ])
    def test_replaced_in_r2(self, stemmer, word, expected):
        assert stemmer.step1(word, compute_regions(word)) == (expected, True)

    @pytest.mark.parametrize("word,expected", [
        ("exclusivamente", "exclus"),      # iv
        ("relativamente", "relat"),        # iv, "at" outside R2
        ("comparativamente", "compar"),    # ativ
        ("generosamente", "gener"),        # os
        ("adequadamente", "adequ"),        # ad
    ])
    def test_amente_preceded(self, stemmer, word, expected):
        """Test the ending before amente is also deleted when it lies in R2"""
        assert stemmer.step1(word, compute_regions(word)) == (expected, True)

    @pytest.mark.parametrize("word,expected", [
        ("elegantemente", "eleg"),      # ante
        ("inevitavelmente", "inevit"),  # avel
        ("aterrívelmente", "aterr"),    # ível
        ("felizmente", "feliz"),
    ])
    def test_mente_preceded(self, stemmer, word, expected):
        assert stemmer.step1(word, compute_regions(word)) == (expected, True)

    @pytest.mark.parametrize("word,expected", [
        ("responsabilidade", "respons"),  # abil
        ("autenticidade", "autent"),      # ic
        ("produtividade", "produt"),      # iv
        ("felicidade", "felic"),
    ])
    def test_idade_preceded(self, stemmer, word, expected):
        assert stemmer.step1(word, compute_regions(word)) == (expected, True)

    @pytest.mark.parametrize("word,expected", [
        ("administrativo", "administr"),  # at
        ("comparativo", "compar"),
        ("ofensivo", "ofens"),
        ("agressivo", "agress"),
    ])
    def test_iva_preceded(self, stemmer, word, expected):
        assert stemmer.step1(word, compute_regions(word)) == (expected, True)

    def test_ira_not_preceded_by_e(self, stemmer):
        """Test ira in RV without a preceding e is left for step 2"""
        word = "mentira"
        assert stemmer.step1(word, compute_regions(word)) == (word, False)
        assert stemmer.stem(word) == "ment"

    def test_ira_kept_in_both_tables(self):
        """Test ira/iras are registered in step 1 and step 2"""
        assert ("ira", Step1Category.IRA) in STEP1_SUFFIXES
        assert ("iras", Step1Category.IRA) in STEP1_SUFFIXES
        assert any(suffix == "ira" for suffix, _ in STEP2_SUFFIXES)
        assert any(suffix == "iras" for suffix, _ in STEP2_SUFFIXES)


class TestLaterSteps:
    """Test steps 2 to 5 in isolation"""

    def test_step2_matches_rv_only(self, stemmer):
        """Test verb suffixes are looked up in RV, not in the whole word"""
        word = "ajudado"
        regions = compute_regions(word)
        assert regions.rv == "dado"

        assert stemmer.step2(word, regions) == ("ajud", True)

    def test_step2_suffix_outside_rv(self, stemmer):
        # "boem": RV is "m", so "em" is not in RV
        word = "boem"
        assert stemmer.step2(word, compute_regions(word)) == ("boem", False)

    def test_step3(self, stemmer):
        word = "negoci"
        assert stemmer.step3(word, compute_regions(word)) == ("negoc", True)

    def test_step4(self, stemmer):
        word = "boatos"
        assert stemmer.step4(word, compute_regions(word)) == ("boat", True)

    def test_step5_gu(self, stemmer):
        word = "averigue"
        assert stemmer.step5(word, compute_regions(word)) == ("averig", True)

    def test_step5_ci(self, stemmer):
        word = "aprecie"
        assert stemmer.step5(word, compute_regions(word)) == ("aprec", True)

    def test_step5_plain_e(self, stemmer):
        word = "bodoque"
        assert stemmer.step5(word, compute_regions(word)) == ("bodoqu", True)

    def test_step5_cedilla(self, stemmer):
        word = "abraç"
        assert stemmer.step5(word, compute_regions(word)) == ("abrac", True)

    def test_step5_no_change(self, stemmer):
        word = "boat"
        assert stemmer.step5(word, compute_regions(word)) == ("boat", False)


class TestRegionRecomputation:
    """Regions are recomputed only right after a step that changed the word"""

    @pytest.fixture
    def fresh_stemmer(self):
        return PortugueseStemmer()

    @pytest.mark.parametrize("word,expected_calls", [
        ("ôôiii", 1),       # nothing changes
        ("boem", 1),        # nothing changes
        ("ajudado", 2),     # step 2 changes, step 3 does not
        ("boatos", 2),      # step 4 changes
        ("negociar", 3),    # step 2 then step 3 change
        ("felizmente", 2),  # step 1 changes, step 3 does not
    ])
    def test_recompute_count(self, fresh_stemmer, word, expected_calls):
        with patch.object(fresh_stemmer, "regions", wraps=fresh_stemmer.regions) as regions:
            fresh_stemmer.stem(word)

        assert regions.call_count == expected_calls

    @pytest.mark.parametrize("word,final_word", [
        ("negociar", "negoc"),
        ("boatos", "boat"),
        ("bode", "bode"),
        ("ajudado", "ajud"),
    ])
    def test_step5_sees_current_regions(self, fresh_stemmer, word, final_word):
        """Test step 5 gets regions of the word it is handed, never stale ones"""
        with patch.object(fresh_stemmer, "step5", wraps=fresh_stemmer.step5) as step5:
            fresh_stemmer.stem(word)

        step5.assert_called_once()
        passed_word, passed_regions = step5.call_args.args
        assert passed_word == final_word
        assert passed_regions == compute_regions(final_word)

    def test_step3_and_step4_exclusive(self, fresh_stemmer):
        with patch.object(fresh_stemmer, "step3", wraps=fresh_stemmer.step3) as step3, \
             patch.object(fresh_stemmer, "step4", wraps=fresh_stemmer.step4) as step4:
            fresh_stemmer.stem("boatos")
            assert step3.call_count == 0
            assert step4.call_count == 1

            fresh_stemmer.stem("ajudado")
            assert step3.call_count == 1
            assert step4.call_count == 1

    def test_step2_skipped_after_step1(self, fresh_stemmer):
        with patch.object(fresh_stemmer, "step2", wraps=fresh_stemmer.step2) as step2:
            fresh_stemmer.stem("felizmente")
            assert step2.call_count == 0

            fresh_stemmer.stem("ajudado")
            assert step2.call_count == 1
