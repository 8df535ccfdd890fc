"""
Suffix tables for the Portuguese stemmer.

Each table is a tuple of (suffix, category) pairs. Nasalized vowels are
written as-is ("ação") and expanded when the tables are loaded into suffix
trees. Categories only mean something inside their own table: the step 1
category picks the rewrite action, the other steps use a single category.

Reference: http://snowball.tartarus.org/algorithms/portuguese/stemmer.html
"""

from enum import IntEnum
from typing import Tuple


class Step1Category(IntEnum):
    """Rewrite action applied to a standard suffix matched in step 1"""
    STANDARD = 0  # delete if in R2
    LOGIA = 1     # replace with "log" if in R2
    UCION = 2     # replace with "u" if in R2
    ENCIA = 3     # replace with "ente" if in R2
    AMENTE = 4    # delete if in R1, then strip iv/ativ/os/ic/ad in R2
    MENTE = 5     # delete (with ante/avel/ível) if in R2
    IDADE = 6     # delete (with abil/ic/iv) if in R2
    IVA = 7       # delete (with at) if in R2
    IRA = 8       # replace with "ir" if in RV and preceded by "e"


DELETE = 0

SuffixTable = Tuple[Tuple[str, int], ...]


def _table(category: int, *suffixes: str) -> SuffixTable:
    return tuple((suffix, category) for suffix in suffixes)


STEP1_SUFFIXES: SuffixTable = (
    _table(
        Step1Category.STANDARD,
        "eza", "ezas", "ico", "ica", "icos", "icas", "ismo", "ismos",
        "ável", "ível", "ista", "istas", "oso", "osa", "osos", "osas",
        "amento", "amentos", "imento", "imentos", "adora", "ador", "ação",
        "adoras", "adores", "ações", "ante", "antes", "ância",
    )
    + _table(Step1Category.LOGIA, "logía", "logías")
    + _table(Step1Category.UCION, "ución", "uciones")
    + _table(Step1Category.ENCIA, "ência", "ências")
    + _table(Step1Category.AMENTE, "amente")
    + _table(Step1Category.MENTE, "mente")
    + _table(Step1Category.IDADE, "idade", "idades")
    + _table(Step1Category.IVA, "iva", "ivo", "ivas", "ivos")
    + _table(Step1Category.IRA, "ira", "iras")
)

# Verb suffixes. "ira"/"iras" also appear in step 1 under IRA; both stay.
STEP2_SUFFIXES: SuffixTable = _table(
    DELETE,
    "ada", "ida", "ia", "aria", "eria", "iria", "ará", "ara", "erá", "era",
    "irá", "ava", "asse", "esse", "isse", "aste", "este", "iste", "ei",
    "arei", "erei", "irei", "am", "iam", "ariam", "eriam", "iriam", "aram",
    "eram", "iram", "avam", "em", "arem", "erem", "irem", "assem", "essem",
    "issem", "ado", "ido", "ando", "endo", "indo", "arão", "erão", "irão",
    "ar", "er", "ir", "as", "adas", "idas", "ias", "arias", "erias",
    "irias", "arás", "aras", "erás", "eras", "irás", "avas", "es", "ardes",
    "erdes", "irdes", "ares", "eres", "ires", "asses", "esses", "isses",
    "astes", "estes", "istes", "is", "ais", "eis", "íeis", "aríeis",
    "eríeis", "iríeis", "áreis", "areis", "éreis", "ereis", "íreis",
    "ireis", "ásseis", "ésseis", "ísseis", "áveis", "ados", "idos", "ámos",
    "amos", "íamos", "aríamos", "eríamos", "iríamos", "áramos", "éramos",
    "íramos", "ávamos", "emos", "aremos", "eremos", "iremos", "ássemos",
    "êssemos", "íssemos", "imos", "armos", "ermos", "irmos", "eu", "iu",
    "ou", "ira", "iras",
)

# Residual suffixes
STEP4_SUFFIXES: SuffixTable = _table(DELETE, "os", "a", "i", "o", "á", "í", "ó")

STEP5_SUFFIXES: SuffixTable = _table(DELETE, "e", "é", "ê")
