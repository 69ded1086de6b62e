import pytest
from letterboxed.dictionary import filter_words
from letterboxed.grid import build_puzzle

# A B C | D E F | G H I | J K L
ABC_CORPUS = [
    "ABDE",        # A, B share a side
    "EFJA",        # E, F share a side
    "ADGJ",
    "ADGJBEHKC",
    "CFIL",
    "CLIF",
]

# E L Z | I V A | R Y U | C T H
ELZ_CORPUS = [
    "vehicular",
    "ritzily",
    "ritzy",
    "crazily",
    "lazy",
    "ultra",
    "cute",
    "lucre",
    "trace",
    "yeti",
    "the",
    "at",
    "hairy",
    "Vehicular",
]


@pytest.fixture
def abc_puzzle():
    return build_puzzle("ABC", "DEF", "GHI", "JKL")


@pytest.fixture
def abc_index(abc_puzzle):
    return filter_words(ABC_CORPUS, abc_puzzle)


@pytest.fixture
def elz_puzzle():
    return build_puzzle("ELZ", "IVA", "RYU", "CTH")


@pytest.fixture
def elz_index(elz_puzzle):
    return filter_words(ELZ_CORPUS, elz_puzzle)


@pytest.fixture
def wordlist_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# test list\n" + "\n".join(ELZ_CORPUS) + "\n\n", encoding="utf-8")
    return path


@pytest.fixture
def elz_corpus():
    return list(ELZ_CORPUS)
