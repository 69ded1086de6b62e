import pytest
from letterboxed.errors import ConfigError, DuplicateLetter, InvalidLetter, InvalidSideLength
from letterboxed.grid import build_puzzle, is_solution, validate_chain
from letterboxed.types import FULL_MASK


def test_build_puzzle_normalizes_case_and_whitespace():
    puzzle = build_puzzle(" abc", "Def", "GHI ", "jkl")
    assert puzzle.sides == ("ABC", "DEF", "GHI", "JKL")
    assert puzzle.letters == frozenset("ABCDEFGHIJKL")
    assert puzzle.full_mask == FULL_MASK == 0xFFF


def test_side_of_and_bits(abc_puzzle):
    assert abc_puzzle.side_of["A"] == 0
    assert abc_puzzle.side_of["F"] == 1
    assert abc_puzzle.side_of["L"] == 3
    assert abc_puzzle.bit_of["A"] == 0
    assert abc_puzzle.bit_of["L"] == 11
    assert abc_puzzle.mask_of("ABC") == 0b111
    assert abc_puzzle.mask_of("LA") == (1 << 11) | 1


def test_puzzles_with_same_sides_are_equal():
    assert build_puzzle("ABC", "DEF", "GHI", "JKL") == build_puzzle("abc", "def", "ghi", "jkl")


@pytest.mark.parametrize("sides, index", [
    (("AB", "DEF", "GHI", "JKL"), 0),
    (("ABC", "DEFG", "HIJ", "KLM"), 1),
    (("ABC", "DEF", "", "JKL"), 2),
])
def test_invalid_side_length(sides, index):
    with pytest.raises(InvalidSideLength) as excinfo:
        build_puzzle(*sides)
    assert excinfo.value.side_index == index
    assert isinstance(excinfo.value, ConfigError)


def test_duplicate_letter_across_sides():
    with pytest.raises(DuplicateLetter) as excinfo:
        build_puzzle("ABC", "ABD", "GHI", "JKL")
    assert excinfo.value.letter == "A"
    assert isinstance(excinfo.value, ConfigError)


def test_duplicate_letter_within_side():
    with pytest.raises(DuplicateLetter):
        build_puzzle("AAC", "DEF", "GHI", "JKL")


def test_invalid_letter():
    with pytest.raises(InvalidLetter):
        build_puzzle("AB1", "DEF", "GHI", "JKL")


def test_length_checked_before_duplicates():
    with pytest.raises(InvalidSideLength):
        build_puzzle("ABC", "ABC", "GHI", "JK")


def test_validate_chain(elz_puzzle):
    assert validate_chain(elz_puzzle, ["VEHICULAR", "RITZILY"])
    assert validate_chain(elz_puzzle, ["vehicular", "ritzily"])
    # does not link
    assert not validate_chain(elz_puzzle, ["RITZILY", "VEHICULAR"])
    # T and H share a side
    assert not validate_chain(elz_puzzle, ["THE"])
    # B is not on the board
    assert not validate_chain(elz_puzzle, ["CAB"])
    assert not validate_chain(elz_puzzle, ["AT"])


def test_is_solution(elz_puzzle):
    assert is_solution(elz_puzzle, ["VEHICULAR", "RITZILY"])
    assert not is_solution(elz_puzzle, ["VEHICULAR"])
    assert not is_solution(elz_puzzle, [])


def test_empty_answer_is_not_valid(elz_puzzle):
    assert not validate_chain(elz_puzzle, [])
    assert not validate_chain(elz_puzzle, ["  "])
