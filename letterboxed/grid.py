from __future__ import annotations
from typing import List, Sequence
from .errors import DuplicateLetter, InvalidLetter, InvalidSideLength
from .types import SIDE_LENGTH, Puzzle


def normalize_side(side: str) -> str:
    return side.strip().upper()


def build_puzzle(side1: str, side2: str, side3: str, side4: str) -> Puzzle:
    """
    Build the puzzle from its four sides.
    Sides are case-insensitive. Raises InvalidSideLength, InvalidLetter or
    DuplicateLetter (all ConfigError).
    """
    sides: List[str] = [normalize_side(s) for s in (side1, side2, side3, side4)]

    for i, side in enumerate(sides):
        if len(side) != SIDE_LENGTH:
            raise InvalidSideLength(i, side)

    for i, side in enumerate(sides):
        if not all("A" <= ch <= "Z" for ch in side):
            raise InvalidLetter(i, side)

    seen = set()
    for side in sides:
        for ch in side:
            if ch in seen:
                raise DuplicateLetter(ch)
            seen.add(ch)

    return Puzzle(tuple(sides))


def validate_chain(puzzle: Puzzle, words: Sequence[str]) -> bool:
    """
    Check a candidate answer against the board rules: only board letters,
    no two consecutive letters from the same side, words of 3+ letters,
    and each word starting with the previous word's last letter.
    """
    words = [w.strip().upper() for w in words]
    if not words:
        return False
    for prev, nxt in zip(words, words[1:]):
        if not prev or not nxt or prev[-1] != nxt[0]:
            return False

    for w in words:
        if len(w) < 3:
            return False
        if any(ch not in puzzle.side_of for ch in w):
            return False
        for a, b in zip(w, w[1:]):
            if puzzle.side_of[a] == puzzle.side_of[b]:
                return False
    return True


def is_solution(puzzle: Puzzle, words: Sequence[str]) -> bool:
    if not words or not validate_chain(puzzle, words):
        return False
    covered = 0
    for w in words:
        covered |= puzzle.mask_of(w.strip().upper())
    return covered == puzzle.full_mask
