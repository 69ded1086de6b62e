from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Tuple

Letter = str
Side = str

SIDE_COUNT = 4
SIDE_LENGTH = 3
LETTER_COUNT = SIDE_COUNT * SIDE_LENGTH
FULL_MASK = (1 << LETTER_COUNT) - 1


@dataclass(frozen=True)
class Puzzle:
    """
    Four sides of three letters each. Bit i of a coverage mask stands for
    the i-th letter reading the sides in order.
    """
    sides: Tuple[Side, Side, Side, Side]
    side_of: Dict[Letter, int] = field(init=False, repr=False, compare=False)
    bit_of: Dict[Letter, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        side_of: Dict[Letter, int] = {}
        bit_of: Dict[Letter, int] = {}
        for i, side in enumerate(self.sides):
            for ch in side:
                side_of[ch] = i
                bit_of[ch] = len(bit_of)
        object.__setattr__(self, "side_of", side_of)
        object.__setattr__(self, "bit_of", bit_of)

    @property
    def letters(self) -> FrozenSet[Letter]:
        return frozenset(self.side_of)

    @property
    def full_mask(self) -> int:
        return FULL_MASK

    def mask_of(self, text: str) -> int:
        mask = 0
        for ch in text:
            mask |= 1 << self.bit_of[ch]
        return mask


@dataclass(frozen=True)
class Word:
    text: str
    first: Letter
    last: Letter
    mask: int

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Chain:
    words: Tuple[Word, ...] = ()
    mask: int = 0

    @property
    def length(self) -> int:
        return len(self.words)

    @property
    def last(self) -> Optional[Letter]:
        return self.words[-1].last if self.words else None

    @property
    def covered(self) -> int:
        return bin(self.mask).count("1")

    def extend(self, word: Word) -> Chain:
        return Chain(self.words + (word,), self.mask | word.mask)

    def texts(self) -> Tuple[str, ...]:
        return tuple(w.text for w in self.words)


@dataclass
class SearchStats:
    expanded: int = 0
    pruned_no_progress: int = 0
    pruned_length: int = 0
    pruned_feasibility: int = 0
    solutions: int = 0
    best: Chain = field(default_factory=Chain)

    def observe(self, chain: Chain) -> None:
        # most letters wins, then fewest words; earlier chains win ties
        if chain.covered > self.best.covered or (
            chain.covered == self.best.covered and chain.length < self.best.length
        ):
            self.best = chain
