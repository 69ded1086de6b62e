from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
from .types import Letter, Puzzle, Word

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3


def normalize_entry(w: str) -> str:
    return w.strip().upper()


def annotate_word(raw: str, puzzle: Puzzle) -> Optional[Word]:
    """
    Return the annotated Word if `raw` can be played on this puzzle, else None.
    A playable word has 3+ letters, all on the board, and never uses two
    letters from the same side back to back.
    """
    text = normalize_entry(raw)
    if len(text) < MIN_WORD_LENGTH:
        return None

    side_of = puzzle.side_of
    prev_side = -1
    for ch in text:
        side = side_of.get(ch)
        if side is None or side == prev_side:
            return None
        prev_side = side

    return Word(text=text, first=text[0], last=text[-1], mask=puzzle.mask_of(text))


@dataclass
class WordIndex:
    """
    Playable words for one puzzle, in corpus order.
    - by_first: starting letter -> words, used to expand a chain
    - lookup: text -> word, used to validate prior words
    - max_gain: most new letters a single appended word can add
    """
    words: List[Word] = field(default_factory=list)
    by_first: Dict[Letter, List[Word]] = field(default_factory=dict)
    lookup: Dict[str, Word] = field(default_factory=dict)
    max_gain: int = 0

    def add(self, word: Word) -> None:
        self.words.append(word)
        self.by_first.setdefault(word.first, []).append(word)
        self.lookup[word.text] = word
        # the first letter always repeats the previous word's last letter
        gain = bin(word.mask).count("1") - 1
        if gain > self.max_gain:
            self.max_gain = gain

    def candidates(self, last: Optional[Letter]) -> List[Word]:
        if last is None:
            return self.words
        return self.by_first.get(last, [])

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, text: str) -> bool:
        return normalize_entry(text) in self.lookup


def filter_words(corpus: Iterable[str], puzzle: Puzzle) -> WordIndex:
    index = WordIndex()
    total = 0
    for raw in corpus:
        total += 1
        word = annotate_word(raw, puzzle)
        if word is None or word.text in index.lookup:
            continue
        index.add(word)

    logger.debug("Kept %d of %d corpus entries for sides %s", len(index), total, "/".join(puzzle.sides))
    return index
