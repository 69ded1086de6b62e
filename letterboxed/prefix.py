from __future__ import annotations
import logging
from typing import Optional, Sequence
from .dictionary import WordIndex, normalize_entry
from .errors import BrokenChain, UnknownWord
from .types import Chain, Puzzle, Word

logger = logging.getLogger(__name__)


def seed_chain(puzzle: Puzzle, index: WordIndex, prior: Sequence[str]) -> Chain:
    """
    Fold the caller's prior words into the chain the search starts from.
    Raises UnknownWord if a word is not playable on this puzzle (or not in
    the dictionary) and BrokenChain if two consecutive words do not link.
    """
    chain = Chain()
    previous: Optional[Word] = None
    position = 0
    for raw in prior:
        text = normalize_entry(raw)
        if not text:
            continue

        word = index.lookup.get(text)
        if word is None:
            raise UnknownWord(text, position)
        if previous is not None and previous.last != word.first:
            raise BrokenChain(previous.text, word.text, position)

        chain = chain.extend(word)
        previous = word
        position += 1

    if chain.length:
        logger.debug("Seeded chain %s covering %d/%d letters", " ".join(chain.texts()), chain.covered, len(puzzle.letters))
    return chain
