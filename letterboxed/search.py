from __future__ import annotations
import logging
from typing import Iterator, List, Optional, Tuple
from .dictionary import WordIndex
from .errors import DepthExceededByPrefix, InvalidDepth
from .types import Chain, Puzzle, SearchStats, Word

logger = logging.getLogger(__name__)

Frame = Tuple[Chain, Iterator[Word]]


def check_depth(initial: Chain, max_length: int) -> None:
    if max_length < 1:
        raise InvalidDepth(max_length)
    if initial.length > max_length:
        raise DepthExceededByPrefix(max_length, initial.length)


def solve_chains(
    puzzle: Puzzle,
    index: WordIndex,
    initial: Chain,
    max_length: int,
    allow_no_progress: bool = False,
    stats: Optional[SearchStats] = None,
) -> Iterator[Chain]:
    """
    Depth-first search for chains covering every letter, starting from `initial`.

    Solutions are yielded as soon as they are found, in a fixed order (the
    order words appear in the index), and are never extended further.
    Words adding no new letter are skipped unless `allow_no_progress` is set.
    The depth checks run on the first pull of the generator.
    """
    check_depth(initial, max_length)
    if stats is None:
        stats = SearchStats()

    full = puzzle.full_mask
    stats.observe(initial)
    if initial.mask == full:
        stats.solutions += 1
        yield initial
        return
    if initial.length >= max_length:
        stats.pruned_length += 1
        return

    stack: List[Frame] = [(initial, iter(index.candidates(initial.last)))]
    while stack:
        chain, cursor = stack[-1]
        word = next(cursor, None)
        if word is None:
            stack.pop()
            continue

        if not allow_no_progress and not (word.mask & ~chain.mask):
            stats.pruned_no_progress += 1
            continue

        child = chain.extend(word)
        stats.expanded += 1
        stats.observe(child)

        if child.mask == full:
            stats.solutions += 1
            yield child
            continue

        remaining = max_length - child.length
        if remaining <= 0:
            stats.pruned_length += 1
            continue

        missing = bin(full & ~child.mask).count("1")
        if missing > remaining * index.max_gain:
            stats.pruned_feasibility += 1
            continue

        stack.append((child, iter(index.candidates(child.last))))

    logger.debug(
        "Search to depth %d done: expanded=%d solutions=%d pruned(no_progress=%d, length=%d, feasibility=%d)",
        max_length, stats.expanded, stats.solutions,
        stats.pruned_no_progress, stats.pruned_length, stats.pruned_feasibility,
    )


def solve_shortest_first(
    puzzle: Puzzle,
    index: WordIndex,
    initial: Chain,
    max_length: int,
    allow_no_progress: bool = False,
    stats: Optional[SearchStats] = None,
) -> Iterator[Chain]:
    """
    Same solutions as solve_chains, but every solution of d words comes
    before any solution of d + 1 words.
    Work counters in `stats` add up over the deepening passes; `solutions`
    counts only the chains yielded here.
    """
    check_depth(initial, max_length)
    if stats is None:
        stats = SearchStats()

    for depth in range(max(initial.length, 1), max_length + 1):
        for chain in solve_chains(puzzle, index, initial, depth, allow_no_progress, stats):
            if chain.length == depth:
                yield chain
            else:
                # already yielded by a shallower pass
                stats.solutions -= 1
