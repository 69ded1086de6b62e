from __future__ import annotations
from itertools import islice
from typing import Iterable, List, Optional
from .types import Chain, Puzzle, SearchStats

DEFAULT_LIMIT = 25
NO_SOLUTION = "No solution found."


def format_chain(chain: Chain, puzzle: Puzzle, delimiter: str = " ") -> str:
    # "<covered>/<total> WORD WORD ..."
    score = f"{chain.covered}/{len(puzzle.letters)}"
    return delimiter.join((score,) + chain.texts())


def format_solutions(
    solutions: Iterable[Chain],
    puzzle: Puzzle,
    limit: int = DEFAULT_LIMIT,
    delimiter: str = " ",
    stats: Optional[SearchStats] = None,
) -> str:
    """
    Render at most `limit` solutions, one per line. Only the first `limit`
    items are pulled from `solutions`, so a lazy search stops there.
    """
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")

    lines: List[str] = [format_chain(c, puzzle, delimiter) for c in islice(solutions, limit)]
    if lines:
        return "\n".join(lines)

    out = NO_SOLUTION
    if stats is not None and stats.best.words:
        out += "\nClosest: " + format_chain(stats.best, puzzle, delimiter)
    return out
