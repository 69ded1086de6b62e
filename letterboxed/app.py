from __future__ import annotations
import logging
from dataclasses import asdict, dataclass
from itertools import islice
from typing import Any, Dict, Iterator, List, Sequence, Union
from .dictionary import filter_words
from .errors import LetterBoxedError
from .formatter import DEFAULT_LIMIT, format_solutions
from .grid import build_puzzle
from .io_utils import parse_prior_words
from .prefix import seed_chain
from .search import check_depth, solve_chains, solve_shortest_first
from .types import Chain, SearchStats

logger = logging.getLogger(__name__)


@dataclass
class SolveParams:
    max_words: int = 2
    max_results: int = DEFAULT_LIMIT
    allow_no_progress: bool = False     # keep words that add no new letter
    shortest_first: bool = False
    delimiter: str = " "


def error_response(message: str, error_type: str) -> Dict[str, Any]:
    return {
        "ok": False,
        "error": message,
        "error_type": error_type,
        "text": f"Error: {message}",
    }


def solve_letter_boxed(
    sides: Sequence[str],
    prior_words: Union[str, Sequence[str]],
    corpus: Sequence[str],
    params: SolveParams,
) -> Dict[str, Any]:
    # shared by main.py and web/app.py; domain errors come back as ok=False dicts

    if isinstance(prior_words, str):
        prior = parse_prior_words(prior_words)
    else:
        prior = [w.strip().upper() for w in prior_words if w.strip()]

    if len(sides) != 4:
        return error_response(f"Expected 4 sides, got {len(sides)}.", "ConfigError")
    if params.max_results < 1:
        return error_response(f"Result limit must be positive, got {params.max_results}.", "ConfigError")

    try:
        puzzle = build_puzzle(*sides)
        check_depth(Chain(), params.max_words)
        index = filter_words(corpus, puzzle)
        initial = seed_chain(puzzle, index, prior)
        check_depth(initial, params.max_words)
    except LetterBoxedError as exc:
        logger.debug("Rejected request: %s", exc)
        return error_response(str(exc), type(exc).__name__)

    # lazy search, pulled only up to max_results
    stats = SearchStats()
    search = solve_shortest_first if params.shortest_first else solve_chains
    found: Iterator[Chain] = search(
        puzzle, index, initial, params.max_words,
        allow_no_progress=params.allow_no_progress, stats=stats,
    )
    solutions: List[Chain] = list(islice(found, params.max_results))

    text = format_solutions(solutions, puzzle, limit=params.max_results, delimiter=params.delimiter, stats=stats)

    # JSON-friendly: plain lists and ints only
    resp: Dict[str, Any] = {
        "ok": True,
        "sides": list(puzzle.sides),
        "prior_words": list(initial.texts()),
        "params": asdict(params),
        "candidate_stats": {
            "corpus_size": len(corpus),
            "usable_words": len(index),
            "expanded": stats.expanded,
            "pruned_no_progress": stats.pruned_no_progress,
            "pruned_length": stats.pruned_length,
            "pruned_feasibility": stats.pruned_feasibility,
        },
        "solutions": [
            {"words": list(c.texts()), "covered": c.covered, "length": c.length}
            for c in solutions
        ],
        "text": text,
    }

    if not solutions and stats.best.words:
        resp["closest"] = {"words": list(stats.best.texts()), "covered": stats.best.covered}
    return resp


def solve_to_text(
    side1: str,
    side2: str,
    side3: str,
    side4: str,
    prior_words: str,
    max_words: int,
    corpus: Sequence[str],
    max_results: int = DEFAULT_LIMIT,
) -> str:
    params = SolveParams(max_words=max_words, max_results=max_results)
    return solve_letter_boxed([side1, side2, side3, side4], prior_words, corpus, params)["text"]
