from __future__ import annotations
import argparse
import json
import logging
import sys
from time import perf_counter
from typing import List, Optional
from letterboxed.app import SolveParams, solve_letter_boxed
from letterboxed.errors import ConfigError
from letterboxed.grid import build_puzzle, is_solution, validate_chain
from letterboxed.io_utils import load_wordlist, parse_prior_words, parse_sides
from letterboxed.service import wordlist_path

logger = logging.getLogger("letterboxed.cli")


def read_sides_text(args: argparse.Namespace) -> str:
    if args.sides:
        return args.sides

    print("Enter the four sides (top, right, bottom, left), e.g. ABC,DEF,GHI,JKL:")
    return input()


def fail(msg: str) -> None:
    print(f"Input error: {msg}")
    raise SystemExit(1)


def run_check(sides: List[str], text: str) -> None:
    try:
        puzzle = build_puzzle(*sides)
    except ConfigError as exc:
        fail(str(exc))
        return

    words = parse_prior_words(text)
    if not validate_chain(puzzle, words):
        print(f"INVALID: {' '.join(words)} breaks the board rules.")
    elif not is_solution(puzzle, words):
        print(f"INCOMPLETE: {' '.join(words)} is valid but does not use every letter.")
    else:
        print(f"SOLVED: {' '.join(words)}")


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="NYT Letter Boxed solver (CLI)")
    parser.add_argument("--sides", type=str, help="Four sides as comma/space/newline separated text, e.g. ABC,DEF,GHI,JKL.")
    parser.add_argument("--prior", type=str, default="", help="Words the answer must start with.")
    parser.add_argument("--max-words", type=int, default=2, help="Maximum number of words in a solution.")
    parser.add_argument("--top-n", type=int, default=25, help="Number of solutions to print.")
    parser.add_argument("--wordlist", type=str, help="Word list file, one word per line (default: $LETTERBOXED_WORDLIST or words.txt).")
    parser.add_argument("--allow-repeats", action="store_true", help="Allow words that add no new letters.")
    parser.add_argument("--shortest-first", action="store_true", help="List shorter solutions before longer ones.")
    parser.add_argument("--check", type=str, help="Validate this answer instead of solving.")
    parser.add_argument("--json", action="store_true", help="Print JSON output.")
    parser.add_argument("--debug", action="store_true", help="Print debug diagnostics.")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    sides = parse_sides(read_sides_text(args))
    if len(sides) != 4:
        fail(f"Expected 4 sides, got {len(sides)}.")

    if args.check:
        run_check(sides, args.check)
        return

    path = args.wordlist or wordlist_path()
    try:
        corpus = load_wordlist(path)
    except FileNotFoundError:
        fail(f"Word list '{path}' not found.")
        return
    except (OSError, UnicodeDecodeError) as exc:
        fail(f"Word list '{path}' could not be read: {exc}")
        return
    logger.debug("Loaded %d words from %s", len(corpus), path)

    params = SolveParams(
        max_words=args.max_words,
        max_results=args.top_n,
        allow_no_progress=args.allow_repeats,
        shortest_first=args.shortest_first,
    )

    t0 = perf_counter()
    result = solve_letter_boxed(sides, args.prior, corpus, params)
    t1 = perf_counter()
    logger.debug("Solve completed in %.3f seconds", t1 - t0)

    if not result["ok"]:
        fail(result["error"])

    if args.json:
        print(json.dumps(result, indent=2))
        return

    print(result["text"])

    if args.debug:
        stats = result["candidate_stats"]
        print("\nDetails")
        print(f"Usable words: {stats['usable_words']} of {stats['corpus_size']}")
        print(f"Chains expanded: {stats['expanded']}")
        print(
            f"Pruned: no-progress {stats['pruned_no_progress']}, "
            f"length {stats['pruned_length']}, feasibility {stats['pruned_feasibility']}"
        )


if __name__ == "__main__":
    main(sys.argv[1:])
