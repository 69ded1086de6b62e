from __future__ import annotations
import re
from pathlib import Path
from typing import List, Union

_split_re = re.compile(r"[\s,]+")


def parse_sides(text: str) -> List[str]:
    """
    Parse the four sides from raw text.
    Rules:
    - Prefer newline-separated sides
    - If there are no newlines, allow comma- or space-separated sides
    - Normalize by stripping and uppercasing
    Validation (count, length, letters) is left to build_puzzle.
    """
    raw = text.strip()

    if "\n" in raw:
        parts = [line.strip() for line in raw.splitlines()]
    else:
        parts = _split_re.split(raw)

    return [p.upper() for p in parts if p]


def parse_prior_words(text: str) -> List[str]:
    # whitespace and/or comma separated
    return [p.upper() for p in _split_re.split(text.strip()) if p]


def load_wordlist(path: Union[str, Path]) -> List[str]:
    """
    Read a word list, one word per line. Blank lines and lines starting
    with '#' are skipped; order is preserved.
    """
    words: List[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            w = line.strip()
            if not w or w.startswith("#"):
                continue
            words.append(w.upper())
    return words
