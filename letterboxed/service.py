from __future__ import annotations
import logging
import os
from functools import lru_cache
from typing import Tuple
from dotenv import load_dotenv
from .io_utils import load_wordlist

logger = logging.getLogger(__name__)

WORDLIST_ENV = "LETTERBOXED_WORDLIST"
DEFAULT_WORDLIST = "words.txt"


def wordlist_path() -> str:
    load_dotenv(os.getenv("DOTENV_PATH", ".env"), override=False)
    return os.getenv(WORDLIST_ENV, DEFAULT_WORDLIST)


@lru_cache(maxsize=1)
def get_corpus() -> Tuple[str, ...]:
    # Load once (file read). Shared read-only by every request.
    path = wordlist_path()
    corpus = tuple(load_wordlist(path))
    logger.info("Loaded %d words from %s", len(corpus), path)
    return corpus
