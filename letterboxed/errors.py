from __future__ import annotations


class LetterBoxedError(Exception):
    """Base class for every error raised while building or solving a puzzle."""


class ConfigError(LetterBoxedError):
    """The puzzle definition or the requested depth is malformed."""


class InvalidSideLength(ConfigError):
    def __init__(self, side_index: int, side: str) -> None:
        self.side_index = side_index
        self.side = side
        super().__init__(
            f"Side {side_index + 1} must have exactly 3 letters, got {len(side)} ({side!r})."
        )


class InvalidLetter(ConfigError):
    def __init__(self, side_index: int, side: str) -> None:
        self.side_index = side_index
        self.side = side
        super().__init__(f"Side {side_index + 1} contains a non A-Z character ({side!r}).")


class DuplicateLetter(ConfigError):
    def __init__(self, letter: str) -> None:
        self.letter = letter
        super().__init__(f"Letter {letter!r} appears more than once across the sides.")


class InvalidDepth(ConfigError):
    def __init__(self, max_length: int) -> None:
        self.max_length = max_length
        super().__init__(f"Max word count must be a positive integer, got {max_length}.")


class ValidationError(LetterBoxedError):
    """The prior-word sequence does not fit the puzzle."""


class UnknownWord(ValidationError):
    def __init__(self, word: str, position: int) -> None:
        self.word = word
        self.position = position
        super().__init__(
            f"Prior word #{position + 1} ({word!r}) is not a usable dictionary word for this puzzle."
        )


class BrokenChain(ValidationError):
    def __init__(self, previous: str, word: str, position: int) -> None:
        self.previous = previous
        self.word = word
        self.position = position
        super().__init__(
            f"Prior word #{position + 1} ({word!r}) must start with "
            f"{previous[-1]!r}, the last letter of {previous!r}."
        )


class DepthExceededByPrefix(ValidationError):
    def __init__(self, max_length: int, prefix_length: int) -> None:
        self.max_length = max_length
        self.prefix_length = prefix_length
        super().__init__(
            f"Max word count {max_length} is smaller than the {prefix_length} prior words supplied."
        )
