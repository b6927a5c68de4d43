"""Errors raised by the word codec.

Everything derives from ``ValueError`` so callers that already guard bad input
with ``except ValueError`` keep working.
"""


class WordCodeError(ValueError):
    pass


class AlphabetError(WordCodeError):
    """The wordlist is unusable as a digit set (too short or not distinct)."""


class InvalidRangeError(WordCodeError):
    def __init__(self, min_val: int, max_val: int):
        self.min_val = min_val
        self.max_val = max_val
        super().__init__(f"invalid range ({min_val}, {max_val})")


class InvalidArgumentsError(WordCodeError):
    def __init__(self, count: int, detail: str = ""):
        self.count = count
        message = f"wrong number of bounds passed to Codec.new: {count}"
        if detail:
            message = f"invalid bounds: {detail}"
        super().__init__(message)


class OutOfRangeError(WordCodeError):
    def __init__(self, value: int, min_val: int, max_val: int, variable: bool = False):
        self.value = value
        self.min_val = min_val
        self.max_val = max_val
        if variable and value < min_val:
            message = f"{value} is less than minimum {min_val}"
        else:
            message = f"{value} is outside the range ({min_val}, {max_val})"
        super().__init__(message)


class LengthMismatchError(WordCodeError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} words, not {actual}")


class UnknownWordError(WordCodeError):
    def __init__(self, word: str):
        self.word = word
        super().__init__(f"unexpected word '{word}' found")
