"""Integer <-> word-sequence codec.

The alphabet is treated as the digit set of a base-L positional numeral system
(L = number of words). A Codec either covers a closed range with a fixed number
of words, or encodes anything above a minimum with as few words as possible.
"""
import logging
from typing import List, Optional, Sequence

from pydantic import BaseModel, ValidationError, model_validator

from wordcodes.core.errors import (
    InvalidArgumentsError,
    InvalidRangeError,
    LengthMismatchError,
    OutOfRangeError,
    UnknownWordError,
)
from wordcodes.schemas.bounds import (
    INT64_MAX,
    Bounds,
    Int64,
    MinOnly,
    Range,
    Unbounded,
    bounds_adapter,
)
from wordcodes.services import alphabet
from wordcodes.services.alphabet import normalize_word

logger = logging.getLogger(__name__)

VARIABLE_LENGTH = -1


def words_needed(span: int, base: int) -> int:
    """Smallest word count W with base**W > span."""
    word_count = 1
    while span >= base:
        word_count += 1
        span //= base
    return word_count


class Codec(BaseModel):
    word_count: int
    min_val: Int64
    max_val: Int64

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_invariants(self):
        if self.word_count == VARIABLE_LENGTH:
            if self.max_val != INT64_MAX:
                raise ValueError("a variable-length codec has no upper bound")
            return self
        if self.min_val >= self.max_val:
            raise ValueError(f"invalid range ({self.min_val}, {self.max_val})")
        expected = words_needed(self.max_val - self.min_val, alphabet.LIST_SIZE)
        if self.word_count != expected:
            raise ValueError(f"range ({self.min_val}, {self.max_val}) needs {expected} words, not {self.word_count}")
        return self

    @classmethod
    def unbounded(cls) -> "Codec":
        """Variable-length codec for any non-negative integer."""
        return cls.from_bounds(Unbounded())

    @classmethod
    def with_minimum(cls, min_val: int) -> "Codec":
        """Variable-length codec for any integer >= min_val."""
        return cls.from_bounds(MinOnly(min=min_val))

    @classmethod
    def for_range(cls, min_val: int, max_val: int) -> "Codec":
        """Fixed-length codec covering [min_val, max_val]."""
        return cls.from_bounds(Range(min=min_val, max=max_val))

    @classmethod
    def from_bounds(cls, bounds: Bounds) -> "Codec":
        if not isinstance(bounds, (Unbounded, MinOnly, Range)):
            try:
                bounds = bounds_adapter.validate_python(bounds)
            except ValidationError as e:
                raise InvalidArgumentsError(1, detail=repr(bounds)) from e

        if isinstance(bounds, Range):
            if bounds.min >= bounds.max:
                logger.debug("Rejected inverted range (%d, %d)", bounds.min, bounds.max)
                raise InvalidRangeError(bounds.min, bounds.max)
            codec = cls(
                word_count=words_needed(bounds.max - bounds.min, alphabet.LIST_SIZE),
                min_val=bounds.min,
                max_val=bounds.max,
            )
        elif isinstance(bounds, MinOnly):
            codec = cls(word_count=VARIABLE_LENGTH, min_val=bounds.min, max_val=INT64_MAX)
        else:
            codec = cls(word_count=VARIABLE_LENGTH, min_val=0, max_val=INT64_MAX)

        logger.debug("Created codec %s", codec)
        return codec

    @classmethod
    def new(cls, *bounds: int) -> "Codec":
        """
        Create a Codec from zero, one or two bounds.

        Two bounds (min, max) give fixed-length encodings adequate for every
        integer in that range. A single bound (min) gives variable-length
        encodings for any integer >= min. No bounds encodes any non-negative
        integer with variable length.

        Raises:
            InvalidRangeError: If min >= max
            InvalidArgumentsError: If more than two bounds, or a bound that is
                not a 64-bit integer, is passed
        """
        if len(bounds) == 0:
            data = {"mode": "unbounded"}
        elif len(bounds) == 1:
            data = {"mode": "min_only", "min": bounds[0]}
        elif len(bounds) == 2:
            data = {"mode": "range", "min": bounds[0], "max": bounds[1]}
        else:
            raise InvalidArgumentsError(len(bounds))

        try:
            parsed = bounds_adapter.validate_python(data)
        except ValidationError as e:
            raise InvalidArgumentsError(len(bounds), detail=str(bounds)) from e
        return cls.from_bounds(parsed)

    @property
    def is_variable(self) -> bool:
        return self.word_count == VARIABLE_LENGTH

    def length(self) -> int:
        """Fixed number of words per encoding, or -1 for variable length."""
        return self.word_count

    def encode(self, value: int) -> List[str]:
        """Convert an integer into a list of words."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Expected an integer, got {type(value).__name__}")
        if value < self.min_val or value > self.max_val:
            logger.debug("Rejected %d for codec %s", value, self)
            raise OutOfRangeError(value, self.min_val, self.max_val, variable=self.is_variable)

        if self.is_variable:
            return self._encode_variable(value - self.min_val)

        base = alphabet.LIST_SIZE
        value -= self.min_val
        result = [""] * self.word_count
        for position in range(self.word_count - 1, -1, -1):
            value, digit = divmod(value, base)
            result[position] = alphabet.word_at(digit)
        return result

    def _encode_variable(self, value: int) -> List[str]:
        base = alphabet.LIST_SIZE
        out = []
        while True:
            value, digit = divmod(value, base)
            out.append(alphabet.word_at(digit))
            if value == 0:
                return list(reversed(out))

    def decode(self, words: Sequence[str]) -> int:
        """Convert a list of words back into an integer."""
        reverse = alphabet.get_reverse_index()
        if not self.is_variable and len(words) != self.word_count:
            logger.debug("Rejected %d words for codec %s", len(words), self)
            raise LengthMismatchError(self.word_count, len(words))

        base = alphabet.LIST_SIZE
        result = 0
        for word in words:
            digit = reverse.get(word)
            if digit is None:
                logger.debug("Unknown word %r in %r", word, list(words))
                raise UnknownWordError(word)
            result = result * base + digit

        result += self.min_val
        if result > INT64_MAX:
            raise OutOfRangeError(result, self.min_val, INT64_MAX)
        return result

    def encode_phrase(self, value: int, separator: str = " ") -> str:
        return separator.join(self.encode(value))

    def decode_phrase(self, phrase: str, separator: Optional[str] = None) -> int:
        """Decode words joined into one string. Splits on whitespace by default."""
        return self.decode([normalize_word(w) for w in phrase.split(separator)])
