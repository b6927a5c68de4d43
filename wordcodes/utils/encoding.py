from typing import List, Optional, Sequence

from wordcodes.services.codec import Codec


def length(min_val: int, max_val: int) -> int:
    """Number of words needed to encode every integer in [min_val, max_val]."""
    return Codec.new(min_val, max_val).length()


def encode(value: int, *bounds: int) -> List[str]:
    """Encode value with a one-off Codec built from 0, 1 or 2 bounds."""
    return Codec.new(*bounds).encode(value)


def decode(words: Sequence[str], *bounds: int) -> int:
    """Decode words with a one-off Codec built from 0, 1 or 2 bounds."""
    return Codec.new(*bounds).decode(words)


def encode_phrase(value: int, *bounds: int, separator: str = " ") -> str:
    return Codec.new(*bounds).encode_phrase(value, separator=separator)


def decode_phrase(phrase: str, *bounds: int, separator: Optional[str] = None) -> int:
    return Codec.new(*bounds).decode_phrase(phrase, separator=separator)
