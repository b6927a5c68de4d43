"""Convert integers to and from sequences of words.

    >>> from wordcodes import encode, decode
    >>> decode(encode(5000))
    5000
"""
from .core.errors import (
    WordCodeError,
    AlphabetError,
    InvalidRangeError,
    InvalidArgumentsError,
    OutOfRangeError,
    LengthMismatchError,
    UnknownWordError,
)
from .schemas import Bounds, Unbounded, MinOnly, Range
from .services.codec import Codec, VARIABLE_LENGTH
from .utils.encoding import length, encode, decode, encode_phrase, decode_phrase

__all__ = [
    "Codec",
    "VARIABLE_LENGTH",
    "Bounds",
    "Unbounded",
    "MinOnly",
    "Range",
    "length",
    "encode",
    "decode",
    "encode_phrase",
    "decode_phrase",
    "WordCodeError",
    "AlphabetError",
    "InvalidRangeError",
    "InvalidArgumentsError",
    "OutOfRangeError",
    "LengthMismatchError",
    "UnknownWordError",
]
