"""
base58id: uint64 <-> 11자 고정폭 Base58 문자열
"""

from .alphabet import ALPHABET, BASE, initialize, value_of
from .codec import UINT64_MAX, WIDTH, decode, encode, is_valid
from .errors import (
    Base58IdError,
    DecodeError,
    DecodeOverflowError,
    EmptyInputError,
    ExceedsSignedRangeError,
    ExceedsUnsignedRangeError,
    InvalidCharacterError,
    NegativeValueError,
    RangeError,
    WireFormatError,
)
from .scalar import INT64_MAX, Base58Id, compare, from_signed, stable_hash, to_signed

__all__ = [
    "ALPHABET",
    "BASE",
    "INT64_MAX",
    "UINT64_MAX",
    "WIDTH",
    "Base58Id",
    "Base58IdError",
    "DecodeError",
    "DecodeOverflowError",
    "EmptyInputError",
    "ExceedsSignedRangeError",
    "ExceedsUnsignedRangeError",
    "InvalidCharacterError",
    "NegativeValueError",
    "RangeError",
    "WireFormatError",
    "compare",
    "decode",
    "encode",
    "from_signed",
    "initialize",
    "is_valid",
    "stable_hash",
    "to_signed",
    "value_of",
]
