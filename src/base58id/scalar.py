"""
Base58Id 스칼라 타입
비교/동등/해시는 모두 인코딩된 문자열이 아니라 정수 값 기준.
"""

import hashlib
from functools import total_ordering

from .codec import check_uint64, decode, encode
from .errors import ExceedsSignedRangeError, NegativeValueError

INT64_MAX = (1 << 63) - 1


def compare(a: int, b: int) -> int:
    """3-way 비교: -1 / 0 / 1"""
    a, b = as_uint64(a), as_uint64(b)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def stable_hash(value: int) -> int:
    """8바이트 big-endian 값의 64비트 BLAKE2b 해시 (프로세스가 달라도 동일)."""
    raw = as_uint64(value).to_bytes(8, "big")
    return int.from_bytes(hashlib.blake2b(raw, digest_size=8).digest(), "big")


def to_signed(value: int) -> int:
    """uint64 -> bigint. INT64_MAX 를 넘으면 실패."""
    value = as_uint64(value)
    if value > INT64_MAX:
        raise ExceedsSignedRangeError(value)
    return value


def from_signed(value: int) -> int:
    """bigint -> uint64. 음수이거나 bigint 범위를 넘으면 실패."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"bigint value must be an int, got {type(value).__name__}")
    if value < 0:
        raise NegativeValueError(value)
    if value > INT64_MAX:
        raise ExceedsSignedRangeError(value)
    return value


@total_ordering
class Base58Id:
    __slots__ = ("_value",)

    def __init__(self, value: int):
        self._value = check_uint64(value)

    @classmethod
    def parse(cls, text: str) -> "Base58Id":
        return cls(decode(text))

    @classmethod
    def from_signed(cls, value: int) -> "Base58Id":
        return cls(from_signed(value))

    @property
    def value(self) -> int:
        return self._value

    def to_signed(self) -> int:
        return to_signed(self._value)

    def compare(self, other) -> int:
        return compare(self._value, as_uint64(other))

    def stable_hash(self) -> int:
        return stable_hash(self._value)

    def __int__(self):
        return self._value

    __index__ = __int__

    def __str__(self):
        return encode(self._value)

    def __repr__(self):
        return f"Base58Id({encode(self._value)!r})"

    def __eq__(self, other):
        if not isinstance(other, Base58Id):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, Base58Id):
            return NotImplemented
        return self._value < other._value

    def __hash__(self):
        return hash(self._value)


def as_uint64(other) -> int:
    """Base58Id 또는 int 를 uint64 정수로."""
    if isinstance(other, Base58Id):
        return other.value
    return check_uint64(other)
