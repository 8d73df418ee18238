"""
Base58 고정폭 인코딩/디코딩 (uint64 <-> 11자 문자열)
문자集: 1-9, A-Z (I, O 제외), a-z (l 제외)
"""

from .alphabet import ALPHABET, BASE, ZERO, value_of
from .errors import (
    DecodeOverflowError,
    EmptyInputError,
    ExceedsUnsignedRangeError,
    InvalidCharacterError,
    NegativeValueError,
)

UINT64_MAX = (1 << 64) - 1
# 58**11 > 2**64 이므로 11자리면 항상 충분
WIDTH = 11


def check_uint64(num) -> int:
    """uint64 범위의 정수인지 확인하고 그대로 반환."""
    if isinstance(num, bool) or not isinstance(num, int):
        raise TypeError(f"base58id value must be an int, got {type(num).__name__}")
    if num < 0:
        raise NegativeValueError(num)
    if num > UINT64_MAX:
        raise ExceedsUnsignedRangeError(num)
    return num


def encode(num: int) -> str:
    """정수 -> 11자 Base58 문자열"""
    num = check_uint64(num)
    if num == 0:
        digits = [ZERO]
    else:
        digits = []
        while num > 0:
            num, rem = divmod(num, BASE)
            digits.append(ALPHABET[rem])
    assert len(digits) <= WIDTH, "uint64 never needs more than 11 base58 digits"
    encoded = "".join(reversed(digits))
    return ZERO * (WIDTH - len(encoded)) + encoded


def decode(s: str) -> int:
    """Base58 문자열 -> 정수"""
    if not isinstance(s, str):
        raise TypeError(f"base58id text must be a str, got {type(s).__name__}")
    if not s:
        raise EmptyInputError()
    num = 0
    for pos, char in enumerate(s):
        digit = value_of(char)
        if digit is None:
            raise InvalidCharacterError(char, pos)
        # num * 58 + digit 가 UINT64_MAX 를 넘기 전에 중단
        if num > (UINT64_MAX - digit) // BASE:
            raise DecodeOverflowError(s)
        num = num * BASE + digit
    return num


def is_valid(s: str) -> bool:
    try:
        decode(s)
    except (TypeError, ValueError):
        return False
    return True
