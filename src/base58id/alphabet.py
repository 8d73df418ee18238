"""
Base58 알파벳 테이블 (Bitcoin 순서)
0, O, I, l 처럼 헷갈리는 문자는 제외.
"""

from types import MappingProxyType

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE = len(ALPHABET)
ZERO = ALPHABET[0]

INVALID = -1
_TABLE_SIZE = 128


def _build_index(alphabet: str) -> tuple:
    """ASCII 코드 -> 값 테이블 생성 (알파벳 밖은 INVALID)."""
    table = [INVALID] * _TABLE_SIZE
    for value, char in enumerate(alphabet):
        code = ord(char)
        if code >= _TABLE_SIZE or table[code] != INVALID:
            raise ValueError(f"alphabet character {char!r} is not unique ASCII")
        table[code] = value
    return tuple(table)


# 모듈 로드 시 한 번만 생성 (이후 읽기 전용)
_INDEX = _build_index(ALPHABET)
_INDEX_VIEW = MappingProxyType(
    {chr(code): value for code, value in enumerate(_INDEX) if value != INVALID}
)


def initialize():
    """역방향 인덱스 반환. 몇 번 호출해도 같은 객체를 돌려준다."""
    return _INDEX_VIEW


def value_of(char) -> int | None:
    """문자 하나의 값(0-57). 알파벳이 아니면 None."""
    if not isinstance(char, str) or len(char) != 1:
        return None
    code = ord(char)
    if code >= _TABLE_SIZE:
        return None
    value = _INDEX[code]
    return None if value == INVALID else value
