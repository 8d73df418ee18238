"""
로컬 유닛 테스트 - Base58 고정폭 코덱 검증
"""

import sys
import os

import pytest

# src 경로 추가
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "src"))
from base58id import (
    ALPHABET,
    UINT64_MAX,
    WIDTH,
    DecodeOverflowError,
    EmptyInputError,
    ExceedsUnsignedRangeError,
    InvalidCharacterError,
    NegativeValueError,
    decode,
    encode,
    is_valid,
)

SAMPLES = [0, 1, 57, 58, 12345, 2**32 - 1, 2**63, UINT64_MAX]


def test_encode_decode_roundtrip():
    """encode -> decode 시 원래 숫자로 복원되는지 검증"""
    for num in SAMPLES:
        assert decode(encode(num)) == num, f"Failed for num={num}"


def test_encode_fixed_width():
    for num in SAMPLES + [58**k for k in range(11)] + [58**k - 1 for k in range(1, 11)]:
        assert len(encode(num)) == WIDTH


def test_encode_specific_values():
    """알려진 값 검증"""
    assert encode(0) == "11111111111"
    assert encode(1) == "11111111112"
    assert encode(57) == "1111111111z"
    assert encode(58) == "11111111121"
    assert encode(12345) == "111111114fr"


def test_encode_max_value_fits():
    encoded = encode(UINT64_MAX)
    assert len(encoded) == WIDTH
    assert encoded[0] != "1"
    assert decode(encoded) == UINT64_MAX


def test_decode_specific_values():
    """알려진 문자열 검증"""
    assert decode("1") == 0
    assert decode("2") == 1
    assert decode("z") == 57
    assert decode("21") == 58
    assert decode("4fr") == 12345


def test_leading_padding_has_no_magnitude():
    assert decode("1" * 50) == 0
    assert decode("1" * 40 + "4fr") == 12345
    assert decode("4fr") == decode(encode(12345))


def test_padding_never_collides():
    values = list(range(0, 58 * 58 + 5)) + SAMPLES
    encoded = {encode(v) for v in values}
    assert len(encoded) == len(set(values))


@pytest.mark.parametrize("text", ["0", "O", "I", "l"])
def test_decode_rejects_ambiguous_glyphs(text):
    with pytest.raises(InvalidCharacterError):
        decode(text)


def test_decode_reports_position():
    with pytest.raises(InvalidCharacterError) as exc:
        decode("11-1")
    assert exc.value.char == "-"
    assert exc.value.position == 2


def test_decode_rejects_non_ascii_and_case():
    for text in ["한", "ｚ", "1 1", "é", "\x00"]:
        with pytest.raises(InvalidCharacterError):
            decode(text)
    assert decode("a") != decode("A")


def test_decode_empty():
    with pytest.raises(EmptyInputError):
        decode("")


def test_decode_overflow():
    with pytest.raises(DecodeOverflowError):
        decode(ALPHABET[-1] * 12)
    # 11자여도 58**11 - 1 은 uint64 를 넘는다
    with pytest.raises(DecodeOverflowError):
        decode("z" * 11)
    with pytest.raises(DecodeOverflowError):
        decode(encode(UINT64_MAX) + "1")


def test_decode_boundary_does_not_overflow():
    assert decode("1" * 20 + encode(UINT64_MAX)) == UINT64_MAX


def test_encode_rejects_out_of_range():
    with pytest.raises(NegativeValueError):
        encode(-1)
    with pytest.raises(ExceedsUnsignedRangeError):
        encode(UINT64_MAX + 1)
    with pytest.raises(TypeError):
        encode(True)
    with pytest.raises(TypeError):
        encode("12")


def test_is_valid():
    assert is_valid("111111114fr")
    assert not is_valid("")
    assert not is_valid("0")
    assert not is_valid("z" * 12)
    assert not is_valid(None)


if __name__ == "__main__":
    test_encode_decode_roundtrip()
    test_encode_specific_values()
    test_decode_specific_values()
    print("All tests passed.")
