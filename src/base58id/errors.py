"""
base58id 예외 계층
모두 입력 검증 실패이므로 재시도 대상이 아님.
"""


class Base58IdError(ValueError):
    """base58id 관련 모든 오류의 기반 클래스."""


class DecodeError(Base58IdError):
    """문자열 -> 정수 변환 실패."""


class EmptyInputError(DecodeError):
    def __init__(self):
        super().__init__("empty base58 value")


class InvalidCharacterError(DecodeError):
    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"invalid base58 character {char!r} at position {position}")


class DecodeOverflowError(DecodeError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"base58 value out of range for uint64: {text!r}")


class RangeError(Base58IdError):
    """부호 있는/없는 64비트 경계를 벗어난 값."""

    def __init__(self, value: int, message: str):
        self.value = value
        super().__init__(message)


class NegativeValueError(RangeError):
    def __init__(self, value: int):
        super().__init__(value, f"negative value cannot be a base58id: {value}")


class ExceedsSignedRangeError(RangeError):
    def __init__(self, value: int):
        super().__init__(value, f"value out of range for bigint: {value}")


class ExceedsUnsignedRangeError(RangeError):
    def __init__(self, value: int):
        super().__init__(value, f"value out of range for uint64: {value}")


class WireFormatError(Base58IdError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"base58id wire value must be 8 bytes, got {length}")
