"""
바이너리 전송 형식: 8바이트 big-endian(네트워크 순서) 부호 없는 정수
텍스트 코덱을 거치지 않는다.
"""

import struct

from .scalar import as_uint64
from .errors import WireFormatError

_WIRE = struct.Struct("!Q")
WIRE_SIZE = _WIRE.size


def send(value: int) -> bytes:
    return _WIRE.pack(as_uint64(value))


def recv(data: bytes) -> int:
    if len(data) != WIRE_SIZE:
        raise WireFormatError(len(data))
    return _WIRE.unpack(bytes(data))[0]


def to_hex(value: int) -> str:
    """로그/응답용 16자리 hex 표현."""
    return send(value).hex()
