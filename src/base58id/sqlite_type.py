"""
SQLite 컬럼 타입 등록 (BASE58ID)

저장 형식은 8바이트 big-endian BLOB. BLOB 비교(memcmp) 순서가
부호 없는 정수 순서와 같으므로 ORDER BY / 인덱스가 그대로 동작한다.
"""

import sqlite3
from functools import wraps

from . import wire
from .codec import decode, encode
from .scalar import Base58Id, compare, from_signed, stable_hash, to_signed

DECLTYPE = "BASE58ID"


def _adapt(value: Base58Id) -> bytes:
    return wire.send(value)


def _convert(data: bytes) -> Base58Id:
    return Base58Id(wire.recv(data))


def register_types() -> None:
    """Base58Id <-> BLOB 어댑터/컨버터 등록 (프로세스 전역, 여러 번 호출해도 무방)."""
    sqlite3.register_adapter(Base58Id, _adapt)
    sqlite3.register_converter(DECLTYPE, _convert)


def _strict(func):
    """NULL 인자가 하나라도 있으면 NULL 반환 (PostgreSQL STRICT 함수와 동일)."""
    @wraps(func)
    def wrapper(*args):
        if any(arg is None for arg in args):
            return None
        return func(*args)
    return wrapper


def _in(text):
    return wire.send(decode(text))


def _out(data):
    return encode(wire.recv(data))


def _to_bigint(data):
    return to_signed(wire.recv(data))


def _from_bigint(value):
    return wire.send(from_signed(value))


def _cmp(a, b):
    return compare(wire.recv(a), wire.recv(b))


def _hash(data):
    # SQLite INTEGER 는 signed 64비트라서 상위 비트를 버린다
    return stable_hash(wire.recv(data)) >> 1


_FUNCTIONS = (
    ("base58id_in", 1, _in),
    ("base58id_out", 1, _out),
    ("base58id_to_bigint", 1, _to_bigint),
    ("bigint_to_base58id", 1, _from_bigint),
    ("base58id_cmp", 2, _cmp),
    ("base58id_hash", 1, _hash),
)


def install_functions(conn: sqlite3.Connection) -> None:
    """변환/비교 SQL 함수 등록. 잘못된 입력은 sqlite3.OperationalError 로 올라온다."""
    for name, nargs, func in _FUNCTIONS:
        conn.create_function(name, nargs, _strict(func), deterministic=True)


def connect(path: str) -> sqlite3.Connection:
    register_types()
    conn = sqlite3.connect(path, detect_types=sqlite3.PARSE_DECLTYPES)
    install_functions(conn)
    return conn
