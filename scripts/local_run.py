#!/usr/bin/env python3
"""
로컬 base58id 확인용 스크립트 (AWS 없이 SQLite + Python만 사용)

사용법:
  python3 scripts/local_run.py encode 12345
  python3 scripts/local_run.py decode 111111114fr
  python3 scripts/local_run.py create "주문 #1"
  python3 scripts/local_run.py get <code>
"""

import argparse
import os
import sys
from typing import Optional

# 프로젝트 루트의 src 폴더를 경로에 추가 (base58id 임포트용)
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_SRC = os.path.join(_PROJECT_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from base58id import Base58Id, Base58IdError, decode, encode
from base58id.sqlite_type import connect

# SQLite DB 파일 위치 (기본: 프로젝트 루트)
DB_PATH = os.environ.get("BASE58ID_DB_PATH") or os.path.join(_PROJECT_ROOT, "local_ids.db")


def get_connection():
    """BASE58ID 타입/함수가 등록된 DB 연결 반환"""
    return connect(DB_PATH)


def init_db(conn):
    """처음 실행 시 테이블 생성"""
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS ids (
            id BASE58ID PRIMARY KEY,
            label TEXT NOT NULL
        )
        """
    )
    conn.commit()


def create_id(label: str) -> str:
    """
    label 을 저장하고 새 11자 코드를 반환합니다.
    """
    label = (label or "").strip()
    if not label:
        raise ValueError("label을 입력해 주세요.")

    conn = get_connection()
    try:
        init_db(conn)
        # BLOB 정렬 == 부호 없는 정수 정렬
        row = conn.execute("SELECT id FROM ids ORDER BY id DESC LIMIT 1").fetchone()
        new_id = Base58Id((row[0].value if row else 0) + 1)
        conn.execute("INSERT INTO ids (id, label) VALUES (?, ?)", (new_id, label))
        conn.commit()
        print(f"  [Base58 인코딩] ID {new_id.value} → code \"{new_id}\"")
        return str(new_id)
    finally:
        conn.close()


def get_label(code: str) -> Optional[str]:
    """
    code 로 DB를 조회해 label 을 반환합니다.
    없거나 형식이 잘못되면 None을 반환합니다.
    """
    code = (code or "").strip()
    if not code:
        return None

    try:
        item_id = Base58Id.parse(code)
        print(f"  [Base58 디코딩] code \"{code}\" → ID {item_id.value}")
    except Base58IdError:
        return None

    conn = get_connection()
    try:
        init_db(conn)
        row = conn.execute("SELECT label FROM ids WHERE id = ?", (item_id,)).fetchone()
        return row[0] if row else None
    finally:
        conn.close()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="로컬 base58id: encode / decode / create(저장) / get(조회)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_encode = sub.add_parser("encode", help="정수를 11자 코드로 변환합니다")
    p_encode.add_argument("value", type=int, help="0 ~ 2^64-1 정수")

    p_decode = sub.add_parser("decode", help="코드를 정수로 변환합니다")
    p_decode.add_argument("code", help="Base58 코드 (예: 1111111111z)")

    p_create = sub.add_parser("create", help="label을 저장하고 code를 받습니다")
    p_create.add_argument("label", help="저장할 이름 (따옴표로 감싸서 입력)")

    p_get = sub.add_parser("get", help="code로 label을 조회합니다")
    p_get.add_argument("code", help="Base58 코드")

    args = parser.parse_args(argv)

    try:
        if args.command == "encode":
            print(encode(args.value))
        elif args.command == "decode":
            print(decode(args.code))
        elif args.command == "create":
            print(f"code: {create_id(args.label)}")
        elif args.command == "get":
            label = get_label(args.code)
            if label is None:
                print("찾을 수 없습니다.", file=sys.stderr)
                sys.exit(1)
            print(label)
    except ValueError as e:
        print(f"오류: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
