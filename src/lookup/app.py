import json
import os
import sys
from decimal import Decimal

import boto3

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from base58id import Base58Id, DecodeError, wire

_DYNAMO = None


class DecimalEncoder(json.JSONEncoder):
    """DynamoDB 응답의 Decimal 타입을 JSON 직렬화 가능한 타입으로 변환."""
    def default(self, obj):
        if isinstance(obj, Decimal):
            # uint64 는 JS number 로 표현이 안 되므로 문자열로
            return str(int(obj)) if obj % 1 == 0 else float(obj)
        return super().default(obj)


def _get_table():
    global _DYNAMO
    name = os.environ.get("TABLE_NAME", "").strip()
    if not name:
        raise ValueError("TABLE_NAME is not set in environment variables")
    if _DYNAMO is None:
        _DYNAMO = boto3.resource("dynamodb")
    return _DYNAMO.Table(name)


def _get_item(item_id: Base58Id) -> dict | None:
    """레지스트리에서 정규화된 11자 코드로 조회."""
    resp = _get_table().get_item(Key={"code": str(item_id)})
    return resp.get("Item")


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, ensure_ascii=False, cls=DecimalEncoder),
    }


def handler(event, context):
    try:
        code = (event.get("pathParameters") or {}).get("code", "").strip()
        if not code:
            return _response(400, {"error": "code is required"})

        # 앞쪽 '1' 패딩이 빠진 코드도 같은 값으로 해석된다
        try:
            item_id = Base58Id.parse(code)
        except DecodeError as e:
            print(f"Invalid code {code!r}: {e}")
            return _response(400, {"error": f'invalid base58 value: "{code}"'})

        item = _get_item(item_id)
        if not item:
            return _response(404, {"error": "ID not found"})

        return _response(200, {
            **item,
            "code": str(item_id),
            "value": str(item_id.value),
            "hex": wire.to_hex(item_id),
        })

    except Exception as e:
        print(f"Handler Error: {e}")
        return _response(500, {"error": "Internal Server Error"})
