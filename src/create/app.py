import json
import os
import sys
from datetime import datetime

import boto3
from botocore.exceptions import ClientError

# --- 공통 모듈 설정 ---
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from base58id import Base58Id, RangeError, wire

# --- 리소스 초기화 ---
_COUNTER_KEY = "base58id"
_DYNAMO = None


def _get_table(env_name: str):
    """환경 변수에 설정된 DynamoDB 테이블 (첫 호출 때 리소스 생성)."""
    global _DYNAMO
    name = os.environ.get(env_name, "").strip()
    if not name:
        raise ValueError(f"{env_name} is not set in environment variables")
    if _DYNAMO is None:
        _DYNAMO = boto3.resource("dynamodb")
    return _DYNAMO.Table(name)


def _get_next_id() -> int:
    table = _get_table("COUNTER_TABLE_NAME")
    resp = table.update_item(
        Key={"counter_name": _COUNTER_KEY},
        UpdateExpression="SET #seq = if_not_exists(#seq, :zero) + :inc",
        ExpressionAttributeNames={"#seq": "seq"},
        ExpressionAttributeValues={":zero": 0, ":inc": 1},
        ReturnValues="UPDATED_NEW",
    )
    return int(resp["Attributes"]["seq"])


def _save_item(new_id: Base58Id, label: str | None) -> None:
    """레지스트리 테이블에 저장 (키는 11자 코드)"""
    table = _get_table("TABLE_NAME")
    table.put_item(
        Item={
            "code": str(new_id),
            "value": new_id.value,
            "label": label,
            "created_at": datetime.now().isoformat(),
        }
    )


def handler(event, context):
    try:
        body = json.loads(event.get("body") or "{}")
        if not isinstance(body, dict):
            return _response(400, {"error": "body must be a JSON object"})
        label = body.get("label")
        if label is not None and not isinstance(label, str):
            return _response(400, {"error": "label must be a string"})
        label = (label or "").strip() or None

        # 1. 카운터에서 다음 정수 할당 -> Base58Id
        new_id = Base58Id(_get_next_id())

        # 2. 저장
        _save_item(new_id, label)
        print(f"Issued {new_id} (value={new_id.value}, wire={wire.to_hex(new_id)})")

        return _response(200, {
            "code": str(new_id),
            "value": str(new_id.value),
            "hex": wire.to_hex(new_id),
            "label": label,
        })

    except json.JSONDecodeError:
        return _response(400, {"error": "body must be JSON"})
    except RangeError as e:
        print(f"Counter Error: {e}")
        return _response(500, {"error": "ID space exhausted"})
    except ClientError as e:
        print(f"AWS Error: {e.response['Error']['Message']}")
        return _response(500, {"error": "Internal Database Error"})
    except Exception as e:
        print(f"Unexpected Error: {str(e)}")
        return _response(500, {"error": str(e)})


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "*"
        },
        "body": json.dumps(body, ensure_ascii=False),
    }
