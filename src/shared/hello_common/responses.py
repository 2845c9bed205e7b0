"""API Gateway proxy response helpers."""

from typing import Any, Dict, Optional

from pydantic import BaseModel

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token",
    "Access-Control-Allow-Methods": "OPTIONS,GET",
}


def build_response(
    status_code: int,
    body: BaseModel,
    request_id: str,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Create an API Gateway proxy response with a JSON body."""

    response_headers = {
        "Content-Type": "application/json",
        "X-Request-ID": request_id,
        **CORS_HEADERS,
    }
    if headers:
        response_headers.update(headers)

    return {
        "statusCode": status_code,
        "headers": response_headers,
        "body": body.model_dump_json(),
    }
