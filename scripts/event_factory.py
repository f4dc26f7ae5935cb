"""Helpers to synthesise API Gateway HTTP API events and Lambda contexts for local invocations and tests."""

from __future__ import annotations

import base64
import datetime as dt
import json
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def make_apigw_v2_event(
    method: str = "POST",
    path: str = "/my/path",
    *,
    body: Optional[Any] = None,
    headers: Optional[Dict[str, str]] = None,
    query: Optional[Dict[str, str]] = None,
    cookies: Optional[List[str]] = None,
    is_base64_encoded: bool = False,
) -> Dict[str, Any]:
    """Return an API Gateway HTTP API (payload format 2.0) proxy event."""
    body_str = "" if body is None else body if isinstance(body, str) else json.dumps(body)
    encoded_body = (
        base64.b64encode(body_str.encode("utf-8")).decode("utf-8")
        if is_base64_encoded
        else body_str
    )
    query = query or {}
    now = dt.datetime.now(dt.timezone.utc)
    return {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": path,
        "rawQueryString": "&".join(f"{k}={v}" for k, v in query.items()),
        "cookies": cookies or [],
        "headers": headers or {},
        "queryStringParameters": query,
        "requestContext": {
            "accountId": "123456789012",
            "apiId": "api-id",
            "domainName": "id.execute-api.us-east-1.amazonaws.com",
            "domainPrefix": "id",
            "http": {
                "method": method.upper(),
                "path": path,
                "protocol": "HTTP/1.1",
                "sourceIp": "127.0.0.1",
                "userAgent": "agent",
            },
            "requestId": str(uuid.uuid4()),
            "routeKey": "$default",
            "stage": "$default",
            "time": now.strftime("%d/%b/%Y:%H:%M:%S +0000"),
            "timeEpoch": int(now.timestamp() * 1000),
        },
        "body": encoded_body,
        "pathParameters": {},
        "isBase64Encoded": is_base64_encoded,
        "stageVariables": {},
    }


@dataclass
class LambdaContext:
    """Stand-in for the context object the Python Lambda runtime passes to handlers."""

    function_name: str = "greeting"
    function_version: str = "$LATEST"
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:000000000000:function:greeting"
    memory_limit_in_mb: int = 128
    aws_request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    log_group_name: str = "/aws/lambda/greeting"
    log_stream_name: str = "local"
    timeout_seconds: int = 3
    _started: float = field(default_factory=time.monotonic, repr=False)

    def get_remaining_time_in_millis(self) -> int:
        elapsed = time.monotonic() - self._started
        return max(0, int((self.timeout_seconds - elapsed) * 1000))


def make_lambda_context(**overrides: Any) -> LambdaContext:
    return LambdaContext(**overrides)
