"""
AWS-specific utilities for photostat
"""
import json
import time
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .constants import HTTPConstants, UploadConstants, ErrorMessages
from .config import config


def create_response(status_code: int, body: str, event: Optional[dict] = None, headers: Optional[dict] = None) -> Dict[str, Any]:
    """
    Create standardized Lambda proxy response

    Args:
        status_code: HTTP status code
        body: Response body (JSON string)
        event: Original Lambda event for context
        headers: Additional headers

    Returns:
        Lambda proxy integration response
    """
    default_headers = {
        HTTPConstants.CONTENT_TYPE: HTTPConstants.JSON,
        HTTPConstants.ACCESS_CONTROL_ALLOW_ORIGIN: _allowed_origin(event),
        HTTPConstants.ACCESS_CONTROL_ALLOW_HEADERS: 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token',
        HTTPConstants.ACCESS_CONTROL_ALLOW_METHODS: 'POST,OPTIONS'
    }

    if headers:
        default_headers.update(headers)

    return {
        'statusCode': status_code,
        'headers': default_headers,
        'body': body
    }


def create_error_response(status_code: int, message: str, event: Optional[dict] = None, details: Optional[dict] = None) -> Dict[str, Any]:
    """
    Create standardized error response

    The body always carries an ``error`` field with the message.
    """
    error_body = {
        'success': False,
        'error': message,
        'timestamp': datetime.now(timezone.utc).isoformat()
    }

    if details:
        error_body.update(details)

    return create_response(status_code, json.dumps(error_body), event)


def _allowed_origin(event: Optional[dict]) -> str:
    allowed = config.cors_allowed_origins
    if '*' in allowed:
        return '*'

    origin = None
    if isinstance(event, dict):
        headers = event.get('headers') or {}
        origin = headers.get('origin') or headers.get('Origin')

    if origin in allowed:
        return origin
    return allowed[0] if allowed else '*'


def parse_request_body(event: dict) -> Dict[str, Any]:
    """
    Extract the JSON body from an API Gateway event or a direct invocation

    Raises:
        ValueError: If the body is not valid JSON or not an object
    """
    if not isinstance(event, dict):
        raise ValueError(ErrorMessages.INVALID_JSON)

    if 'body' not in event:
        # Direct invocation: the event itself is the payload
        return dict(event)

    body = event['body']
    if body is None or body == '':
        return {}
    if isinstance(body, dict):
        return body

    try:
        parsed = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        raise ValueError(ErrorMessages.INVALID_JSON)

    if not isinstance(parsed, dict):
        raise ValueError(ErrorMessages.INVALID_JSON)
    return parsed


def generate_upload_key(filename: str, prefix: Optional[str] = None, now_ms: Optional[int] = None) -> str:
    """
    Generate S3 key for a guest upload

    The millisecond timestamp namespaces the original filename, which is kept
    intact as the key suffix.

    Args:
        filename: Original filename as selected by the guest
        prefix: Key prefix (default from config)
        now_ms: Epoch milliseconds (default: current time)

    Returns:
        S3 object key, e.g. ``uploads/1740900000000-party.jpg``
    """
    if prefix is None:
        prefix = config.upload_key_prefix
    if now_ms is None:
        now_ms = int(time.time() * 1000)

    name = f"{now_ms}-{filename}"
    return f"{prefix.strip('/')}/{name}" if prefix else name


def generate_public_url(bucket_name: str, region: str, s3_key: str) -> str:
    """
    Public URL of an uploaded object, derived from bucket/region/key only
    """
    return UploadConstants.PUBLIC_URL_TEMPLATE.format(bucket=bucket_name, region=region, key=s3_key)
