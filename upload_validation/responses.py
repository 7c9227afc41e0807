"""
Response bodies and HTTP responses for the upload endpoint
"""
import json
from datetime import datetime, timezone
from typing import Dict, Any
import azure.functions as func

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*'
}

PREFLIGHT_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'POST, OPTIONS',
    'Access-Control-Allow-Headers': 'Content-Type'
}


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def success_body(metadata: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "success": True,
        "file": metadata,
        "timestamp": utc_timestamp()
    }


def error_body(message: str) -> Dict[str, Any]:
    return {
        "success": False,
        "error": message,
        "timestamp": utc_timestamp()
    }


def json_response(body: Dict[str, Any], status_code: int) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps(body),
        status_code=status_code,
        headers=dict(CORS_HEADERS),
        mimetype="application/json"
    )


def error_response(message: str, status_code: int) -> func.HttpResponse:
    return json_response(error_body(message), status_code)


def preflight_response() -> func.HttpResponse:
    """CORS preflight answer, no body"""
    return func.HttpResponse(
        status_code=200,
        headers=dict(PREFLIGHT_HEADERS)
    )
