"""
Smoke test client for a running upload validator function
Usage: upload-validator-smoke [function-url]
"""
import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import requests
from .config import config


def build_scenarios() -> List[Dict[str, Any]]:
    """Requests to send, each with the status code the function should answer with"""
    created_at = datetime.now(timezone.utc).isoformat()
    text_content = (
        "Test file for upload validation\n"
        f"Created at: {created_at}\n"
        "Content type: text/plain"
    )
    json_content = json.dumps({"test": "data", "timestamp": created_at})

    return [
        {
            "name": "Valid file upload",
            "method": "POST",
            "kwargs": {"files": {"file": ("test-upload.txt", text_content, "text/plain")}},
            "expected_status": 200
        },
        {
            "name": "JSON file upload",
            "method": "POST",
            "kwargs": {"files": {"file": ("test.json", json_content, "application/json")}},
            "expected_status": 200
        },
        {
            "name": "Missing file field",
            "method": "POST",
            "kwargs": {"files": {"notfile": (None, "data")}},
            "expected_status": 400
        },
        {
            "name": "Wrong content type",
            "method": "POST",
            "kwargs": {"json": {"invalid": "data"}},
            "expected_status": 400
        },
        {
            "name": "GET request",
            "method": "GET",
            "kwargs": {},
            "expected_status": 405
        },
        {
            "name": "CORS preflight",
            "method": "OPTIONS",
            "kwargs": {"headers": {
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type"
            }},
            "expected_status": 200
        },
        {
            "name": "Empty file",
            "method": "POST",
            "kwargs": {"files": {"file": ("empty.txt", b"", "text/plain")}},
            "expected_status": 400
        },
    ]


def run_scenario(url: str, scenario: Dict[str, Any], timeout: float = 30) -> bool:
    """Send one scenario request, print the outcome, and report whether the status matched"""
    print(f"--- {scenario['name']} ---")
    try:
        response = requests.request(scenario["method"], url, timeout=timeout, **scenario["kwargs"])
    except requests.RequestException as e:
        logging.error(f"Request failed for '{scenario['name']}': {str(e)}")
        return False

    print(f"Status: {response.status_code} (expected {scenario['expected_status']})")
    if response.content:
        try:
            print(json.dumps(response.json(), indent=2))
        except ValueError:
            print(response.text)
    else:
        cors = {k: v for k, v in response.headers.items() if k.lower().startswith('access-control-')}
        print(f"CORS headers: {cors}")

    return response.status_code == scenario["expected_status"]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Send sample uploads to the upload validator function")
    parser.add_argument("url", nargs="?", default=None, help="Function URL (defaults to UPLOAD_FUNCTION_URL)")
    args = parser.parse_args(argv)

    url = args.url or config.function_url
    print(f"Function URL: {url} (environment: {config.environment})\n")

    failures = []
    for scenario in build_scenarios():
        if not run_scenario(url, scenario):
            failures.append(scenario["name"])
        print()

    if failures:
        print(f"Failed scenarios: {', '.join(failures)}")
        return 1

    print("All scenarios returned the expected status")
    return 0


if __name__ == "__main__":
    sys.exit(main())
