"""Shared test fixtures.

make_request  -- builds a real azure.functions.HttpRequest, letting requests
                 encode multipart bodies the same way a client would.
"""
import os
import pytest
import requests
import azure.functions as func

FUNCTION_URL = "http://localhost:7071/api/validate_upload"


def pytest_configure(config):
    """Keep function-level logging at INFO regardless of the developer's local settings."""
    os.environ.setdefault("LOG_LEVEL", "INFO")


def build_request(method="POST", url=FUNCTION_URL, files=None, data=None, json=None, headers=None):
    prepared = requests.Request(
        method, url, files=files, data=data, json=json, headers=headers
    ).prepare()
    body = prepared.body or b""
    if isinstance(body, str):
        body = body.encode("utf-8")
    return func.HttpRequest(
        method=method,
        url=url,
        headers=dict(prepared.headers),
        body=body,
    )


@pytest.fixture
def make_request():
    return build_request
