"""Runs the smoke client scenarios against the function in-process."""
import json
import requests
import validate_upload
from upload_validation import smoke
from conftest import build_request


class _FunctionResponse:
    """Just enough of requests.Response for the smoke client"""

    def __init__(self, resp):
        self.status_code = resp.status_code
        self.content = resp.get_body()
        self.headers = dict(resp.headers)

    @property
    def text(self):
        return self.content.decode("utf-8")

    def json(self):
        return json.loads(self.content)


def _call_function(method, url, timeout=None, **kwargs):
    return _FunctionResponse(validate_upload.main(build_request(method, url, **kwargs)))


def test_scenarios_match_expected_statuses(monkeypatch, capsys):
    monkeypatch.setattr(smoke.requests, "request", _call_function)
    assert smoke.main(["http://localhost:7071/api/validate_upload"]) == 0
    out = capsys.readouterr().out
    assert "All scenarios returned the expected status" in out
    assert "Valid file upload" in out
    assert "environment: " in out


def test_unreachable_function_fails(monkeypatch, capsys):
    def _refuse(method, url, timeout=None, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(smoke.requests, "request", _refuse)
    assert smoke.main(["http://localhost:1/api/validate_upload"]) == 1
    assert "Failed scenarios" in capsys.readouterr().out


def test_default_url_from_config(monkeypatch):
    seen = []

    def _record(method, url, timeout=None, **kwargs):
        seen.append(url)
        return _call_function(method, url, **kwargs)

    monkeypatch.setenv("UPLOAD_FUNCTION_URL", "http://example.test/api/validate_upload")
    monkeypatch.setattr(smoke.requests, "request", _record)
    smoke.main([])
    assert set(seen) == {"http://example.test/api/validate_upload"}
