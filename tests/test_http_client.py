"""Unit tests for catalog_ci.github.http_client covering single-shot requests and pagination.

Execute with coverage to validate networking helpers:
    pytest tests/test_http_client.py --maxfail=1 -v --cov=catalog_ci.github.http_client --cov-report=term-missing
"""

from typing import Any, Dict
from unittest.mock import MagicMock, patch

import pytest
import requests

from catalog_ci.github import http_client


def _make_resp(status: int = 200, payload: Any = None, headers: Dict[str, str] | None = None):
    resp = MagicMock()
    resp.status_code = status
    resp.headers = headers or {}
    if payload is None:
        payload = {}
    resp.json.return_value = payload
    resp.text = str(payload)
    return resp


def test_log_http_error_handles_json_and_text(capsys):
    resp = _make_resp(403, {"message": "bad"})
    http_client.log_http_error(resp, "url")
    assert "bad" in capsys.readouterr().out

    resp = _make_resp(502)
    resp.json.side_effect = ValueError()
    resp.text = "plain"
    http_client.log_http_error(resp, "url")
    assert "plain" in capsys.readouterr().out


def test_set_auth_header_sets_and_clears():
    original = http_client.SESSION.headers.get("Authorization")
    try:
        http_client.set_auth_header("tok")
        assert http_client.SESSION.headers["Authorization"] == "token tok"
        http_client.set_auth_header(None)
        assert "Authorization" not in http_client.SESSION.headers
    finally:
        http_client.set_auth_header(original.split(" ", 1)[1] if original else None)


@patch("catalog_ci.github.http_client.SESSION")
def test_github_request_success(mock_session):
    mock_session.request.return_value = _make_resp(200, {"ok": 1})
    resp = http_client.github_request("GET", "https://api.github.com/x")
    assert resp.status_code == 200
    assert mock_session.request.call_args.kwargs["timeout"] == http_client.REQUEST_TIMEOUT


@patch("catalog_ci.github.http_client.log_http_error")
@patch("catalog_ci.github.http_client.SESSION")
def test_github_request_raises_on_error_status(mock_session, mock_log):
    mock_session.request.return_value = _make_resp(404, {"message": "Not Found"})
    with pytest.raises(http_client.GitHubAPIError) as excinfo:
        http_client.github_request("GET", "url")
    assert excinfo.value.status_code == 404
    assert excinfo.value.url == "url"
    mock_log.assert_called_once()


@patch("catalog_ci.github.http_client.SESSION")
def test_github_request_does_not_retry_transport_errors(mock_session):
    mock_session.request.side_effect = [
        requests.ConnectionError("boom"),
        _make_resp(200, {"ok": 1}),
    ]
    with pytest.raises(http_client.GitHubAPIError) as excinfo:
        http_client.github_request("GET", "url")
    assert excinfo.value.status_code is None
    assert mock_session.request.call_count == 1


@patch("catalog_ci.github.http_client.SESSION")
def test_github_request_waits_on_gate(mock_session, monkeypatch):
    gate = MagicMock()
    monkeypatch.setattr(http_client, "REQUEST_GATE", gate)
    mock_session.request.return_value = _make_resp(200, {})
    http_client.github_request("GET", "url")
    http_client.github_request("GET", "url")
    assert gate.wait.call_count == 2


@patch("catalog_ci.github.http_client.github_request")
def test_get_json_rejects_non_json_body(mock_request):
    resp = _make_resp(200)
    resp.json.side_effect = ValueError("no json")
    mock_request.return_value = resp
    with pytest.raises(http_client.GitHubAPIError):
        http_client.get_json("url")


@patch("catalog_ci.github.http_client.get_json")
def test_paged_get_accumulates_until_short_page(mock_get, monkeypatch):
    monkeypatch.setattr(http_client, "PER_PAGE", 2)
    mock_get.side_effect = [[{"id": 1}, {"id": 2}], [{"id": 3}]]
    results = http_client.paged_get("url", {"state": "all"})
    assert [entry["id"] for entry in results] == [1, 2, 3]
    pages = [call.args[1]["page"] for call in mock_get.call_args_list]
    assert pages == [1, 2]
    assert mock_get.call_args_list[0].args[1]["state"] == "all"


@patch("catalog_ci.github.http_client.get_json")
def test_paged_get_stops_on_empty_page(mock_get, monkeypatch):
    monkeypatch.setattr(http_client, "PER_PAGE", 2)
    mock_get.side_effect = [[{"id": 1}, {"id": 2}], []]
    assert len(http_client.paged_get("url")) == 2
    assert mock_get.call_count == 2
