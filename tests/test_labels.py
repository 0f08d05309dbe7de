"""Tests for catalog_ci.labels.cleanup covering skip paths and label removal.

Run with:
    pytest tests/test_labels.py --maxfail=1 -v --cov=catalog_ci.labels.cleanup --cov-report=term-missing
"""

import json
from unittest.mock import patch

import pytest

from catalog_ci.github.http_client import GitHubAPIError
from catalog_ci.labels import cleanup


def _env(tmp_path, merged=True, number=42, event_name="pull_request"):
    event = tmp_path / "event.json"
    event.write_text(json.dumps({"pull_request": {"number": number, "merged": merged}}))
    return {
        "GITHUB_EVENT_NAME": event_name,
        "GITHUB_TOKEN": "tok",
        "GITHUB_REPOSITORY": "acme/catalog",
        "GITHUB_EVENT_PATH": str(event),
    }


def test_merged_pr_number():
    assert cleanup.merged_pr_number({"pull_request": {"number": 3, "merged": True}}) == 3
    assert cleanup.merged_pr_number({"pull_request": {"number": 3, "merged": False}}) is None
    assert cleanup.merged_pr_number({}) is None


@patch("catalog_ci.labels.cleanup.paged_get")
def test_skips_non_pull_request_events(mock_paged, tmp_path, capsys):
    assert cleanup.cleanup_merged_pr(_env(tmp_path, event_name="push")) == []
    assert "not a pull request" in capsys.readouterr().out
    mock_paged.assert_not_called()


@patch("catalog_ci.labels.cleanup.paged_get")
def test_skips_without_credentials(mock_paged, tmp_path):
    env = _env(tmp_path)
    env.pop("GITHUB_TOKEN")
    assert cleanup.cleanup_merged_pr(env) == []
    mock_paged.assert_not_called()


@patch("catalog_ci.labels.cleanup.paged_get")
def test_skips_closed_but_unmerged(mock_paged, tmp_path, capsys):
    assert cleanup.cleanup_merged_pr(_env(tmp_path, merged=False)) == []
    assert "not merged" in capsys.readouterr().out
    mock_paged.assert_not_called()


@patch("catalog_ci.labels.cleanup.paged_get")
def test_skips_unreadable_event_and_missing_number(mock_paged, tmp_path):
    env = _env(tmp_path)
    env["GITHUB_EVENT_PATH"] = str(tmp_path / "missing.json")
    assert cleanup.cleanup_merged_pr(env) == []

    env = _env(tmp_path)
    env.pop("GITHUB_EVENT_PATH")
    assert cleanup.cleanup_merged_pr(env) == []
    mock_paged.assert_not_called()


@patch("catalog_ci.labels.cleanup.set_auth_header")
@patch("catalog_ci.labels.cleanup.github_request")
@patch("catalog_ci.labels.cleanup.paged_get")
def test_removes_only_present_triage_labels(mock_paged, mock_request, mock_auth, tmp_path, capsys):
    mock_paged.return_value = [{"name": "review required"}, {"name": "bug"}, {"name": "missing logo.png"}]
    removed = cleanup.cleanup_merged_pr(_env(tmp_path))
    assert removed == ["review required", "missing logo.png"]
    mock_auth.assert_called_once_with("tok")
    assert mock_paged.call_args.args[0].endswith("/repos/acme/catalog/issues/42/labels")
    urls = [call.args[1] for call in mock_request.call_args_list]
    assert all(call.args[0] == "DELETE" for call in mock_request.call_args_list)
    assert urls[0].endswith("/issues/42/labels/review%20required")
    out = capsys.readouterr().out
    assert "\"external contribution\" not found" in out
    assert "cleanup completed" in out


@patch("catalog_ci.labels.cleanup.set_auth_header")
@patch("catalog_ci.labels.cleanup.github_request")
@patch("catalog_ci.labels.cleanup.paged_get")
def test_failed_delete_is_reported_and_skipped(mock_paged, mock_request, mock_auth, tmp_path, capsys):
    mock_paged.return_value = [{"name": "review required"}, {"name": "external contribution"}]
    mock_request.side_effect = [GitHubAPIError("HTTP 403", url="u", status_code=403), None]
    removed = cleanup.cleanup_merged_pr(_env(tmp_path))
    assert removed == ["external contribution"]
    assert "[warn] could not remove \"review required\"" in capsys.readouterr().out


@patch("catalog_ci.labels.cleanup.set_auth_header")
@patch("catalog_ci.labels.cleanup.github_request")
@patch("catalog_ci.labels.cleanup.paged_get")
def test_label_listing_failure_stops_cleanup(mock_paged, mock_request, mock_auth, tmp_path):
    mock_paged.side_effect = GitHubAPIError("HTTP 500", url="u", status_code=500)
    assert cleanup.cleanup_merged_pr(_env(tmp_path)) == []
    mock_request.assert_not_called()


@patch("catalog_ci.labels.cleanup.cleanup_merged_pr", side_effect=RuntimeError("boom"))
def test_main_exits_on_unexpected_error(mock_cleanup):
    with pytest.raises(SystemExit) as excinfo:
        cleanup.main()
    assert excinfo.value.code == 1
