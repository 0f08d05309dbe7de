"""Tests for catalog_ci.secrets covering file loading and token resolution.

Run with:
    pytest tests/test_secrets.py --maxfail=1 -v --cov=catalog_ci.secrets --cov-report=term-missing
"""

import json

from catalog_ci import secrets


def test_load_local_secrets_missing_and_invalid(tmp_path):
    assert secrets.load_local_secrets(tmp_path / "absent.json") == {}
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    assert secrets.load_local_secrets(broken) == {}
    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]")
    assert secrets.load_local_secrets(listing) == {}


def test_load_local_secrets_honours_env_path(tmp_path, monkeypatch):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"github_tokens": ["a"]}))
    monkeypatch.setenv("LOCAL_SECRETS_FILE", str(path))
    assert secrets.load_local_secrets() == {"github_tokens": ["a"]}


def test_resolve_github_token_prefers_environment(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "from-env")
    assert secrets.resolve_github_token({"github_token": "from-file"}) == "from-env"


def test_resolve_github_token_falls_back_to_secrets(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    assert secrets.resolve_github_token({"github_token": " single "}) == "single"
    assert secrets.resolve_github_token({"github_tokens": ["", "second"]}) == "second"
    assert secrets.resolve_github_token({}) is None
