"""Tests for catalog_ci.updates.config ensuring env defaults and CLI overrides work.

Run with coverage to validate configuration handling:
    pytest tests/test_update_config.py --maxfail=1 -v --cov=catalog_ci.updates.config --cov-report=term-missing
"""

from pathlib import Path

from catalog_ci.env import env_flag
from catalog_ci.updates import config


def test_defaults_without_environment(monkeypatch):
    for name in ("REPOSITORIES_DIR", "DETAILED_OUTPUT", "ONLY_SHOW_UPDATES"):
        monkeypatch.delenv(name, raising=False)
    settings = config.resolve_settings(config.parse_args([]))
    assert settings.repositories_dir == Path("./repositories")
    assert settings.declaration_filename == "metadata.json"
    assert settings.detailed_output is False
    assert settings.only_show_updates is False


def test_environment_flags(monkeypatch):
    monkeypatch.setenv("REPOSITORIES_DIR", "/srv/catalog")
    monkeypatch.setenv("DETAILED_OUTPUT", "true")
    monkeypatch.setenv("ONLY_SHOW_UPDATES", "false")
    settings = config.resolve_settings(config.parse_args([]))
    assert settings.repositories_dir == Path("/srv/catalog")
    assert settings.detailed_output is True
    assert settings.only_show_updates is False


def test_cli_flags_override(monkeypatch):
    monkeypatch.delenv("ONLY_SHOW_UPDATES", raising=False)
    args = config.parse_args(["--repositories-dir", "x", "--only-updates", "--detailed"])
    settings = config.resolve_settings(args)
    assert settings.repositories_dir == Path("x")
    assert settings.only_show_updates is True
    assert settings.detailed_output is True


def test_env_flag_values(monkeypatch):
    monkeypatch.setenv("SOME_FLAG", "TRUE")
    assert env_flag("SOME_FLAG") is True
    monkeypatch.setenv("SOME_FLAG", "no")
    assert env_flag("SOME_FLAG") is False
    monkeypatch.delenv("SOME_FLAG")
    assert env_flag("SOME_FLAG", default=True) is True
