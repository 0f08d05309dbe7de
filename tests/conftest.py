"""Shared fixtures: keep tests off the real rate gate and credentials."""

import pytest

from catalog_ci.github import http_client
from catalog_ci.github.ratelimit import RateGate


@pytest.fixture(autouse=True)
def _no_request_spacing(monkeypatch):
    monkeypatch.setattr(http_client, "REQUEST_GATE", RateGate(0))
