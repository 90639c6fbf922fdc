"""Pytest configuration and fixtures for Kanban Flow tests.

IMPORTANT: Environment variables must be set BEFORE importing kanban_flow
modules, as the state module loads configuration at import time.
"""

from __future__ import annotations

import os

os.environ.setdefault("GITHUB_TOKEN", "test-github-token")
os.environ.setdefault("GITHUB_OWNER", "test-org")

import pytest


@pytest.fixture
def fixed_clock(monkeypatch):
    """Pin the millisecond clock used when no task id is supplied."""
    import kanban_flow.branching.generator as generator_module

    monkeypatch.setattr(generator_module, "_clock_id", lambda: "1700000123456")
    return "123456"


@pytest.fixture
def github_client(mocker):
    """Patch the GitHub client factory and return the mock client.

    Tests queue responses via ``github_client.request.side_effect`` or
    ``return_value``; use ``make_response`` to build them.
    """
    mock_client = mocker.MagicMock()
    mock_client.__enter__ = mocker.MagicMock(return_value=mock_client)
    mock_client.__exit__ = mocker.MagicMock(return_value=False)
    mocker.patch("kanban_flow.github.api.get_github_client", return_value=mock_client)
    return mock_client


@pytest.fixture
def make_response(mocker):
    def _make(status_code: int, payload: object = None, text: str = ""):
        response = mocker.MagicMock()
        response.status_code = status_code
        response.json.return_value = payload
        response.text = text
        return response

    return _make


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Set up basic test environment."""
    monkeypatch.setenv("GITHUB_TOKEN", "test-github-token")
    monkeypatch.setenv("GITHUB_OWNER", "test-org")
