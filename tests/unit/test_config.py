"""Unit tests for configuration loading and GitHub config selection."""

from __future__ import annotations

import pytest

from kanban_flow.config import Config, select_github_config


@pytest.fixture
def base_config() -> Config:
    return Config(
        github_token="env-token",
        github_owner="env-org",
        github_domain="github.com",
        base_branch="main",
        log_level="INFO",
    )


def test_load_from_env(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "abc")
    monkeypatch.setenv("GITHUB_OWNER", "acme")
    monkeypatch.setenv("GITHUB_DOMAIN", "git.acme.internal")
    monkeypatch.setenv("GITHUB_BASE_BRANCH", "develop")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    config = Config.load_from_env()

    assert config.github_token == "abc"
    assert config.github_owner == "acme"
    assert config.github_domain == "git.acme.internal"
    assert config.base_branch == "develop"
    assert config.log_level == "DEBUG"


def test_load_from_env_defaults(monkeypatch):
    for name in ("GITHUB_TOKEN", "GITHUB_OWNER", "GITHUB_DOMAIN", "GITHUB_BASE_BRANCH", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("kanban_flow.config.load_dotenv", lambda *args, **kwargs: False)

    config = Config.load_from_env()

    assert config.github_token is None
    assert config.github_owner == "your-org"
    assert config.github_domain == "github.com"
    assert config.base_branch == "main"
    assert config.log_level == "INFO"


def test_require_token(base_config):
    assert base_config.require_token() == "env-token"
    base_config.github_token = None
    with pytest.raises(RuntimeError, match="GITHUB_TOKEN"):
        base_config.require_token()


def test_select_without_configs_returns_base(base_config):
    assert select_github_config(base_config) is base_config
    assert select_github_config(base_config, []) is base_config


def test_select_by_id(base_config):
    configs = [
        {"id": "a", "owner": "org-a", "token": "tok-a", "is_default": True},
        {"id": "b", "owner": "org-b", "token": "tok-b", "domain": "ghe.example.com"},
    ]
    selected = select_github_config(base_config, configs, "b")
    assert selected.github_owner == "org-b"
    assert selected.github_token == "tok-b"
    assert selected.github_domain == "ghe.example.com"
    assert selected.base_branch == "main"


def test_select_unknown_id_falls_back_to_environment(base_config):
    configs = [{"id": "a", "owner": "org-a", "token": "tok-a"}]
    assert select_github_config(base_config, configs, "missing") is base_config


def test_select_default_then_first(base_config):
    configs = [
        {"id": "a", "owner": "org-a", "token": "tok-a"},
        {"id": "b", "owner": "org-b", "token": "tok-b", "is_default": True},
    ]
    assert select_github_config(base_config, configs).github_owner == "org-b"
    assert select_github_config(base_config, configs[:1]).github_owner == "org-a"


def test_selected_config_without_token_does_not_inherit(base_config):
    selected = select_github_config(base_config, [{"id": "a", "owner": "org-a"}])
    assert selected.github_token is None
    with pytest.raises(RuntimeError):
        selected.require_token()
