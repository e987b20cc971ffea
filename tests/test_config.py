import logging

import pytest

from slack_revoke.config import ActionConfig, load_context_from_env, setup_logging
from slack_revoke.errors import FatalError


def test_base_url_prefers_address_param():
    config = ActionConfig({"environment": {"ADDRESS": "https://slack.com"}})
    assert config.base_url({"address": "https://example.slack.com/"}) == "https://example.slack.com"
    assert config.base_url({}) == "https://slack.com"


def test_base_url_missing():
    with pytest.raises(FatalError, match="No URL specified"):
        ActionConfig({"environment": {}, "secrets": {}}).base_url({})


def test_missing_context_sections_are_empty():
    config = ActionConfig({})
    assert config.get_secret("BEARER_AUTH_TOKEN") is None
    assert config.get_env("ADDRESS", "fallback") == "fallback"


def test_load_context_from_env_file(tmp_path, monkeypatch):
    # load_dotenv writes into os.environ; register the keys so monkeypatch removes them afterwards
    for key in ("ADDRESS", "BEARER_AUTH_TOKEN", "UNRELATED_SETTING"):
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)
    env_file = tmp_path / ".env"
    env_file.write_text("ADDRESS=https://slack.com\nBEARER_AUTH_TOKEN=xoxb-env\nUNRELATED_SETTING=1\n")

    context = load_context_from_env(str(env_file))

    assert context["environment"]["ADDRESS"] == "https://slack.com"
    assert context["secrets"]["BEARER_AUTH_TOKEN"] == "xoxb-env"
    assert "UNRELATED_SETTING" not in context["environment"]


def test_process_environment_wins_over_env_file(tmp_path, monkeypatch):
    monkeypatch.setenv("ADDRESS", "https://override.slack.com")
    env_file = tmp_path / ".env"
    env_file.write_text("ADDRESS=https://slack.com\n")

    context = load_context_from_env(str(env_file))

    assert context["environment"]["ADDRESS"] == "https://override.slack.com"


def test_setup_logging_uses_configured_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    setup_logging(ActionConfig({"environment": {"LOG_LEVEL": "debug", "DEBUG": "true"}}))

    assert calls["level"] == logging.DEBUG
    assert "%(asctime)s" in calls["format"]
