import dataclasses

import pytest

from ui_museum_mcp.config import ServerConfig, get_config

ENV_VARS = [
    "UI_MUSEUM_SERVER_NAME",
    "UI_MUSEUM_LOG_LEVEL",
    "UI_MUSEUM_SEARCH_LIMIT",
    "UI_MUSEUM_SUGGEST_LIMIT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    assert get_config() == ServerConfig(
        server_name="ui-museum",
        log_level="INFO",
        search_limit=20,
        suggest_limit=10,
    )


def test_environment_overrides(clean_env):
    clean_env.setenv("UI_MUSEUM_SERVER_NAME", "museum-dev")
    clean_env.setenv("UI_MUSEUM_LOG_LEVEL", "debug")
    clean_env.setenv("UI_MUSEUM_SEARCH_LIMIT", "50")
    clean_env.setenv("UI_MUSEUM_SUGGEST_LIMIT", "3")

    config = get_config()
    assert config.server_name == "museum-dev"
    assert config.log_level == "DEBUG"
    assert config.search_limit == 50
    assert config.suggest_limit == 3


def test_bad_integer_falls_back(clean_env, caplog):
    clean_env.setenv("UI_MUSEUM_SEARCH_LIMIT", "lots")
    with caplog.at_level("WARNING", logger="ui_museum_mcp.config"):
        assert get_config().search_limit == 20
    assert "UI_MUSEUM_SEARCH_LIMIT" in caplog.text


def test_config_is_frozen(clean_env):
    config = get_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.search_limit = 1
