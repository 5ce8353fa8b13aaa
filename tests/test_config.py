import pytest

from reversi.config import ServerConfig, get_log_level


def test_server_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in [
        "REVERSI_SERVER_HOST",
        "REVERSI_SERVER_PORT",
        "REVERSI_RATE_LIMIT_REQUESTS",
        "REVERSI_RATE_LIMIT_WINDOW",
    ]:
        monkeypatch.delenv(name, raising=False)

    config = ServerConfig()
    assert config.host == "127.0.0.1"
    assert config.port == 8000
    assert config.rate_limit_requests == 60
    assert config.rate_limit_window == 60.0


def test_server_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSI_SERVER_PORT", "9000")
    monkeypatch.setenv("REVERSI_RATE_LIMIT_REQUESTS", "5")

    config = ServerConfig()
    assert config.port == 9000
    assert config.rate_limit_requests == 5


def test_get_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSI_LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"
