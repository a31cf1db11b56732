import importlib
import logging

import pytest
from click.testing import CliRunner

import voterapi.config
import wsgi
from voterapi import create_app


@pytest.fixture
def run_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(wsgi.application, "run", lambda **kwargs: calls.append(kwargs))
    return calls


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(voterapi.config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(voterapi.config)


def test_host_and_port_flags(run_calls):
    result = CliRunner().invoke(wsgi.main, ["-h", "127.0.0.1", "-p", "5000"])

    assert result.exit_code == 0, result.output
    assert run_calls == [{"host": "127.0.0.1", "port": 5000}]


def test_long_flags(run_calls):
    result = CliRunner().invoke(wsgi.main, ["--host", "localhost", "--port", "8080"])

    assert result.exit_code == 0, result.output
    assert run_calls == [{"host": "localhost", "port": 8080}]


def test_defaults_come_from_config(run_calls):
    result = CliRunner().invoke(wsgi.main, [])

    assert result.exit_code == 0, result.output
    assert run_calls == [{"host": voterapi.config.Config.HOST, "port": voterapi.config.Config.PORT}]


def test_help_lists_flags(run_calls):
    result = CliRunner().invoke(wsgi.main, ["--help"])

    assert result.exit_code == 0
    assert "--host" in result.output
    assert "--port" in result.output
    assert run_calls == []


def test_port_out_of_range_rejected(run_calls):
    result = CliRunner().invoke(wsgi.main, ["-p", "70000"])

    assert result.exit_code == 2
    assert run_calls == []


def test_runner_does_not_add_root_handlers(run_calls):
    root_handlers = list(logging.getLogger().handlers)

    CliRunner().invoke(wsgi.main, ["-p", "5000"])

    assert logging.getLogger().handlers == root_handlers


def test_host_and_port_from_env(reload_config):
    config = reload_config(VOTER_API_HOST="10.0.0.5", VOTER_API_PORT="9090")

    assert config.Config.HOST == "10.0.0.5"
    assert config.Config.PORT == 9090


def test_default_host_and_port(reload_config, monkeypatch):
    monkeypatch.delenv("VOTER_API_HOST", raising=False)
    monkeypatch.delenv("VOTER_API_PORT", raising=False)
    config = reload_config()

    assert config.Config.HOST == "0.0.0.0"
    assert config.Config.PORT == 1080


def test_log_level_from_env(reload_config):
    config = reload_config(LOG_LEVEL="debug")

    assert config.Config.LOG_LEVEL == "DEBUG"
    assert create_app(config.Config).logger.level == logging.DEBUG


def test_cors_origins_from_env(reload_config):
    config = reload_config(CORS_ORIGINS="http://allowed.example")
    client = create_app(config.TestingConfig).test_client()

    allowed = client.get("/health", headers={"Origin": "http://allowed.example"})
    other = client.get("/health", headers={"Origin": "http://other.example"})

    assert allowed.headers["Access-Control-Allow-Origin"] == "http://allowed.example"
    assert "Access-Control-Allow-Origin" not in other.headers
