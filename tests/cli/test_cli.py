"""Tests for the relic-config command-line tool."""

import json
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from relic.__main__ import cli
from relic.interfaces.cli.utils import configure_logging, env_enabled, error_details


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("RELIC_CONFIG", raising=False)
    monkeypatch.delenv("RELIC_DEBUG", raising=False)
    monkeypatch.delenv("RELIC_LOG_LEVEL", raising=False)


def test_check_valid(sample_config_path: Path):
    runner = CliRunner()
    result = runner.invoke(cli, ["check", "--config", str(sample_config_path)])
    assert result.exit_code == 0, result.output
    assert "Configuration is valid" in result.output
    assert "3 key(s)" in result.output
    assert "111111" not in result.output


def test_check_json_output(sample_config_path: Path):
    runner = CliRunner()
    result = runner.invoke(cli, ["check", "--config", str(sample_config_path), "--json-output"])
    assert result.exit_code == 0, result.output

    output = json.loads(result.output)
    assert output["status"] == "ok"
    summary = output["result"]
    assert summary["path"] == str(sample_config_path)
    assert summary["tokens"] == 2
    assert summary["keys"] == 3
    assert summary["clients"] == 1
    assert summary["sections"] == ["server", "timestamp", "amqp"]


def test_check_uses_env_path(sample_config_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("RELIC_CONFIG", str(sample_config_path))
    runner = CliRunner()
    result = runner.invoke(cli, ["check"])
    assert result.exit_code == 0, result.output
    assert str(sample_config_path) in result.output


def test_check_invalid(write_yaml):
    path = write_yaml("clients:\n  short:\n    nickname: x\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["check", "--config", str(path)])
    assert result.exit_code != 0
    assert "Error:" in result.output
    assert "hex-encoded 256-bit digests" in result.output


def test_check_missing_file(tmp_path: Path):
    runner = CliRunner()
    result = runner.invoke(cli, ["check", "--config", str(tmp_path / "missing.yml")])
    assert result.exit_code != 0
    assert "Failed to read configuration" in result.output


def test_tokens(sample_config_path: Path):
    runner = CliRunner()
    result = runner.invoke(cli, ["tokens", "--config", str(sample_config_path)])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["files (file)", "hsm (pkcs11)"]


def test_keys_hides_hidden(sample_config_path: Path):
    runner = CliRunner()
    result = runner.invoke(cli, ["keys", "--config", str(sample_config_path)])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["current", "release"]

    result = runner.invoke(cli, ["keys", "--all", "--config", str(sample_config_path)])
    assert result.output.splitlines() == ["current", "internal", "release"]


def test_key_follows_alias(sample_config_path: Path):
    runner = CliRunner()
    result = runner.invoke(cli, ["key", "current", "--config", str(sample_config_path)])
    assert result.exit_code == 0, result.output
    assert "alias: current -> release" in result.output
    assert "token: hsm (pkcs11)" in result.output


def test_key_json_output(sample_config_path: Path):
    runner = CliRunner()
    result = runner.invoke(
        cli, ["key", "release", "--config", str(sample_config_path), "--json-output"]
    )
    assert result.exit_code == 0, result.output
    details = json.loads(result.output)["result"]
    assert details["name"] == "release"
    assert details["token"] == "hsm"
    assert details["token_defined"] is True
    assert details["token_type"] == "pkcs11"


def test_key_unknown(sample_config_path: Path):
    runner = CliRunner()
    result = runner.invoke(cli, ["key", "nope", "--config", str(sample_config_path)])
    assert result.exit_code != 0
    assert "Key 'nope' not found" in result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "relic/unknown" in result.output


def test_error_json_output(write_yaml):
    path = write_yaml("clients:\n  short:\n    nickname: x\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["check", "--config", str(path), "--json-output"])
    assert result.exit_code != 0
    payload = json.loads(result.stdout)
    assert payload["status"] == "error"
    assert "hex-encoded 256-bit digests" in payload["error"]
    assert "traceback" not in payload


def test_error_details_with_debug():
    try:
        raise ValueError("boom")
    except ValueError as e:
        details = error_details(e, debug=True)
    assert details["error"] == "boom"
    assert details["type"] == "ValueError"
    assert "raise ValueError" in details["traceback"]

    assert error_details(ValueError("boom")) == {"error": "boom"}


@pytest.mark.parametrize(
    "value,expected",
    [("1", True), ("TRUE", True), ("yes", True), ("on", True), ("", False), ("0", False), ("no", False)],
)
def test_env_enabled(monkeypatch: pytest.MonkeyPatch, value, expected):
    monkeypatch.setenv("RELIC_DEBUG", value)
    assert env_enabled("RELIC_DEBUG") is expected


@pytest.fixture
def root_logger():
    logger = logging.getLogger()
    level, handlers = logger.level, logger.handlers[:]
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.mark.parametrize(
    "env,expected",
    [
        ({}, logging.WARNING),
        ({"RELIC_LOG_LEVEL": "info"}, logging.INFO),
        ({"RELIC_LOG_LEVEL": "ERROR"}, logging.ERROR),
        ({"RELIC_LOG_LEVEL": "chatty"}, logging.WARNING),
        ({"RELIC_LOG_LEVEL": "ERROR", "RELIC_DEBUG": "1"}, logging.DEBUG),
    ],
)
def test_configure_logging_level(root_logger, monkeypatch: pytest.MonkeyPatch, env, expected):
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    configure_logging()
    assert root_logger.level == expected
    assert len(root_logger.handlers) == 1


def test_configure_logging_debug_flag(root_logger, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("RELIC_LOG_LEVEL", "ERROR")
    configure_logging(debug=True)
    assert root_logger.level == logging.DEBUG
