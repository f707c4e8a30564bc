from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_console import cli as cli_module
from lib_log_console import config as log_config


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> None:
    """Reset shared dotenv state around each test."""

    log_config._reset_dotenv_state_for_testing()
    yield
    log_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values without overriding call arguments."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_ID=dotenv-service\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv("LOG_ID", raising=False)

    loaded = log_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ["LOG_ID"] == "dotenv-service"
    assert log_config.resolve_settings().id == "dotenv-service"
    assert log_config.resolve_settings(id="explicit").id == "explicit"

    os.environ.pop("LOG_ID", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text("LOG_ID=dotenv-service\n")
    monkeypatch.chdir(nested)
    monkeypatch.setenv("LOG_ID", "real-service")

    result = log_config.enable_dotenv()

    assert result is not None
    assert os.environ["LOG_ID"] == "real-service"


def test_enable_dotenv_loads_only_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_COLOURS=0\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_COLOURS", raising=False)

    first = log_config.enable_dotenv()
    env_file.write_text("LOG_COLOURS=1\n")
    os.environ.pop("LOG_COLOURS", None)
    second = log_config.enable_dotenv()

    assert first == second == env_file.resolve()
    assert "LOG_COLOURS" not in os.environ


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(log_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(log_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("TRUE", True), (" yes ", True), ("on", True), ("0", False), ("false", False), ("No", False), ("off", False)],
)
def test_parse_flag_accepts_common_spellings(raw: str, expected: bool) -> None:
    assert log_config.parse_flag("LOG_DEBUG", raw) is expected


def test_blank_environment_flag_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_DEBUG", "  ")
    assert log_config.env_flag("LOG_DEBUG", True) is True


def test_log_colours_beats_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("LOG_COLOURS", "yes")
    assert log_config.resolve_settings().colours is True
