"""
tests/test_config.py — pytest unit tests for core.config.load_config.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import CONFIG_ENV_VAR, AppConfig, load_config


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "tibetan.yaml"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _no_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def test_defaults() -> None:
    config = AppConfig()
    assert config.server.port == 8080
    assert config.display.placeholder == "ཨ"
    assert config.logging.jsonl is True


def test_explicit_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "server:\n  port: 9000\ndisplay:\n  placeholder: '?'\n")
    config = load_config(path)
    assert config.server.port == 9000
    assert config.server.host == "127.0.0.1"
    assert config.display.placeholder == "?"


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path, ""))
    assert config == AppConfig()


def test_env_var(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write(tmp_path, "logging:\n  level: DEBUG\n  jsonl: false\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    config = load_config()
    assert config.logging.level == "DEBUG"
    assert config.logging.jsonl is False


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_missing_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "absent.yaml"))
    with pytest.raises(FileNotFoundError):
        load_config()


def test_unknown_key_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, "server:\n  workers: 4\n"))


def test_non_mapping_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, "- a\n- b\n"))


def test_section_must_be_mapping(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, "server: 8080\n"))


@pytest.mark.parametrize(
    "text",
    [
        "server:\n  port: 0\n",
        "server:\n  port: '8080'\n",
        "server:\n  host: ''\n",
        "logging:\n  level: LOUD\n",
        "logging:\n  jsonl: 'yes'\n",
        "display:\n  placeholder: 3\n",
    ],
)
def test_invalid_values_rejected(tmp_path: Path, text: str) -> None:
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, text))


def test_bundled_config_loads() -> None:
    bundled = Path(__file__).resolve().parent.parent / "config" / "tibetan.yaml"
    config = load_config(bundled)
    assert config.display.placeholder == "ཨ"
    assert config.logging.resolved_log_dir == Path("logs")
