from __future__ import annotations

from pathlib import Path

import pytest

from binx.config import BinxConfig, ConfigError, load_config, parse_config


def test_defaults_when_no_user_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(
        "binx.config.get_default_config_path", lambda: tmp_path / "nope" / "config.yaml"
    )
    assert load_config() == BinxConfig()


def test_default_user_file_is_read(tmp_path: Path, monkeypatch) -> None:
    cfg = tmp_path / "config.yaml"
    cfg.write_text("viewport_width: 64\n")
    monkeypatch.setattr("binx.config.get_default_config_path", lambda: cfg)
    assert load_config().viewport_width == 64


def test_explicit_file(tmp_path: Path) -> None:
    cfg = tmp_path / "binx.yaml"
    cfg.write_text(
        "viewport_width: 32\nqueue_capacity: 8\nglyph: '#'\nlog_file: /tmp/binx.log\nlog_level: debug\n"
    )
    config = load_config(cfg)
    assert config == BinxConfig(
        viewport_width=32,
        queue_capacity=8,
        glyph="#",
        log_file="/tmp/binx.log",
        log_level="DEBUG",
    )


def test_explicit_missing_file_is_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_empty_document_gives_defaults() -> None:
    assert parse_config("") == BinxConfig()


@pytest.mark.parametrize(
    "text",
    [
        "- a\n- b\n",
        "viewport_width: 0\n",
        "viewport_width: wide\n",
        "queue_capacity: -1\n",
        "glyph: ab\n",
        "log_level: loud\n",
        "colour: red\n",
        "viewport_width: [1\n",
    ],
)
def test_invalid_config(text: str) -> None:
    with pytest.raises(ConfigError):
        parse_config(text)


def test_errors_are_collected() -> None:
    with pytest.raises(ConfigError) as exc:
        parse_config("viewport_width: 0\nglyph: ab\n")
    assert len(exc.value.errors) == 2


def test_overrides_skip_none() -> None:
    config = BinxConfig().with_overrides(viewport_width=16, log_file=None)
    assert config.viewport_width == 16
    assert config.log_file is None
