from __future__ import annotations

from pathlib import Path

import pytest

from binx.cli import build_parser, main


@pytest.fixture(autouse=True)
def no_user_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(
        "binx.config.get_default_config_path", lambda: tmp_path / "none.yaml"
    )


def test_missing_file_flag_is_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code != 0
    assert "-f/--file" in capsys.readouterr().err


def test_file_not_found(tmp_path: Path, capsys) -> None:
    rc = main(["-f", str(tmp_path / "missing.bin")])
    assert rc == 2
    assert "file not found" in capsys.readouterr().err


def test_bad_config(tmp_path: Path, capsys) -> None:
    data = tmp_path / "d.bin"
    data.write_bytes(b"\x00")
    cfg = tmp_path / "c.yaml"
    cfg.write_text("viewport_width: 0\n")
    rc = main(["-f", str(data), "-c", str(cfg)])
    assert rc == 1
    assert "viewport_width" in capsys.readouterr().err


def test_width_must_be_positive() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-f", "x", "-w", "0"])
    assert build_parser().parse_args(["-f", "x", "-w", "0x10"]).width == 16


def test_runs_app_with_overrides(tmp_path: Path, monkeypatch) -> None:
    pytest.importorskip("textual")
    from binx.app import BinxApp

    data = tmp_path / "d.bin"
    data.write_bytes(bytes(range(64)))
    seen = []
    monkeypatch.setattr(BinxApp, "run", lambda self: seen.append(self.state.viewport_width))
    assert main(["-f", str(data), "-w", "32"]) == 0
    assert seen == [32]


def test_app_failure_reported(tmp_path: Path, monkeypatch, capsys) -> None:
    pytest.importorskip("textual")
    from binx.app import BinxApp

    data = tmp_path / "d.bin"
    data.write_bytes(b"\x01")

    def boom(self) -> None:
        raise RuntimeError("no terminal")

    monkeypatch.setattr(BinxApp, "run", boom)
    assert main(["-f", str(data)]) == 1
    assert "no terminal" in capsys.readouterr().err
