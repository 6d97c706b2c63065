"""Tests for menuflow._cli — the menuflow command line."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from menuflow._cli import _build_parser, main, parse_presses, run_demo
from menuflow.config import MenuflowConfig


class TestParser:
    def test_demo_arguments(self) -> None:
        args = _build_parser().parse_args(["demo", "a", "b", "--press", "down", "--stats"])
        assert args.command == "demo"
        assert args.items == ["a", "b"]
        assert args.press == "down"
        assert args.stats is True
        assert args.root == "."
        assert args.style == "text"

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert "menuflow" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 0
        assert "demo" in capsys.readouterr().out


class TestParsePresses:
    def test_valid_tokens(self) -> None:
        assert parse_presses(" Down, up ,ENTER,,2", 3) == ["down", "up", "enter", "2"]

    def test_unknown_key(self) -> None:
        with pytest.raises(ValueError, match="unknown key"):
            parse_presses("left", 3)

    def test_item_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            parse_presses("3", 3)


class TestDemo:
    def test_scripted_selection(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main([
            "demo", "Alan Kay", "J.C.R. Licklider", "John McCarthy",
            "--press", "down,down,up,enter", "--root", str(tmp_path),
        ])
        out = capsys.readouterr().out
        assert "selected: Alan Kay" in out
        assert ">* Alan Kay" in out

    def test_pointer_index_and_stats(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["demo", "a", "b", "c", "--press", "2,enter", "--root", str(tmp_path), "--stats"])
        out = capsys.readouterr().out
        assert "selected: c" in out
        assert "path: none -> 2" in out
        assert "selections: 1" in out
        assert "SelectionMade: 1" in out

    def test_config_keys_respected(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "menuflow.yaml").write_text("highlight_marker: '#'\n")
        main(["demo", "a", "b", "--press", "down", "--root", str(tmp_path)])
        assert "#  a" in capsys.readouterr().out

    def test_bad_press_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["demo", "a", "--press", "sideways"])
        assert excinfo.value.code == 2

    def test_bad_config_exits(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "menuflow.yaml").write_text("nonsense: 1\n")
        with pytest.raises(SystemExit) as excinfo:
            main(["demo", "a", "--root", str(tmp_path)])
        assert excinfo.value.code == 1
        assert "Config error" in capsys.readouterr().err

    def test_clashing_key_codes_exit(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        # 27 is also the default clear key
        (tmp_path / "menuflow.yaml").write_text("next_key: 27\n")
        with pytest.raises(SystemExit) as excinfo:
            main(["demo", "a", "b", "--press", "down", "--root", str(tmp_path)])
        assert excinfo.value.code == 1
        assert "Config error" in capsys.readouterr().err

    def test_classes_style(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "menuflow.yaml").write_text("highlighted_class: hot\nselected_class: picked\n")
        main([
            "demo", "a", "b", "--press", "down,enter", "--style", "classes",
            "--root", str(tmp_path),
        ])
        out = capsys.readouterr().out
        assert "a [hot]\nb" in out
        assert "a [hot picked]\nb" in out
        assert "selected: a" in out

    @pytest.mark.asyncio
    async def test_clear_unbound(self, tmp_path: Path) -> None:
        config = MenuflowConfig(root=tmp_path, clear_key=None)
        with pytest.raises(ValueError, match="clear_key"):
            await run_demo(["a"], ["esc"], config, out=io.StringIO())

    @pytest.mark.asyncio
    async def test_esc_clears(self, tmp_path: Path) -> None:
        out = io.StringIO()
        await run_demo(["a", "b"], ["down", "esc"], MenuflowConfig(root=tmp_path), out=out)
        renders = out.getvalue().split("\n\n")
        assert renders[-2] == "   a\n   b"
