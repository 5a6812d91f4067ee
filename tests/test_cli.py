"""Tests for the coolex command-line entry point."""

import json
from pathlib import Path

import pytest

from coolex import format_listing, lex
from coolex.cli import main


@pytest.fixture
def hello(tmp_path: Path) -> Path:
    path = tmp_path / "hello.cl"
    path.write_text('class Main {\n  main() : Object { "hi" };\n};\n', encoding="utf-8")
    return path


class TestMain:
    def test_prints_listing(self, hello: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(hello)]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out[0] == f'#name "{hello}"'
        assert out[1:4] == ["#1 CLASS", "#1 TYPEID Main", "#1 '{'"]
        assert '#2 STR_CONST "hi"' in out
        assert out[-2:] == ["#3 '}'", "#3 ';'"]

    def test_multiple_files(
        self, hello: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        other = tmp_path / "other.cl"
        other.write_text("x", encoding="utf-8")

        assert main([str(hello), str(other)]) == 0

        out = capsys.readouterr().out.splitlines()
        assert f'#name "{other}"' in out
        assert out[-1] == "#1 OBJECTID x"

    def test_missing_file_sets_status(
        self, hello: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        missing = tmp_path / "missing.cl"

        assert main([str(missing), str(hello)]) == 1

        # Remaining files are still lexed
        out = capsys.readouterr().out
        assert f'#name "{hello}"' in out
        assert str(missing) not in out

    def test_invalid_utf8_bytes_escaped(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "bytes.cl"
        path.write_bytes(b'"\xff"')

        assert main([str(path)]) == 0

        assert '#1 STR_CONST "\\377"' in capsys.readouterr().out

    def test_carriage_returns_reach_lexer_unchanged(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        raw = b'a\rb "x\ry"\r\n"z\\\r\n"'
        path = tmp_path / "crlf.cl"
        path.write_bytes(raw)

        assert main([str(path)]) == 0

        out = capsys.readouterr().out
        assert out == format_listing(lex(raw.decode("utf-8")), source_file=str(path))
        assert "#1 OBJECTID b" in out
        assert '#1 STR_CONST "x\\015y"' in out

    def test_summary(self, hello: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--summary", str(hello)]) == 0

        summary = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert summary["scan_calls"] == 1
        assert summary["error_count"] == 0

    def test_requires_files(self) -> None:
        with pytest.raises(SystemExit):
            main([])
