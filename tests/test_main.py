"""Tests for the command-line entry point."""

from __future__ import annotations

import json

import pytest
from PIL import Image

from wordtable.main import main, parse_args, parse_size


class TestParseSize:
    def test_valid(self) -> None:
        assert parse_size("300x200") == (300, 200)
        assert parse_size("64X64") == (64, 64)

    def test_invalid(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--size", "big"])
        with pytest.raises(SystemExit):
            parse_args(["--size", "0x100"])


class TestMain:
    def test_writes_png(self, tmp_path, capsys) -> None:
        out = tmp_path / "board.png"
        code = main(["--rows", "2", "--columns", "3", "--seed", "7",
                     "--output", str(out)])
        assert code == 0
        with Image.open(out) as img:
            assert img.size == (300, 300)
        stdout = capsys.readouterr().out
        assert "6 tiles" in stdout
        assert f"Board written to {out}" in stdout

    def test_custom_size(self, tmp_path) -> None:
        out = tmp_path / "wide.png"
        assert main(["--size", "400x100", "--output", str(out)]) == 0
        with Image.open(out) as img:
            assert img.size == (400, 100)

    def test_no_image(self, tmp_path, capsys) -> None:
        out = tmp_path / "board.png"
        assert main(["--no-image", "--output", str(out)]) == 0
        assert not out.exists()
        assert "16 tiles" in capsys.readouterr().out

    def test_seed_reproducible(self, capsys) -> None:
        main(["--no-image", "--seed", "42"])
        first = capsys.readouterr().out
        main(["--no-image", "--seed", "42"])
        second = capsys.readouterr().out
        assert first == second

    def test_config_file_with_overrides(self, tmp_path, capsys) -> None:
        config = tmp_path / "table.json"
        config.write_text(json.dumps({"rows": 5, "columns": 5}), encoding="utf-8")
        assert main(["--config", str(config), "--rows", "1", "--no-image"]) == 0
        assert "5 tiles" in capsys.readouterr().out

    def test_persian_with_full_likelihood(self, capsys) -> None:
        assert main(["--alphabet", "fa-IR", "--likelihood", "1", "--no-image"]) == 0

    def test_invalid_likelihood(self, capsys) -> None:
        assert main(["--likelihood", "2", "--no-image"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_rows(self, capsys) -> None:
        assert main(["--rows", "0", "--no-image"]) == 1
        assert "rows must be a positive integer" in capsys.readouterr().err

    def test_missing_config(self, tmp_path, capsys) -> None:
        assert main(["--config", str(tmp_path / "missing.json")]) == 1
        assert "config file not found" in capsys.readouterr().err

    def test_missing_output_directory(self, tmp_path, capsys) -> None:
        out = tmp_path / "nodir" / "board.png"
        assert main(["--output", str(out), "--seed", "1"]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error:")
        assert "config file not found" not in err
        assert not out.exists()

    def test_config_not_utf8(self, tmp_path, capsys) -> None:
        config = tmp_path / "table.json"
        config.write_bytes(b'{"rows": 2, "alphabet": "\xff"}')
        assert main(["--config", str(config), "--no-image"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_persian_with_default_likelihood(self, capsys) -> None:
        assert main(["--alphabet", "fa-IR", "--no-image"]) == 1
        assert "set frequent_word_likelihood to 1" in capsys.readouterr().err
