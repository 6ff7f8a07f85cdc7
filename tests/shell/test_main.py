"""Tests for the command line entry point."""

import json
import os
from unittest.mock import patch

import pytest

from quiz.main import build_parser, main


@pytest.fixture(autouse=True)
def clean_env():
    """Run every test without quiz environment variables."""
    with patch.dict(os.environ, {}, clear=True):
        yield


class TestBuildParser:
    """Tests for build_parser function."""

    def test_parses_limit(self):
        args = build_parser().parse_args(["evens", "10"])
        assert args.command == "evens"
        assert args.limit == 10
        assert args.config is None

    def test_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestMain:
    """Tests for main function."""

    def test_evens(self, capsys):
        assert main(["evens", "10"]) == 0
        assert capsys.readouterr().out.strip() == "2, 4, 6, 8"

    def test_evens_invalid_limit(self, capsys):
        """Invalid limit exits with code 2 and prints nothing."""
        assert main(["evens", "0"]) == 2
        assert capsys.readouterr().out == ""

    def test_squares(self, capsys):
        assert main(["squares", "22"]) == 0
        assert capsys.readouterr().out.strip() == "441, 196, 49"

    def test_squares_negative_limit(self, capsys):
        assert main(["squares", "-5"]) == 0
        assert capsys.readouterr().out.strip() == "(none)"

    def test_squares_overflow(self):
        assert main(["squares", "50000"]) == 2

    def test_letters(self, capsys):
        assert main(["letters", "aAbB"]) == 0
        assert capsys.readouterr().out.strip() == "A: 2\nB: 2"

    def test_families(self, tmp_path, capsys):
        path = tmp_path / "families.json"
        path.write_text(json.dumps([
            {"id": 1, "persons": [{"age": 10}, {"age": 20}]},
            {"id": 2, "persons": []},
        ]))

        assert main(["families", str(path)]) == 0

        lines = capsys.readouterr().out.strip().splitlines()
        assert lines == [
            "2 families",
            "Family 1: 2 members, average age 15.0",
            "Family 2: 0 members, average age 0.0",
        ]

    def test_families_missing_file(self, tmp_path):
        assert main(["families", str(tmp_path / "missing.json")]) == 2

    def test_config_file_applies(self, tmp_path, capsys):
        """Config file settings reach the queries."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("letter_min_code: 65\nletter_max_code: 90\n")

        assert main(["--config", str(config_path), "letters", "aB_"]) == 0
        assert capsys.readouterr().out.strip() == "B: 1"

    def test_env_config_applies(self):
        """Environment settings reach the queries."""
        with patch.dict(os.environ, {"QUIZ_INT_MAX": "100"}):
            assert main(["squares", "10"]) == 2

    def test_invalid_config_exits_1(self, tmp_path, capsys):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("int_max: 0\n")

        assert main(["--config", str(config_path), "evens", "10"]) == 1
        assert capsys.readouterr().out == ""

    def test_non_numeric_env_config_exits_1(self, capsys):
        """A malformed environment value is logged, not raised."""
        with patch.dict(os.environ, {"QUIZ_INT_MAX": "lots"}):
            assert main(["evens", "10"]) == 1
        assert capsys.readouterr().out == ""

    def test_list_config_file_exits_1(self, tmp_path, capsys):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- a\n- b\n")

        assert main(["--config", str(config_path), "evens", "10"]) == 1
        assert capsys.readouterr().out == ""

    def test_invalid_yaml_config_exits_1(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("int_max: [1, 2\n")

        assert main(["--config", str(config_path), "evens", "10"]) == 1
