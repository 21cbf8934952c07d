"""Tests for the command line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from pokersolitaire import cli
from pokersolitaire.cli import app, parse_row
from pokersolitaire.card import card

runner = CliRunner()

EMPTY_ROW = ". . . . ."


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch):
    """Keep config lookups away from the real working directory and home."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("pokersolitaire.config._config", None)


def _write_config(tmp_path: Path, high_score_file: Path) -> Path:
    config = tmp_path / "config.toml"
    config.write_text(f'[storage]\nhigh_score_file = "{high_score_file.as_posix()}"\n')
    return config


def _all_moves() -> str:
    return "".join(f"{r} {c}\n" for r in range(1, 6) for c in range(1, 6))


class TestParseRow:
    def test_empty_markers(self):
        assert parse_row("As . Kd _ 2c") == [card("As"), None, card("Kd"), None, card("2c")]

    def test_wrong_length(self):
        with pytest.raises(ValueError, match="5 cells"):
            parse_row("As Kd")


class TestCommands:
    def test_classify(self):
        result = runner.invoke(app, ["classify", "10h", "Jh", "Qh", "Kh", "Ah"])
        assert result.exit_code == 0
        assert "Royal Flush (250 points)" in result.output

    def test_classify_partial(self):
        result = runner.invoke(app, ["classify", "9c", "9d"])
        assert result.exit_code == 0
        assert "One Pair (1 point)" in result.output

    def test_classify_empty(self):
        result = runner.invoke(app, ["classify"])
        assert result.exit_code == 0
        assert "Nothing (0 points)" in result.output

    def test_classify_rejects_six_cards(self):
        result = runner.invoke(app, ["classify", "2c", "3c", "4c", "5c", "6c", "7c"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_classify_bad_card(self):
        result = runner.invoke(app, ["classify", "Zz"])
        assert result.exit_code == 1

    def test_score(self):
        args = ["score", "--row", "10s Js Qs Ks As"]
        for _ in range(4):
            args += ["--row", EMPTY_ROW]
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert "Royal Flush" in result.output
        assert "250" in result.output

    def test_score_needs_five_rows(self):
        result = runner.invoke(app, ["score", "--row", EMPTY_ROW])
        assert result.exit_code == 1
        assert "Expected 5 rows" in result.output

    def test_score_duplicate_card(self):
        args = ["score", "--row", "As As . . ."]
        for _ in range(4):
            args += ["--row", EMPTY_ROW]
        result = runner.invoke(app, args)
        assert result.exit_code == 1

    def test_table(self):
        result = runner.invoke(app, ["table"])
        assert result.exit_code == 0
        assert "Four of a Kind" in result.output

    def test_play_quit(self, tmp_path: Path):
        config = tmp_path / "config.toml"
        config.write_text(f'[storage]\nhigh_score_file = "{(tmp_path / "hs.json").as_posix()}"\n')
        result = runner.invoke(app, ["--config", str(config), "play", "--seed", "1"], input="quit\n")
        assert result.exit_code == 0
        assert "Next card" in result.output

    def test_play_full_game(self, tmp_path: Path):
        hs = tmp_path / "hs.json"
        config = tmp_path / "config.toml"
        config.write_text(f'[storage]\nhigh_score_file = "{hs.as_posix()}"\n')
        moves = "".join(f"{r} {c}\n" for r in range(1, 6) for c in range(1, 6))
        result = runner.invoke(
            app, ["--config", str(config), "play", "--seed", "3"], input=moves + "n\n"
        )
        assert result.exit_code == 0
        assert "Game over" in result.output

    def test_play_full_game_over_corrupt_high_score(self, tmp_path: Path):
        hs = tmp_path / "hs.json"
        hs.write_text("{not json")
        config = _write_config(tmp_path, hs)
        result = runner.invoke(
            app, ["--config", str(config), "play", "--seed", "3"], input=_all_moves() + "n\n"
        )
        assert result.exit_code == 0, result.exception
        assert "Ignoring high score" in result.output
        assert "Game over" in result.output

    def test_play_with_directory_as_high_score_file(self, tmp_path: Path):
        config = _write_config(tmp_path, tmp_path)
        result = runner.invoke(
            app, ["--config", str(config), "play", "--seed", "3"], input=_all_moves() + "n\n"
        )
        assert result.exit_code == 0, result.exception
        assert "Ignoring high score" in result.output

    def test_config_not_carried_between_invocations(self, tmp_path: Path):
        config = tmp_path / "plain.toml"
        config.write_text("[display]\nshow_empty_lines = false\n")
        runner.invoke(app, ["--config", str(config), "table"])
        assert cli._config is not None

        runner.invoke(app, ["table"])
        assert cli._config is None
