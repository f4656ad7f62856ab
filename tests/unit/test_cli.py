"""
Unit tests for the command line front end.
"""
import pytest
from minesweeper import create
from minesweeper.cli import build_parser, main, parse_command, play, resolve_size


# ============================================================================
# Argument Tests
# ============================================================================

class TestArguments:
    """Test defaults and floors applied at the calling boundary."""

    def test_defaults_without_size(self) -> None:
        assert resolve_size([]) == (9, 9, 10)

    def test_partial_size_keeps_defaults(self) -> None:
        assert resolve_size([12, 12]) == (9, 9, 10)

    def test_explicit_size(self) -> None:
        assert resolve_size([16, 30, 99]) == (16, 30, 99)

    def test_floors_are_applied(self) -> None:
        assert resolve_size([2, 3, 0]) == (5, 5, 1)

    def test_non_integer_size_is_rejected(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["a", "b", "c"])

    def test_seed_and_log_level(self) -> None:
        args = build_parser().parse_args(["--seed", "3", "--log-level", "DEBUG"])
        assert args.seed == 3
        assert args.log_level == "DEBUG"


# ============================================================================
# Command Parsing Tests
# ============================================================================

class TestParseCommand:
    """Test parsing of move commands."""

    def test_reveal_command(self) -> None:
        assert parse_command("r 2 3", create(5, 5, 1)) == ("r", 2, 3)

    def test_flag_command(self) -> None:
        assert parse_command("f 0 4", create(5, 5, 1)) == ("f", 0, 4)

    @pytest.mark.parametrize("line", ["", "x 1 1", "r 1", "r a b", "r 1 2 3"])
    def test_malformed_commands(self, line: str) -> None:
        assert parse_command(line, create(5, 5, 1)) is None

    def test_off_board_position_is_rejected(self) -> None:
        assert parse_command("r 5 0", create(5, 5, 1)) is None
        assert parse_command("f -1 0", create(5, 5, 1)) is None


# ============================================================================
# Interactive Loop Tests
# ============================================================================

class TestPlay:
    """Test the interactive loop with scripted input."""

    def test_reveal_and_win(self, corner_session, capsys) -> None:
        play(corner_session, ["r 4 4\n", "q\n"])
        output = capsys.readouterr().out
        assert "You win!" in output
        assert corner_session.is_won is True

    def test_flag_command_toggles(self, corner_session) -> None:
        play(corner_session, ["f 2 2", "q"])
        assert corner_session.board.get_cell(2, 2).is_flagged is True

    def test_bad_input_shows_help(self, corner_session, capsys) -> None:
        play(corner_session, ["r 9 9", "q"])
        output = capsys.readouterr().out
        assert output.count("Commands:") == 2
        assert corner_session.started is False

    def test_moves_ignored_after_game_over(self, corner_session, capsys) -> None:
        play(corner_session, ["r 1 1", "r 0 0", "f 4 4", "q"])
        output = capsys.readouterr().out
        assert "Game over." in output
        assert "Game finished" in output
        assert corner_session.board.get_cell(4, 4).is_flagged is False

    def test_new_game_restarts(self, corner_session) -> None:
        play(corner_session, ["r 4 4", "n", "q"])
        assert corner_session.started is False
        assert corner_session.over is False


class TestMain:
    """Test the entry point end to end."""

    def test_main_plays_from_stdin(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", iter(["r 0 0\n", "q\n"]))
        main(["5", "5", "3", "--seed", "1"])
        output = capsys.readouterr().out
        assert "Board: 5x5 with 3 mines" in output
