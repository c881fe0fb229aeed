"""
Unit tests for the console front end.

Tests command parsing and the play loop driven by scripted input.
"""
import random
from typing import Iterable, List

import pytest
from minesweeper import Board, BoardConfig, Command, CommandError, ConsoleGame, parse_command
from minesweeper.console import Action


class ScriptedIO:
    """Feeds prepared lines to the game and records its output."""

    def __init__(self, lines: Iterable[str]) -> None:
        self.lines = list(lines)
        self.prompts: List[str] = []
        self.output: List[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def print(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def make_game(io: ScriptedIO, layout: List[str]) -> ConsoleGame:
    game = ConsoleGame(
        BoardConfig(3, 1, 1),
        rng=random.Random(0),
        input_fn=io.input,
        output_fn=io.print,
    )
    game.board = Board.from_layout(layout)
    return game


# ============================================================================
# Command Parsing Tests
# ============================================================================

class TestParseCommand:
    """Test console command parsing."""

    def test_reveal_command(self) -> None:
        assert parse_command("r 3 4") == Command(Action.REVEAL, 3, 4)

    def test_flag_command_is_case_insensitive(self) -> None:
        assert parse_command("  F 2   1 ") == Command(Action.FLAG, 2, 1)

    @pytest.mark.parametrize("line", ["", "r", "r 1", "r 1 2 3"])
    def test_wrong_token_count(self, line: str) -> None:
        with pytest.raises(CommandError, match="Invalid command format"):
            parse_command(line)

    def test_bad_x(self) -> None:
        with pytest.raises(CommandError, match="Invalid x coordinate"):
            parse_command("r a 2")

    def test_bad_y(self) -> None:
        with pytest.raises(CommandError, match="Invalid y coordinate"):
            parse_command("r 2 -1")

    def test_unknown_action(self) -> None:
        with pytest.raises(CommandError, match="Unknown command 'q'"):
            parse_command("q 1 1")


# ============================================================================
# Play Loop Tests
# ============================================================================

class TestConsoleGame:
    """Test the interactive loop."""

    def test_win(self) -> None:
        """Revealing the empty end of the row wins."""
        io = ScriptedIO(["r 2 0"])
        game = make_game(io, ["*.."])
        assert game.play() is True
        assert "You win! All safe cells revealed." in io.output

    def test_loss_reveals_board(self) -> None:
        """After a loss the whole board is printed."""
        io = ScriptedIO(["r 0 0"])
        game = make_game(io, ["*.."])
        assert game.play() is False
        assert "Boom! You hit a mine." in io.output
        assert " 0  *  1    " in io.text.splitlines()

    def test_bad_input_does_not_touch_board(self) -> None:
        """Parse errors are reported and the loop continues."""
        io = ScriptedIO(["hello", "r x 0"])
        game = make_game(io, ["*.."])
        assert game.play() is None
        assert "Invalid command format. Use: r x y or f x y" in io.output
        assert "Invalid x coordinate" in io.output
        assert game.board.hidden_positions() == [(0, 0), (1, 0), (2, 0)]

    def test_flag_then_reveal_flagged(self) -> None:
        """A flagged cell survives a reveal command."""
        io = ScriptedIO(["f 0 0", "r 0 0"])
        game = make_game(io, ["*.."])
        assert game.play() is None
        assert game.board.get_cell(0, 0).is_flagged is True
        assert game.board.is_playing is True

    def test_out_of_bounds_is_ignored(self) -> None:
        io = ScriptedIO(["r 9 9"])
        game = make_game(io, ["*.."])
        assert game.play() is None
        assert game.board.is_playing is True

    def test_session_builds_new_board(self) -> None:
        """Playing again replaces the board."""
        io = ScriptedIO(["r 0 0", "y"])
        game = make_game(io, ["*.."])
        first = game.board
        game.play_session()
        assert game.board is not first
        assert game.board.is_playing is True
        assert io.output[-1] == "Thanks for playing!"

    def test_session_ends_when_declined(self) -> None:
        io = ScriptedIO(["r 2 0", "n"])
        game = make_game(io, ["*.."])
        game.play_session()
        assert game.board.is_won is True
        assert io.prompts[-1] == "Play again? [y/N]: "
