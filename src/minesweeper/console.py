"""
Console front end for Minesweeper.

Parses player commands and drives a Board through them. All game rules
live in the board; this module only translates text to board calls.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .board import Board, BoardConfig
from .render import render_status, render_text


logger = logging.getLogger(__name__)

BANNER = (
    "=== Minesweeper ===\n"
    "Controls:\n"
    "  r x y  -> reveal cell at (x, y)\n"
    "  f x y  -> toggle flag at (x, y)\n"
    "Coordinates are zero-based.\n"
)
PROMPT = "Enter command (e.g., 'r 3 4' or 'f 2 1'): "


class Action(Enum):
    """Player actions understood by the console."""

    REVEAL = "r"
    FLAG = "f"


class CommandError(ValueError):
    """Raised for console input that is not a valid command."""


@dataclass(frozen=True)
class Command:
    """A parsed player command."""

    action: Action
    x: int
    y: int

    def apply(self, board: Board) -> bool:
        """Run the command against a board."""
        if self.action == Action.REVEAL:
            return board.reveal(self.x, self.y)
        return board.toggle_flag(self.x, self.y)


def _parse_coordinate(token: str, name: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise CommandError(f"Invalid {name} coordinate") from None
    if value < 0:
        raise CommandError(f"Invalid {name} coordinate")
    return value


def parse_command(line: str) -> Command:
    """
    Parse a line like ``r 3 4`` or ``F 2 1``.

    Raises:
        CommandError: With a message meant for the player.
    """
    parts = line.split()
    if len(parts) != 3:
        raise CommandError("Invalid command format. Use: r x y or f x y")

    name, x_token, y_token = parts
    x = _parse_coordinate(x_token, "x")
    y = _parse_coordinate(y_token, "y")
    try:
        action = Action(name.lower())
    except ValueError:
        raise CommandError(f"Unknown command '{name}'. Use 'r' or 'f'.") from None
    return Command(action, x, y)


class ConsoleGame:
    """
    Interactive text game.

    Input and output are injected so the loop can be driven by scripts:
    ``input_fn`` takes a prompt and returns a line (raising EOFError at
    end of input), ``output_fn`` prints a line.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.config = config or BoardConfig()
        self.rng = rng or random.Random()
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.board = self.new_board()

    def new_board(self) -> Board:
        """Start a fresh game, discarding the current board."""
        self.board = Board(self.config, rng=self.rng)
        return self.board

    def show_board(self) -> None:
        self.output_fn(render_text(self.board))
        self.output_fn(render_status(self.board))
        self.output_fn("")

    def play(self) -> Optional[bool]:
        """
        Play one game to the end.

        Returns:
            True on a win, False on a loss, None if input ran out first.
        """
        while True:
            self.show_board()

            if self.board.game_over:
                return self._announce_result()

            try:
                line = self.input_fn(PROMPT)
            except EOFError:
                self.output_fn("")
                return None

            try:
                command = parse_command(line)
            except CommandError as exc:
                self.output_fn(str(exc))
                continue

            if not command.apply(self.board):
                logger.debug("Ignored %s", command)

    def _announce_result(self) -> bool:
        if self.board.win:
            self.output_fn("You win! All safe cells revealed.")
            return True
        self.output_fn("Boom! You hit a mine.")
        self.board.reveal_all()
        self.output_fn(render_text(self.board))
        self.output_fn("")
        return False

    def play_session(self) -> None:
        """Play games until the player declines another."""
        self.output_fn(BANNER)
        while True:
            if self.play() is None:
                break
            try:
                again = self.input_fn("Play again? [y/N]: ")
            except EOFError:
                break
            if again.strip().lower() not in ("y", "yes"):
                break
            self.new_board()
        self.output_fn("Thanks for playing!")
