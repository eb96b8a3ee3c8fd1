"""
Main entry point for hotseat TicTacToe.

Two players share one device. By default a Tkinter window is opened;
with --no-ui the game is played in the console through the same
InputController the window uses.
"""

import logging
import sys
from typing import Optional, Tuple

from engine import GameState, format_board
from controller import InputController

logger = logging.getLogger(__name__)


# Console words for the controller's Tk keysyms
CONSOLE_KEYS = {
    "w": "Up", "up": "Up",
    "s": "Down", "down": "Down",
    "a": "Left", "left": "Left",
    "d": "Right", "right": "Right",
    "": "Return", "enter": "Return",
}

HELP_TEXT = (
    "Commands: 1-9 place a mark, w/a/s/d or up/down/left/right move focus,\n"
    "          enter places at focus, r restarts, q quits"
)


def parse_command(text: str) -> Tuple[str, Optional[object]]:
    """
    Parse one line of console input.

    Returns:
        (action, argument) where action is one of
        "place" (cell index 0-8), "key" (Tk keysym), "restart",
        "quit", "help" or "unknown" (the raw text).
    """
    word = text.strip().lower()

    if word in ("q", "quit", "exit"):
        return "quit", None
    if word in ("r", "restart", "new"):
        return "restart", None
    if word in ("h", "help", "?"):
        return "help", None
    if word in CONSOLE_KEYS:
        return "key", CONSOLE_KEYS[word]
    if word.isdigit() and 1 <= int(word) <= 9:
        return "place", int(word) - 1

    return "unknown", text.strip()


class ConsoleGame:
    """
    Plays a game in the terminal.

    Game flow:
    1. Print the board (the prompt shows the focused cell)
    2. Read a command
    3. Hand it to the controller, which prints announcements
    4. Repeat until the player quits
    """

    def __init__(self, input_func=input, output_func=print):
        self._input = input_func
        self._output = output_func
        self.controller = InputController(
            render=self.render,
            announce=self.announce,
            status=self.set_status,
        )
        self.status = ""

    def render(self, state: GameState):
        """Print the board."""
        self._output("")
        self._output(format_board(state.board))
        self._output("")

    def announce(self, message: str):
        self._output(f">>> {message}")

    def set_status(self, text: str):
        self.status = text

    def handle(self, text: str) -> bool:
        """
        Run one console command.

        Returns:
            False once the player asked to quit.
        """
        action, arg = parse_command(text)

        if action == "quit":
            return False
        if action == "restart":
            self.controller.restart()
        elif action == "help":
            self._output(HELP_TEXT)
        elif action == "key":
            self.controller.handle_key(arg)
        elif action == "place":
            if self.controller.state.is_over:
                self._output(f">>> {self.controller.config.MSG_GAME_OVER}")
            else:
                self.controller.set_focus(arg)
                self.controller.attempt_move(arg)
        else:
            self._output(f"Unknown command: {arg!r}")
            self._output(HELP_TEXT)

        return True

    def run(self):
        """Main game loop."""
        self._output(HELP_TEXT)
        self.controller.start()

        while True:
            prompt = f"[{self.status}] focus={self.controller.focused_index + 1} > "
            try:
                line = self._input(prompt)
            except EOFError:
                break
            logger.debug("Console command: %r", line)
            if not self.handle(line):
                break


def log_level(verbose: bool) -> int:
    """
    Logging level for a run.

    Announcements already tell the players about moves and results,
    so only warnings reach stderr unless --verbose asks for every move.
    """
    return logging.DEBUG if verbose else logging.WARNING


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Two-player TicTacToe on one device")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the console instead of a window"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every move (debug logging)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=log_level(args.verbose),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    print("\n" + "="*60)
    print("   TicTacToe")
    print("="*60 + "\n")

    try:
        if args.no_ui:
            ConsoleGame().run()
        else:
            from ui import TicTacToeUI
            TicTacToeUI().run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
