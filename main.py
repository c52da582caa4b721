"""
Main entry point for TicTacToe.

Opens the Tkinter window by default. With --no-ui the game runs in the
console instead, driven by text commands (type "help" to list them).
"""

from typing import Optional

# Logic imports
from logic.game_session import GameSession

# Render imports
from render.config import DisplayConfig
from render.board_renderer import BoardRenderer


HELP_TEXT = """\
    play <cell>   Place the next mark on a cell (0-8)
    jump <move>   Go back (or forward) to a move in the history
    sort          Flip the move list between ascending and descending
    moves         Show the move list
    board         Show the board and status
    save <path>   Save the board as an image
    reset         Start a new game
    help          Show the commands
    quit          Exit"""


class TicTacToeConsole:
    """
    Console version of the game.

    Game flow:
    1. The board and status are shown
    2. A command is read from stdin
    3. The session is updated and the board is shown again
    4. Repeat until quit (or end of input)
    """

    def __init__(self, config: Optional[DisplayConfig] = None, debug: bool = False):
        """
        Initialize the console game.

        Args:
            config: Display configuration (used for saved images).
            debug: Print why moves were ignored.
        """
        self.config = config or DisplayConfig()
        self.debug = debug or self.config.DEBUG_MODE
        self.session = GameSession(debug=self.debug)
        self.renderer = BoardRenderer(self.config)
        self.is_running = False

    def start(self):
        """Run the command loop."""
        print("\nStarting TicTacToe game...")
        print("Type 'help' for commands, 'quit' to exit\n")

        self.is_running = True
        self.show_board()

        while self.is_running:
            try:
                line = input("> ")
            except EOFError:
                break
            self.handle_command(line)

    def handle_command(self, line: str) -> bool:
        """
        Run one command.

        Args:
            line: The command text.

        Returns:
            False once the game should stop, True otherwise.
        """
        parts = line.strip().split()
        if not parts:
            return True

        command, args = parts[0].lower(), parts[1:]

        if command in ("quit", "q", "exit"):
            print("Game quit by user.")
            self.is_running = False
            return False

        if command == "play":
            index = self._int_arg(args, "play <cell>")
            if index is not None:
                if self.session.play_move(index):
                    self.show_board()
                else:
                    print("Move ignored.")
        elif command == "jump":
            move = self._int_arg(args, "jump <move>")
            if move is not None:
                if self.session.jump_to(move):
                    self.show_board()
                else:
                    print(f"No move #{move}.")
        elif command == "sort":
            self.session.toggle_sort_order()
            print(self.session.sort_label())
            self.show_moves()
        elif command == "moves":
            self.show_moves()
        elif command == "board":
            self.show_board()
        elif command == "save":
            if not args:
                print("Usage: save <path>")
            else:
                self.save_image(args[0])
        elif command == "reset":
            self._reset_game()
        elif command == "help":
            print(HELP_TEXT)
        else:
            print(f"Unknown command: {command} (type 'help')")

        return True

    def _int_arg(self, args, usage: str) -> Optional[int]:
        """Parse a single integer argument, printing usage on failure."""
        if len(args) != 1:
            print(f"Usage: {usage}")
            return None
        try:
            return int(args[0])
        except ValueError:
            print(f"Usage: {usage}")
            return None

    def show_board(self):
        """Print the board and status."""
        print(self.renderer.get_grid_display(self.session.current_board))
        print(self.session.status())

    def show_moves(self):
        """Print the move list."""
        for entry in self.session.move_list():
            marker = ">" if entry.is_current else " "
            print(f"{marker} {entry.label}")

    def save_image(self, path: str) -> bool:
        """Save the current board as an image."""
        saved = self.renderer.save(self.session.current_board, path, self.session.winning_cells())
        print(f"Saved: {path}" if saved else f"ERROR: Could not save {path}")
        return saved

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.session = GameSession(debug=self.debug)
        self.show_board()


def board_size(value: str) -> int:
    """Parse --size, rejecting boards too small to hold one pixel per cell."""
    import argparse

    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid board size: {value!r}")
    if size < DisplayConfig.BOARD_SIZE:
        raise argparse.ArgumentTypeError(
            f"board size must be at least {DisplayConfig.BOARD_SIZE} pixels, got {size}"
        )
    return size


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print why moves were ignored"
    )
    parser.add_argument(
        "--size",
        type=board_size,
        default=None,
        help="Rendered board size in pixels (rounded down to a multiple of 3)"
    )

    args = parser.parse_args(argv)

    config = DisplayConfig(board_size=args.size, debug=args.debug)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(config=config, debug=args.debug)
        ui.run()
        return

    # Console mode (--no-ui)
    game = TicTacToeConsole(config=config, debug=args.debug)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
