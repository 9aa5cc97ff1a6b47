"""
cli.py - Command-line driver for the Connect Four engine

A plain terminal stand-in for a graphical front end: it reads columns,
calls GameState.apply_move and prints the board the engine hands back.
"""

import argparse
import random
from typing import Callable, List, Optional, Sequence

from connect4_core.debug import debug
from connect4_core.game.rules import GameState, new_game
from connect4_core.utils import ROWS, COLS, MoveError


def parse_moves(text: str) -> List[int]:
    """Parse a comma-separated list of column numbers."""
    return [int(part) for part in text.split(',') if part.strip()]


class SimpleCLI:
    """Terminal interface that plays, replays and benchmarks games."""

    def __init__(self, input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.args = None
        self.board = None
        self.game: Optional[GameState] = None

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four')
        parser.add_argument('--cols', type=int, default=COLS, help='Board width')
        parser.add_argument('--rows', type=int, default=ROWS, help='Board height')
        parser.add_argument('--debug-level', default='warning',
                            choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                            help='Logging level')
        parser.add_argument('--log-file', help='Also write logs to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', help='Two players take turns at the terminal')

        replay_parser = subparsers.add_parser('replay', help='Apply a list of moves')
        replay_parser.add_argument('--moves', required=True,
                                   help='Comma-separated columns, e.g. 0,6,1,6,2,6,3')

        benchmark_parser = subparsers.add_parser('benchmark', help='Time random games')
        benchmark_parser.add_argument('--games', type=int, default=1000,
                                      help='Number of games to play')
        benchmark_parser.add_argument('--seed', type=int, default=None)

        return parser

    def parse_args(self, argv: Optional[Sequence[str]] = None) -> None:
        self.args = self.build_parser().parse_args(argv)

        debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Run the command named on the command line. Returns an exit code."""
        if self.args is None:
            self.parse_args(argv)

        try:
            self.board, self.game = new_game(self.args.cols, self.args.rows)
        except ValueError as e:
            self.output_fn(f"Error: {e}")
            return 2

        if self.args.command == 'play':
            return self.play_game()
        elif self.args.command == 'replay':
            return self.replay()
        elif self.args.command == 'benchmark':
            return self.benchmark()

        self.output_fn("Please specify a command. Use --help for options.")
        return 1

    def show_board(self) -> None:
        self.output_fn(self.board.render(self.game.winning_line))

    def announce_result(self) -> None:
        if self.game.is_over:
            self.output_fn(f"{self.game.winner} wins!")
        elif self.board.is_full():
            self.output_fn("It's a draw!")

    def play_game(self) -> int:
        """Play interactively until someone wins, the board fills or 'q' is entered."""
        self.output_fn(f"Enter a column number (0-{self.board.cols - 1}), or 'q' to quit.")
        self.show_board()

        while not self.game.is_over and not self.board.is_full():
            move = self.get_human_move()
            if move is None:
                self.output_fn("Quitting game.")
                return 0

            result = self.game.apply_move(move)
            if isinstance(result, MoveError):
                self.output_fn(f"Invalid move: {result}")
                continue
            self.show_board()

        self.announce_result()
        return 0

    def get_human_move(self) -> Optional[int]:
        """Prompt until a number or 'q' is entered. Returns None on quit."""
        while True:
            try:
                user_input = self.input_fn(f"{self.game.current_player} to move: ")
            except EOFError:
                return None

            user_input = user_input.strip().lower()
            if user_input == 'q':
                return None
            try:
                return int(user_input)
            except ValueError:
                self.output_fn("Please enter a column number or 'q'.")

    def replay(self) -> int:
        """Apply the --moves list in order and print the final position."""
        try:
            moves = parse_moves(self.args.moves)
        except ValueError:
            self.output_fn(f"Could not parse moves: {self.args.moves}")
            return 1

        for i, move in enumerate(moves):
            result = self.game.apply_move(move)
            if isinstance(result, MoveError):
                self.show_board()
                self.output_fn(f"Move {i + 1} (column {move}) rejected: {result}")
                return 1

        self.show_board()
        self.announce_result()
        if not self.game.is_over and not self.board.is_full():
            self.output_fn(f"{self.game.current_player} to move.")
        return 0

    def benchmark(self) -> int:
        """Play random games to time drops and win checks."""
        rng = random.Random(self.args.seed)
        total_moves = 0

        debug.start_timer("game_simulation")
        for _ in range(self.args.games):
            self.game.reset()
            while not self.game.is_over:
                valid_moves = self.board.valid_moves()
                if not valid_moves:
                    break
                self.game.apply_move(rng.choice(valid_moves))
                total_moves += 1
        elapsed = debug.end_timer("game_simulation") or 0.0

        self.output_fn(f"Played {self.args.games} games with {total_moves} total moves: "
                       f"{elapsed:.6f} seconds total, "
                       f"{elapsed / max(total_moves, 1) * 1000:.6f} ms per move")
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    raise SystemExit(main())
