"""
cli.py - Command-line interface for the Connect Four engine

Play a two-player game in the terminal, analyze a board position, or
benchmark the engine. The terminal stands in for the window: each line of
input is one driver tick.
"""

import argparse
import random
import sys
import time
from typing import List, Optional

from connect4_arcade.debug import debug, DebugLevel
from connect4_arcade.game.animation import InstantAnimation
from connect4_arcade.game.board import Board
from connect4_arcade.game.controller import ClickOutcome, ControllerState, GameController
from connect4_arcade.game.rules import check_draw, check_win, winning_line
from connect4_arcade.utils import COLS, ROWS, RESTART_PROMPT, Player


class SimpleCLI:
    """Simple command-line interface for the Connect Four engine."""

    def __init__(self):
        self.controller = GameController(animation=InstantAnimation())
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and apply the debug level."""
        parser = argparse.ArgumentParser(description='Connect Four (arcade engine)')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug mode (equivalent to --debug_level debug)')
        parser.add_argument('--debug_level',
                            choices=[level.name.lower() for level in DebugLevel],
                            default='warning',
                            help='Most verbose log level to show')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', help='Play a two-player game in the terminal')

        test_parser = subparsers.add_parser('test', help='Analyze a board position')
        test_parser.add_argument('--position', type=str,
                                 help=f'{ROWS * COLS} comma-separated cell values, top row first')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark the engine')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of random games to play')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the command selected on the command line."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'test':
            return self.test_position()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def show(self) -> None:
        snapshot = self.controller.snapshot()
        print(self.controller.board.render())
        print(snapshot.status_text)

        popup = snapshot.popup
        if popup.active:
            print()
            print("GAME OVER")
            print(f"{popup.message}  (fade {popup.fade:.0f}/255)")
            print(RESTART_PROMPT)

    def play_game(self) -> None:
        """Play a game between two people at the same terminal."""
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{COLS - 1}) to drop a piece.")
        print("Other commands: 'q' to quit, 'r' to restart.")

        self.controller.request_reset()
        self.show()
        last_tick = time.perf_counter()

        while True:
            try:
                user_input = input(f"{self.controller.status_text} > ").strip().lower()
            except EOFError:
                print()
                return

            now = time.perf_counter()
            delta_time, last_tick = now - last_tick, now

            if user_input == 'q':
                print("Quitting game.")
                return
            if user_input == 'r':
                self.controller.request_reset()
                print("Game restarted.")
                self.show()
                continue

            try:
                column = int(user_input)
            except ValueError:
                print("Invalid input. Please enter a column number or a command.")
                continue

            outcome = self.controller.click_column(column)
            if outcome == ClickOutcome.COLUMN_FULL:
                print(f"Column {column} is full!")
            elif outcome == ClickOutcome.INVALID_COLUMN:
                print(f"Column must be between 0 and {COLS - 1}.")
            elif outcome == ClickOutcome.IGNORED:
                print("The game is over. Press 'r' to restart.")

            self.controller.tick(delta_time)
            self.show()

    def test_position(self) -> int:
        """Report wins, draw status and valid moves for a position."""
        if not self.args.position:
            print("Please provide a position string with --position")
            return 1

        try:
            board = Board.from_position([int(value) for value in self.args.position.split(',')])
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 1

        print("Loaded position:")
        print(board.render())

        print("\nTesting win conditions:")
        has_win = False
        for row, col, player in board.cells():
            if check_win(board, row, col):
                print(f"Win for {player.label} through ({row}, {col}): "
                      f"{winning_line(board, row, col)}")
                has_win = True
        if not has_win:
            print("No win detected for any player")

        if check_draw(board):
            print("Board is full" + ("" if has_win else " - it's a draw"))
        else:
            print(f"Empty spaces: {ROWS * COLS - board.move_count}")
            print(f"Valid moves: {board.get_valid_moves()}")
        return 0

    def benchmark(self) -> None:
        """Play random games through the controller and time them."""
        iterations = self.args.iterations
        print(f"Running benchmark with {iterations} games...")

        controller = GameController(animation=InstantAnimation())
        results = {ControllerState.TERMINAL_WIN: 0, ControllerState.TERMINAL_DRAW: 0}
        winners = {Player.ONE: 0, Player.TWO: 0}
        total_moves = 0

        debug.start_timer("benchmark")
        for _ in range(iterations):
            controller.request_reset()
            while controller.state == ControllerState.AWAITING_INPUT:
                controller.click_column(random.choice(controller.board.get_valid_moves()))
                controller.tick(1.0 / 60.0)
                total_moves += 1
            results[controller.state] += 1
            winner = controller.result.winner()
            if winner is not None:
                winners[winner] += 1
        elapsed = debug.end_timer("benchmark", "cli") or 0.0

        print(f"Played {iterations} games with {total_moves} moves in {elapsed:.6f} seconds")
        if iterations and total_moves:
            print(f"{elapsed / iterations * 1000:.6f} ms per game, "
                  f"{elapsed / total_moves * 1000:.6f} ms per move")
        print(f"Wins: {results[ControllerState.TERMINAL_WIN]} "
              f"({Player.ONE.label}: {winners[Player.ONE]}, {Player.TWO.label}: {winners[Player.TWO]}), "
              f"draws: {results[ControllerState.TERMINAL_DRAW]}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
