"""
cli.py - Command-line interface for Bent Four

This module provides a CLI for playing Bent Four in a terminal, against
another person or one of the computer players, and for benchmarking the
computer players against each other.
"""

import argparse
import random
import sys
from collections import Counter
from typing import Callable, List, Optional

from bentfour.debug import debug, DebugLevel
from bentfour.game.rules import BentFourGame
from bentfour.utils import (DEFAULT_COLUMNS, DEFAULT_ROWS, GameResult,
                            PolicyType, Symbol)

POLICY_CHOICES = [policy.value for policy in PolicyType]
AI_CHOICES = [policy.value for policy in PolicyType if policy.is_ai()]


class SimpleCLI:
    """Simple command-line interface for Bent Four."""

    def __init__(self, prompt: Callable[[str], str] = input,
                 display: Callable[[str], None] = print):
        """
        Initialize the CLI.

        Args:
            prompt: Reads an answer from the user
            display: Writes a line for the user
        """
        self.prompt = prompt
        self.display = display
        self.args = None

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            description='Bent Four - connect four with S and Z shaped wins')

        # Options shared by every command
        common = argparse.ArgumentParser(add_help=False)
        common.add_argument('--rows', type=int, default=DEFAULT_ROWS,
                            help=f'Number of rows (default: {DEFAULT_ROWS})')
        common.add_argument('--columns', type=int, default=DEFAULT_COLUMNS,
                            help=f'Number of columns (default: {DEFAULT_COLUMNS})')
        common.add_argument('--seed', type=int, default=None,
                            help='Random seed for the computer players')
        common.add_argument('--debug', action='store_true',
                            help='Enable debug mode (equivalent to --debug-level debug)')
        common.add_argument('--debug-level',
                            choices=[level.name.lower() for level in DebugLevel],
                            default='error',
                            help='Set debug level: none, error, warning, info, debug, trace')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', parents=[common],
                                            help='Play a game interactively')
        play_parser.add_argument('--player-a', choices=POLICY_CHOICES, default='human',
                                 help='Who plays X, the first player (default: human)')
        play_parser.add_argument('--player-b', choices=POLICY_CHOICES, default='heuristic',
                                 help='Who plays O (default: heuristic)')
        play_parser.add_argument('--no-pause', action='store_true',
                                 help="Don't wait for Return after computer moves")

        benchmark_parser = subparsers.add_parser('benchmark', parents=[common],
                                                 help='Play computer players against each other')
        benchmark_parser.add_argument('--games', type=int, default=100,
                                      help='Number of games to play (default: 100)')
        benchmark_parser.add_argument('--player-a', choices=AI_CHOICES, default='random',
                                      help='Computer player for X (default: random)')
        benchmark_parser.add_argument('--player-b', choices=AI_CHOICES, default='heuristic',
                                      help='Computer player for O (default: heuristic)')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.set_from_string(self.args.debug_level)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the CLI based on the parsed arguments.

        Returns:
            Process exit code
        """
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            return self.play_game()
        elif self.args.command == 'benchmark':
            return self.benchmark()

        self.display("Please specify a command. Use --help for options.")
        return 1

    def _players(self):
        return {Symbol.A: PolicyType(self.args.player_a),
                Symbol.B: PolicyType(self.args.player_b)}

    def play_game(self) -> int:
        """Play one game in the terminal."""
        game = BentFourGame(
            rows=self.args.rows,
            columns=self.args.columns,
            players=self._players(),
            prompt=self.prompt,
            display=self.display,
            rng=random.Random(self.args.seed),
            pause_after_ai=not self.args.no_pause,
            clear_screen=True,
        )
        try:
            game.run()
        except (KeyboardInterrupt, EOFError):
            self.display("\nQuitting game.")
        return 0

    def benchmark(self) -> int:
        """Play computer players against each other and report the results."""
        players = self._players()
        rng = random.Random(self.args.seed)
        results = Counter()
        total_time = 0.0

        self.display(f"Playing {self.args.games} games on a {self.args.rows}x{self.args.columns} board: "
                     f"X={self.args.player_a}, O={self.args.player_b}")
        for _ in range(self.args.games):
            game = BentFourGame(
                rows=self.args.rows,
                columns=self.args.columns,
                players=players,
                prompt=lambda text: "",
                display=lambda text: None,
                rng=rng,
                pause_after_ai=False,
            )
            debug.start_timer("benchmark_game")
            results[game.run()] += 1
            total_time += debug.end_timer("benchmark_game", "cli")

        games = max(self.args.games, 1)
        self.display(f"X ({self.args.player_a}) wins: {results[GameResult.A_WIN]}")
        self.display(f"O ({self.args.player_b}) wins: {results[GameResult.B_WIN]}")
        self.display(f"Draws: {results[GameResult.DRAW]}")
        self.display(f"Total time: {total_time:.3f} seconds, "
                     f"{total_time / games * 1000:.3f} ms per game")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
