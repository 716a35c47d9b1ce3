#!/usr/bin/env python3
"""
run.py - Main entry point for Bent Four

Examples:

    # Play against the heuristic computer player on the default 9x10 board
    python run.py play

    # Two human players
    python run.py play --player-b human

    # Let the greedy player open against the heuristic one, without pauses
    python run.py play --player-a greedy --player-b heuristic --no-pause

    # Benchmark 500 games of random against heuristic on a 6x7 board
    python run.py benchmark --games 500 --rows 6 --columns 7
"""

import sys

from bentfour.debug import debug
from bentfour.game.errors import InvalidConfigurationError
from bentfour.interfaces.cli import main as cli_main


def main() -> int:
    """Main entry point for the Bent Four console game."""
    try:
        return cli_main()
    except InvalidConfigurationError as e:
        debug.error(f"Invalid configuration: {e}", "cli")
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
