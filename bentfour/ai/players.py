"""
players.py - Computer opponents for Bent Four

Each player looks at the board, simulates candidate moves on clones and
returns the column it wants to play. None of them mutate the board they
are given; the controller commits the chosen move.

The players, from weakest to strongest:
1. RandomPlayer - any column that still has room
2. GreedyPlayer - takes an immediate win when there is one
3. HeuristicPlayer - also avoids moves that hand the opponent a win
"""

import random
from typing import List, Optional

from bentfour.debug import debug
from bentfour.game.board import Board
from bentfour.game.errors import ColumnFullError
from bentfour.utils import PolicyType, Symbol


class RandomPlayer:
    """Plays a uniformly random column among those that are not full."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, board: Board, symbol: Symbol) -> int:
        valid_moves = board.get_valid_moves()
        if not valid_moves:
            raise ColumnFullError()
        column = self.rng.choice(valid_moves)
        debug.debug(f"Random move for {symbol}: column {column}", "ai")
        return column


class GreedyPlayer(RandomPlayer):
    """Wins immediately when possible, otherwise plays randomly."""

    def find_winning_move(self, board: Board, symbol: Symbol) -> Optional[int]:
        """
        Find the lowest column that wins the game right away.

        Args:
            board: The current board (left untouched)
            symbol: The symbol to move for

        Returns:
            The winning column, or None if no single move wins
        """
        for column in range(board.columns):
            guess = board.clone()
            if guess.try_insert(column, symbol) is None:
                continue
            if guess.winner() == symbol:
                debug.debug(f"Winning move for {symbol}: column {column}", "ai")
                return column
        return None

    def get_move(self, board: Board, symbol: Symbol) -> int:
        column = self.find_winning_move(board, symbol)
        if column is not None:
            return column
        return super().get_move(board, symbol)


class HeuristicPlayer(GreedyPlayer):
    """
    Two ply lookahead.

    Takes an immediate win if there is one. Otherwise every playable column
    is tried, followed by every reply of the opponent; a column after which
    the opponent can complete a shape is unsafe. A random safe column is
    played, or a random column when nothing is safe.
    """

    def find_safe_moves(self, board: Board, symbol: Symbol) -> List[int]:
        """
        Get the playable columns that do not give the opponent a winning reply.

        Full columns are not candidates at all, they are never reported as
        safe or unsafe.
        """
        opponent = symbol.other()
        safe = []

        for column in range(board.columns):
            after_me = board.clone()
            if after_me.try_insert(column, symbol) is None:
                continue

            unsafe = False
            for reply in range(after_me.columns):
                guess = after_me.clone()
                if guess.try_insert(reply, opponent) is None:
                    continue
                if guess.winner() == opponent:
                    debug.trace(f"Column {column} lets {opponent} win with {reply}", "ai")
                    unsafe = True
                    break

            if not unsafe:
                safe.append(column)

        return safe

    def get_move(self, board: Board, symbol: Symbol) -> int:
        column = self.find_winning_move(board, symbol)
        if column is not None:
            return column

        safe = self.find_safe_moves(board, symbol)
        if not safe:
            debug.debug(f"No safe column for {symbol}, playing randomly", "ai")
            return RandomPlayer.get_move(self, board, symbol)

        column = self.rng.choice(safe)
        debug.debug(f"Heuristic move for {symbol}: column {column} of safe {safe}", "ai")
        return column


PLAYER_CLASSES = {
    PolicyType.RANDOM: RandomPlayer,
    PolicyType.GREEDY: GreedyPlayer,
    PolicyType.HEURISTIC: HeuristicPlayer,
}


def create_player(policy: PolicyType, rng: Optional[random.Random] = None) -> RandomPlayer:
    """
    Create the computer player for a policy.

    Raises:
        ValueError: If the policy is not an AI policy
    """
    if policy not in PLAYER_CLASSES:
        raise ValueError(f"{policy} is not a computer player")
    return PLAYER_CLASSES[policy](rng)
