"""
rules.py - Game loop and Gymnasium environment for Bent Four

This module provides:
1. BentFourGame, the turn controller that drives a console game between
   humans and computer players
2. BentFourEnv, a gymnasium-compatible environment around the same board
"""

import random
from typing import Callable, Dict, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from bentfour.ai.players import PLAYER_CLASSES, create_player
from bentfour.debug import debug, DebugLevel
from bentfour.game.board import Board
from bentfour.game.errors import (ColumnFullError, InvalidPositionError,
                                  InvalidSymbolError)
from bentfour.utils import (CLEAR_SCREEN, DEFAULT_COLUMNS, DEFAULT_ROWS,
                            GameResult, PolicyType, Symbol, render_field)


def result_for(board: Board) -> GameResult:
    """
    Derive the game result from a board.

    A completed shape wins even on a full board.
    """
    winner = board.winner()
    if winner is not None:
        return GameResult.win_for(winner)
    if board.is_full():
        return GameResult.DRAW
    return GameResult.IN_PROGRESS


class BentFourGame:
    """
    Turn controller for a game of Bent Four.

    The controller owns the board, knows whose turn it is and who plays each
    symbol, and talks to the outside world only through the prompt and
    display callables.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS,
                 players: Optional[Dict[Symbol, PolicyType]] = None,
                 prompt: Callable[[str], str] = input,
                 display: Callable[[str], None] = print,
                 rng: Optional[random.Random] = None,
                 pause_after_ai: bool = True,
                 clear_screen: bool = False):
        """
        Initialize a new game.

        Args:
            rows: Number of board rows
            columns: Number of board columns
            players: Policy per symbol, symbols left out are played by humans
            prompt: Asks the user a question and returns the typed answer
            display: Shows a line of text to the user
            rng: Random source for the computer players
            pause_after_ai: Wait for Return after each computer move
            clear_screen: Clear the terminal before drawing the field
        """
        debug.debug(f"Initializing BentFourGame {rows}x{columns}", "game")
        self.board = Board(rows, columns)
        self.current_symbol = Symbol.A
        self.players = {Symbol.A: PolicyType.HUMAN, Symbol.B: PolicyType.HUMAN}
        if players:
            self.players.update(players)
        self.prompt = prompt
        self.display = display
        self.rng = rng or random.Random()
        self.pause_after_ai = pause_after_ai
        self.clear_screen = clear_screen
        self._computer_players = {policy: create_player(policy, self.rng)
                                  for policy in PLAYER_CLASSES}

    def next_turn(self) -> None:
        """Hand the turn to the other symbol."""
        self.current_symbol = self.current_symbol.other()
        debug.debug(f"Switching to player {self.current_symbol}", "game")

    def get_result(self) -> GameResult:
        return result_for(self.board)

    def read_column(self) -> int:
        """
        Ask the user for a column.

        Raises:
            InvalidPositionError: If the answer is not a column number
        """
        answer = self.prompt(
            f"Which column do you want to play (0-{self.board.columns - 1})? ")
        try:
            return int(answer.strip())
        except ValueError:
            raise InvalidPositionError(f"there is no column {answer.strip()!r}") from None

    def human_move(self) -> int:
        """
        Let a human play, asking again until the move is legal.

        Returns:
            The column that was played
        """
        while True:
            try:
                column = self.read_column()
                self.board.insert(column, self.current_symbol)
                debug.debug(f"Human {self.current_symbol} played column {column}", "game")
                return column
            except (InvalidPositionError, InvalidSymbolError, ColumnFullError) as e:
                debug.debug(f"Rejected human input: {e}", "game")
                self.display(f"Error: {e}")

    def _computer_move(self, policy: PolicyType) -> int:
        column = self._computer_players[policy].get_move(self.board, self.current_symbol)
        self.board.insert(column, self.current_symbol)
        return column

    def random_move(self) -> int:
        return self._computer_move(PolicyType.RANDOM)

    def greedy_move(self) -> int:
        return self._computer_move(PolicyType.GREEDY)

    def heuristic_move(self) -> int:
        return self._computer_move(PolicyType.HEURISTIC)

    def play_turn(self) -> int:
        """
        Make one move for the current symbol with whoever plays it.

        Returns:
            The column that was played
        """
        policy = self.players[self.current_symbol]
        if policy == PolicyType.HUMAN:
            return self.human_move()

        moves = {
            PolicyType.RANDOM: self.random_move,
            PolicyType.GREEDY: self.greedy_move,
            PolicyType.HEURISTIC: self.heuristic_move,
        }
        debug.start_timer("ai_move")
        column = moves[policy]()
        debug.end_timer("ai_move", "game")

        message = f"{self.current_symbol} plays {column}."
        if self.pause_after_ai:
            self.prompt(f"{message} Hit Return to continue.")
        else:
            self.display(message)
        return column

    def render_field(self) -> str:
        text = render_field(self.board.to_display_text(), self.board.columns)
        if self.clear_screen:
            text = CLEAR_SCREEN + text
        return text

    def show_field(self) -> None:
        self.display(self.render_field())

    def show_player(self) -> None:
        self.display(f"\nIt's your turn, {self.current_symbol}!\n")

    def run(self) -> GameResult:
        """
        Play until somebody wins or the board is full.

        Returns:
            The final result, never IN_PROGRESS
        """
        debug.info(f"Starting game: X={self.players[Symbol.A].value}, "
                   f"O={self.players[Symbol.B].value}", "game")
        while True:
            self.show_field()
            self.show_player()
            self.play_turn()

            result = self.get_result()
            if result.is_game_over():
                self.show_field()
                if result == GameResult.DRAW:
                    self.display("\nThe field is full, nobody won!")
                else:
                    self.display(f"\nCongratulations, {self.board.winner()}, you won!")
                debug.info(f"Game over: {result.name}", "game")
                return result

            self.next_turn()


class BentFourEnv(gym.Env):
    """
    Bent Four environment following the Gymnasium interface.

    The agent plays agent_symbol. With an opponent policy configured the
    opponent replies inside the same step; without one the agent plays both
    sides and each reward is seen from the side that just moved.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS,
                 opponent: Optional[PolicyType] = None,
                 agent_symbol: Symbol = Symbol.A,
                 render_mode: Optional[str] = None):
        """
        Initialize the environment.

        Args:
            rows: Number of board rows
            columns: Number of board columns
            opponent: Computer policy answering the agent, None for self-play
            agent_symbol: Symbol played by the agent
            render_mode: Mode for rendering the environment
        """
        debug.debug("Initializing BentFourEnv", "env")
        if opponent is not None and not opponent.is_ai():
            raise ValueError("the opponent of an environment must be a computer policy")

        self.rows = rows
        self.columns = columns
        self.action_space = spaces.Discrete(columns)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(rows, columns), dtype=np.int8
        )

        self.board = Board(rows, columns)
        self.current_symbol = Symbol.A
        self.agent_symbol = agent_symbol
        self.opponent_policy = opponent
        self.opponent = None
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to an empty board.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.board = Board(self.rows, self.columns)
        self.current_symbol = Symbol.A
        if self.opponent_policy is not None:
            rng = random.Random(int(self.np_random.integers(2 ** 32)))
            self.opponent = create_player(self.opponent_policy, rng)
            if self.agent_symbol != Symbol.A:
                self._opponent_move()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def _opponent_move(self) -> int:
        column = self.opponent.get_move(self.board, self.current_symbol)
        self.board.insert(column, self.current_symbol)
        debug.debug(f"Opponent {self.current_symbol} played column {column}", "env")
        self.current_symbol = self.current_symbol.other()
        return column

    def _reward(self, result: GameResult, mover: Symbol) -> float:
        if result == GameResult.DRAW:
            return self.reward_draw
        if result == GameResult.win_for(mover):
            return self.reward_win
        return self.reward_lose

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop the current symbol into a column.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")
        mover = self.current_symbol

        if result_for(self.board).is_game_over() or not self.board.is_valid_column(action) \
                or self.board.is_column_full(action):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        self.board.insert(int(action), mover)
        self.current_symbol = mover.other()
        result = result_for(self.board)

        if not result.is_game_over() and self.opponent is not None:
            self._opponent_move()
            result = result_for(self.board)

        reward = self.reward_step
        terminated = result.is_game_over()
        if terminated:
            debug.info(f"Game over: {result.name}", "env")
            reward = self._reward(result, mover)

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        if self.render_mode is None:
            return None

        text = render_field(self.board.to_display_text(), self.columns)
        if self.render_mode == "ascii":
            return text
        print(text)
        return None

    def _get_observation(self) -> np.ndarray:
        return self.board.get_state().astype(np.int8)

    def _get_info(self) -> Dict:
        return {
            'valid_moves': self.board.get_valid_moves(),
            'current_symbol': self.current_symbol.value,
            'game_result': result_for(self.board).name,
            'winning_shape': self.board.get_winning_shape(),
        }

    def close(self):
        pass


if __name__ == "__main__":
    debug.configure(level=DebugLevel.INFO)

    env = BentFourEnv(rows=6, columns=7, opponent=PolicyType.HEURISTIC, render_mode="human")
    observation, info = env.reset(seed=0)
    done = False
    while not done:
        action = int(env.np_random.choice(info['valid_moves']))
        observation, reward, terminated, truncated, info = env.step(action)
        done = terminated or truncated
        print(f"Action {action}, reward {reward}")
