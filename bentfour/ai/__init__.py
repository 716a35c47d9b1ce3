"""
bentfour/ai/__init__.py - Computer opponents for Bent Four

This package provides the move-selection players that simulate moves on
cloned boards to pick a column.
"""

from bentfour.ai.players import (RandomPlayer, GreedyPlayer, HeuristicPlayer,
                                 create_player)

__all__ = ['RandomPlayer', 'GreedyPlayer', 'HeuristicPlayer', 'create_player']
