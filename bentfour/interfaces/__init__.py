"""
bentfour.interfaces - User interfaces for Bent Four

This package contains the command-line interface for playing and
benchmarking the game.
"""

# Don't import anything here to avoid circular imports
__all__ = []
