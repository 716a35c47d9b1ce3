"""
bentfour - Bent Four, a gravity connect game won with S/Z shaped formations

This package provides the board representation, the game controller with
its turn loop, simple AI opponents that plan by simulating moves on cloned
boards, a gymnasium environment, and a console interface.
"""

# Version number
__version__ = '0.1.0'
