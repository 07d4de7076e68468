"""
connect4_arcade - Connect Four rule engine and presentation state

This package provides the board model, win and draw detection, the
tick-driven game controller and the end-of-game popup of an arcade-style
Connect Four game, plus a terminal interface and a Gymnasium environment
for driving the engine without a window.
"""

__version__ = '0.1.0'
