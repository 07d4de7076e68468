#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four arcade engine

Examples:

    # Play a two-player game in the terminal
    python run.py play

    # Analyze a board position (42 values, top row first)
    python run.py test --position 0,0,0,0,0,0,0,...

    # Play 5000 random games through the engine
    python run.py benchmark --iterations 5000

    # Show the engine's own log messages
    python run.py --debug_level info play
"""

import sys

from connect4_arcade.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
