#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine

    # Two players at one terminal
    python run.py play

    # Replay a game and show the result
    python run.py replay --moves 0,6,1,6,2,6,3

    # Time a thousand random games on a wider board
    python run.py --cols 9 benchmark --games 1000
"""

from connect4_core.interfaces.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
