#!/usr/bin/env python3
"""Play Rock Paper Paradise against AI opponents.

Run this file to start an interactive campaign:
    python play.py [--seed N] [--verbose]
"""

from src.game.interactive_game import main

if __name__ == "__main__":
    main()
