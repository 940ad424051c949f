#!/usr/bin/env python3
"""
Main script to launch Beat Pong with PyGame graphical interface
"""

import sys

from beat_pong.gui.game_app import main

if __name__ == "__main__":
    sys.exit(main())
