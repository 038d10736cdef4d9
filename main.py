#!/usr/bin/env python3
"""
Monster Battle

Thin wrapper around the CLI in the monsterbattle package.

To run: python main.py
"""

from monsterbattle.cli import run

if __name__ == "__main__":
    run()
