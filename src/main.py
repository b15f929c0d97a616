"""Entry point for the Lights Out puzzle.

Run from ``src/`` with ``python main.py``; installed copies expose the same
thing as the ``lightsout`` console script.
"""
from lightsout.app import main

if __name__ == "__main__":
    main()
