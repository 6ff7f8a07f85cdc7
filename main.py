"""Command Line Entry Point - Root Module.

Lets the tool run as `python main.py ...` from the repository root.
It imports from the quiz package.
"""

import sys

from quiz.main import main

__all__ = [
    "main",
]


if __name__ == "__main__":
    sys.exit(main())
