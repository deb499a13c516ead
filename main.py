#!/usr/bin/env python3
"""SimpleTimer — entry point.

Run with:
    python main.py
    python -m simpletimer
"""

from simpletimer.__main__ import main


if __name__ == "__main__":
    main()
