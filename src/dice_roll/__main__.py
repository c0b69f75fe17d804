"""Allows running the roller with ``python -m dice_roll``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
