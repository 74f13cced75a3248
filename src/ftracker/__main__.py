"""Entry point for ``python -m ftracker``."""

from __future__ import annotations

from ftracker.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
