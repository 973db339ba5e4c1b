"""Module entry point so ``python -m lib_log_prefixed`` mirrors the console script."""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
