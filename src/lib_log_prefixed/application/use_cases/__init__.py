"""Application use cases."""

from __future__ import annotations

from .compile_scheme import compile_color_scheme

__all__ = ["compile_color_scheme"]
