"""Coloured status lines for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def _emoji_disabled() -> bool:
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, message: str, colour: str) -> None:
    console = Console(highlight=False)
    console.print(Text.assemble((symbol, colour), " ", (message, colour)), soft_wrap=True)


def warn(message: str) -> None:
    """Print a red warning line."""
    symbol = "!" if _emoji_disabled() else "⚠️ "
    _emit(symbol, message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    symbol = "✓" if _emoji_disabled() else "✅"
    _emit(symbol, message, "green")