"""Golden-file token dumps for the C-- scanner."""

from __future__ import annotations

from tokdump.render import UNKNOWN_TOKEN, format_line, format_token, render_token
from tokdump.tokens import Token, TokenKind

__all__ = [
    "Token",
    "TokenKind",
    "UNKNOWN_TOKEN",
    "format_line",
    "format_token",
    "render_token",
]

__version__ = "0.1.0"
