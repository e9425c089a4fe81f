"""Render tokens into the line-oriented golden-file format.

Every emitted line looks like ``"%3d:%2d\\t%s"``: the line number right
aligned in three columns, a colon, the column number right aligned in two,
a tab and the token text. The widths are part of the baseline files and
must not change.
"""

from __future__ import annotations

from typing import Any, Dict

from tokdump.tokens import Token, TokenKind

UNKNOWN_TOKEN = "UNKNOWN TOKEN"

FIXED_TEXT: Dict[TokenKind, str] = {
    TokenKind.BOOL: "bool",
    TokenKind.INT: "int",
    TokenKind.VOID: "void",
    TokenKind.TRUE: "true",
    TokenKind.FALSE: "false",
    TokenKind.STRUCT: "struct",
    TokenKind.CIN: "cin",
    TokenKind.COUT: "cout",
    TokenKind.IF: "if",
    TokenKind.ELSE: "else",
    TokenKind.WHILE: "while",
    TokenKind.RETURN: "return",
    TokenKind.LCURLY: "{",
    TokenKind.RCURLY: "}",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.SEMICOLON: ";",
    TokenKind.COMMA: ",",
    TokenKind.DOT: ".",
    TokenKind.WRITE: "<<",
    TokenKind.READ: ">>",
    TokenKind.PLUSPLUS: "++",
    TokenKind.MINUSMINUS: "--",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.TIMES: "*",
    TokenKind.DIVIDE: "/",
    TokenKind.NOT: "!",
    TokenKind.AND: "&&",
    TokenKind.OR: "||",
    TokenKind.EQUALS: "==",
    TokenKind.NOTEQUALS: "!=",
    TokenKind.LESS: "<",
    TokenKind.GREATER: ">",
    TokenKind.LESSEQ: "<=",
    TokenKind.GREATEREQ: ">=",
    TokenKind.ASSIGN: "=",
}


def render_token(token: Any) -> str:
    """Return the canonical text of ``token``.

    Never raises: kinds without a mapping, and payloads of the wrong shape,
    come back as :data:`UNKNOWN_TOKEN` so they show up in the output file.
    """
    kind = getattr(token, "kind", None)
    payload = getattr(token, "payload", None)

    try:
        fixed = FIXED_TEXT.get(kind)
    except TypeError:  # unhashable kind
        return UNKNOWN_TOKEN
    if fixed is not None:
        return fixed

    if kind is TokenKind.ID or kind is TokenKind.STRINGLITERAL:
        if isinstance(payload, str) and payload:
            return payload
    elif kind is TokenKind.INTLITERAL:
        if isinstance(payload, int) and not isinstance(payload, bool):
            return str(payload)
    return UNKNOWN_TOKEN


def format_line(line: int, column: int, text: str) -> str:
    return f"{line:3d}:{column:2d}\t{text}"


def format_token(token: Token) -> str:
    return format_line(token.line, token.column, render_token(token))
