"""Token records produced by the scanner and consumed by the dump driver."""

from __future__ import annotations

import dataclasses
import enum
from typing import Optional, Union


class TokenCategory(enum.Enum):
    KEYWORD = "keyword"
    PUNCTUATION = "punctuation"
    OPERATOR = "operator"
    LITERAL = "literal"
    IDENTIFIER = "identifier"
    END_OF_INPUT = "end-of-input"
    ERROR = "error"


class TokenKind(enum.Enum):
    # keywords
    BOOL = "bool"
    INT = "int"
    VOID = "void"
    TRUE = "true"
    FALSE = "false"
    STRUCT = "struct"
    CIN = "cin"
    COUT = "cout"
    IF = "if"
    ELSE = "else"
    WHILE = "while"
    RETURN = "return"

    ID = "ID"
    INTLITERAL = "INTLITERAL"
    STRINGLITERAL = "STRINGLITERAL"

    # punctuation
    LCURLY = "LCURLY"
    RCURLY = "RCURLY"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    SEMICOLON = "SEMICOLON"
    COMMA = "COMMA"
    DOT = "DOT"

    # operators
    WRITE = "WRITE"
    READ = "READ"
    PLUSPLUS = "PLUSPLUS"
    MINUSMINUS = "MINUSMINUS"
    PLUS = "PLUS"
    MINUS = "MINUS"
    TIMES = "TIMES"
    DIVIDE = "DIVIDE"
    NOT = "NOT"
    AND = "AND"
    OR = "OR"
    EQUALS = "EQUALS"
    NOTEQUALS = "NOTEQUALS"
    LESS = "LESS"
    GREATER = "GREATER"
    LESSEQ = "LESSEQ"
    GREATEREQ = "GREATEREQ"
    ASSIGN = "ASSIGN"

    EOF = "EOF"
    ERROR = "ERROR"

    @property
    def category(self) -> TokenCategory:
        return _CATEGORIES[self]

    @property
    def has_payload(self) -> bool:
        return self in PAYLOAD_KINDS


_KEYWORDS = {
    TokenKind.BOOL,
    TokenKind.INT,
    TokenKind.VOID,
    TokenKind.TRUE,
    TokenKind.FALSE,
    TokenKind.STRUCT,
    TokenKind.CIN,
    TokenKind.COUT,
    TokenKind.IF,
    TokenKind.ELSE,
    TokenKind.WHILE,
    TokenKind.RETURN,
}
_PUNCTUATION = {
    TokenKind.LCURLY,
    TokenKind.RCURLY,
    TokenKind.LPAREN,
    TokenKind.RPAREN,
    TokenKind.SEMICOLON,
    TokenKind.COMMA,
    TokenKind.DOT,
}


def _category_for(kind: TokenKind) -> TokenCategory:
    if kind in _KEYWORDS:
        return TokenCategory.KEYWORD
    if kind in _PUNCTUATION:
        return TokenCategory.PUNCTUATION
    if kind is TokenKind.ID:
        return TokenCategory.IDENTIFIER
    if kind in (TokenKind.INTLITERAL, TokenKind.STRINGLITERAL):
        return TokenCategory.LITERAL
    if kind is TokenKind.EOF:
        return TokenCategory.END_OF_INPUT
    if kind is TokenKind.ERROR:
        return TokenCategory.ERROR
    return TokenCategory.OPERATOR


_CATEGORIES = {kind: _category_for(kind) for kind in TokenKind}

# Expected payload type per payload-bearing kind.
PAYLOAD_KINDS = {
    TokenKind.ID: str,
    TokenKind.INTLITERAL: int,
    TokenKind.STRINGLITERAL: str,
}

Payload = Optional[Union[str, int]]


@dataclasses.dataclass(frozen=True)
class Token:
    """A single scanned token.

    ``line`` and ``column`` are 1-based and point at the token's first
    character. ``payload`` is only present for identifiers (raw text),
    integer literals (the value) and string literals (the captured text).
    """

    kind: TokenKind
    line: int
    column: int
    payload: Payload = None

    def __post_init__(self) -> None:
        if self.line < 1 or self.column < 1:
            raise ValueError(
                f"token position must be 1-based, got {self.line}:{self.column}"
            )
        expected = PAYLOAD_KINDS.get(self.kind)
        if expected is None:
            if self.payload is not None:
                raise ValueError(f"{self.kind.name} tokens carry no payload")
            return
        # bool is an int subclass but never a valid literal value
        if isinstance(self.payload, bool) or not isinstance(self.payload, expected):
            raise TypeError(
                f"{self.kind.name} payload must be {expected.__name__}, "
                f"got {type(self.payload).__name__}"
            )
        if self.kind is not TokenKind.INTLITERAL and not self.payload:
            raise ValueError(f"{self.kind.name} tokens need non-empty text")
