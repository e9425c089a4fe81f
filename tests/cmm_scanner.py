"""A small line-based C-- scanner used to drive the harness in tests.

Malformed input (stray characters, unterminated strings) comes back as
``ERROR`` tokens instead of being reported and skipped.
"""

from __future__ import annotations

import re
from typing import Iterator, List, TextIO

from tokdump.scanner import ScanState
from tokdump.tokens import Token, TokenKind

KEYWORDS = {
    kind.value: kind
    for kind in (
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
    )
}

# Longest operators first so "<<" wins over "<".
SYMBOLS = [
    ("<<", TokenKind.WRITE),
    (">>", TokenKind.READ),
    ("++", TokenKind.PLUSPLUS),
    ("--", TokenKind.MINUSMINUS),
    ("&&", TokenKind.AND),
    ("||", TokenKind.OR),
    ("==", TokenKind.EQUALS),
    ("!=", TokenKind.NOTEQUALS),
    ("<=", TokenKind.LESSEQ),
    (">=", TokenKind.GREATEREQ),
    ("{", TokenKind.LCURLY),
    ("}", TokenKind.RCURLY),
    ("(", TokenKind.LPAREN),
    (")", TokenKind.RPAREN),
    (";", TokenKind.SEMICOLON),
    (",", TokenKind.COMMA),
    (".", TokenKind.DOT),
    ("+", TokenKind.PLUS),
    ("-", TokenKind.MINUS),
    ("*", TokenKind.TIMES),
    ("/", TokenKind.DIVIDE),
    ("!", TokenKind.NOT),
    ("<", TokenKind.LESS),
    (">", TokenKind.GREATER),
    ("=", TokenKind.ASSIGN),
]

WORD = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
NUMBER = re.compile(r"[0-9]+")
STRING = re.compile(r'"(?:[^"\\\n]|\\[nt\'"?\\])*"')
COMMENT = re.compile(r"(//|#).*")
SPACE = re.compile(r"[ \t\r\f]+")


class CmmScanner:
    def __init__(self, stream: TextIO, state: ScanState) -> None:
        self.state = state
        self._tokens = self._scan(stream)

    def next_token(self) -> Token:
        try:
            return next(self._tokens)
        except StopIteration:
            return Token(TokenKind.EOF, self.state.line_num, self.state.char_num)

    def _scan(self, stream: TextIO) -> Iterator[Token]:
        for line in stream:
            for token in self._scan_line(line.rstrip("\n")):
                yield token
            self.state.line_num += 1
            self.state.char_num = 1

    def _scan_line(self, text: str) -> List[Token]:
        tokens: List[Token] = []
        pos = 0
        while pos < len(text):
            start = pos
            line, column = self.state.line_num, self.state.char_num

            match = SPACE.match(text, pos) or COMMENT.match(text, pos)
            if match:
                pos = match.end()
            elif WORD.match(text, pos):
                word = WORD.match(text, pos).group()
                pos += len(word)
                kind = KEYWORDS.get(word)
                if kind is None:
                    tokens.append(Token(TokenKind.ID, line, column, word))
                else:
                    tokens.append(Token(kind, line, column))
            elif NUMBER.match(text, pos):
                digits = NUMBER.match(text, pos).group()
                pos += len(digits)
                tokens.append(Token(TokenKind.INTLITERAL, line, column, int(digits)))
            elif text[pos] == '"':
                match = STRING.match(text, pos)
                if match:
                    pos = match.end()
                    tokens.append(
                        Token(TokenKind.STRINGLITERAL, line, column, match.group())
                    )
                else:
                    pos = len(text)
                    tokens.append(Token(TokenKind.ERROR, line, column))
            else:
                for symbol, kind in SYMBOLS:
                    if text.startswith(symbol, pos):
                        pos += len(symbol)
                        tokens.append(Token(kind, line, column))
                        break
                else:
                    pos += 1
                    tokens.append(Token(TokenKind.ERROR, line, column))
            self.state.char_num += pos - start
        return tokens
