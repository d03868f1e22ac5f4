"""Lox lexical scanner."""

from __future__ import annotations

import logging
from typing import Final

from lox.errors import UNEXPECTED_CHARACTER, UNTERMINATED_STRING, DiagnosticCollector, ErrorReporter
from lox.tokens import KEYWORDS, Literal, Token, TokenType


logger = logging.getLogger(__name__)

_SINGLE_CHAR_TOKENS: Final[dict[str, TokenType]] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Bare operator -> (operator followed by "=", bare operator)
_EQUAL_VARIANTS: Final[dict[str, tuple[TokenType, TokenType]]] = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}

_WHITESPACE: Final[str] = " \r\t"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def _is_alphanumeric(ch: str) -> bool:
    return _is_alpha(ch) or _is_digit(ch)


class Scanner:
    """Converts Lox source text into a token stream.

    A scanner is bound to one source string and scans it once. Malformed
    input is passed to ``reporter`` and never stops the scan, so
    :meth:`scan_tokens` always returns a list ending in a single EOF token.
    Source is addressed by Unicode code point; only ASCII letters and digits
    are recognised, anything else outside a string is an unexpected character.
    """

    def __init__(self, source: str, reporter: ErrorReporter | None = None) -> None:
        self.source = source
        self.reporter: ErrorReporter = reporter if reporter is not None else DiagnosticCollector()
        self.tokens: list[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.error_count = 0
        self._scanned = False

    def scan_tokens(self) -> list[Token]:
        """Scan the full source and return the token stream."""
        if self._scanned:
            return list(self.tokens)

        while not self._is_at_end():
            self.start = self.current
            self._scan_token()

        self.tokens.append(Token(token_type=TokenType.EOF, lexeme="", literal=None, line=self.line))
        self._scanned = True
        logger.debug("scanned %d tokens over %d lines, %d errors", len(self.tokens), self.line, self.error_count)
        return list(self.tokens)

    def _scan_token(self) -> None:
        ch = self._advance()

        token_type = _SINGLE_CHAR_TOKENS.get(ch)
        if token_type is not None:
            self._add_token(token_type)
            return

        variants = _EQUAL_VARIANTS.get(ch)
        if variants is not None:
            with_equal, bare = variants
            self._add_token(with_equal if self._match("=") else bare)
            return

        if ch == "/":
            if self._match("/"):
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
            return

        if ch in _WHITESPACE:
            return

        if ch == "\n":
            self.line += 1
            return

        if ch == '"':
            self._string()
            return

        if _is_digit(ch):
            self._number()
            return

        if _is_alpha(ch):
            self._identifier()
            return

        self._error(self.line, UNEXPECTED_CHARACTER)

    def _string(self) -> None:
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            self._error(self.line, UNTERMINATED_STRING)
            return

        self._advance()  # closing quote
        self._add_token(TokenType.STRING, self.source[self.start + 1 : self.current - 1])

    def _number(self) -> None:
        while _is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start : self.current]))

    def _identifier(self) -> None:
        while _is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start : self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _add_token(self, token_type: TokenType, literal: Literal = None) -> None:
        lexeme = self.source[self.start : self.current]
        self.tokens.append(Token(token_type=token_type, lexeme=lexeme, literal=literal, line=self.line))

    def _error(self, line: int, message: str) -> None:
        self.error_count += 1
        self.reporter.report(line, message)

    def _match(self, expected: str) -> bool:
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def _advance(self) -> str:
        ch = self.source[self.current]
        self.current += 1
        return ch

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)
