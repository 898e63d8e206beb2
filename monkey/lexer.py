"""Lexical scanner for the Monkey language.

The lexer walks the source one character at a time, keeping the current
position, the lookahead position and the current character. It never
raises: characters it does not recognise become ILLEGAL tokens, and an
unterminated string literal simply runs to the end of the input.
"""

from __future__ import annotations

from typing import Iterator, List

from lark import Token

from .tokens import (
    EOF, ILLEGAL, INT, STRING, ASSIGN, BANG, EQ, NOT_EQ,
    SINGLE_CHAR_TOKENS, lookup_ident, new_token,
)

WHITESPACE = ' \t\n\r'


def is_letter(ch: str) -> bool:
    return ('a' <= ch <= 'z') or ('A' <= ch <= 'Z') or ch == '_'


def is_digit(ch: str) -> bool:
    return '0' <= ch <= '9'


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.position = 0       # index of self.ch
        self.read_position = 0  # index of the next character to read
        self.ch = ''            # '' once the input is exhausted
        self.line = 1
        self.line_start = 0
        self.read_char()

    def read_char(self) -> None:
        if self.ch == '\n':
            self.line += 1
            self.line_start = self.read_position
        if self.read_position >= len(self.source):
            self.ch = ''
        else:
            self.ch = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def peek_char(self) -> str:
        if self.read_position >= len(self.source):
            return ''
        return self.source[self.read_position]

    def next_token(self) -> Token:
        """Scan and return the next token, advancing the cursor."""
        self.skip_whitespace()
        start = self.position
        line = self.line
        column = self.position - self.line_start + 1

        def make(type_: str, literal: str) -> Token:
            return new_token(type_, literal, start, line, column)

        ch = self.ch
        if ch == '':
            return make(EOF, '')
        if ch == '=':
            if self.peek_char() == '=':
                self.read_char()
                tok = make(EQ, '==')
            else:
                tok = make(ASSIGN, '=')
        elif ch == '!':
            if self.peek_char() == '=':
                self.read_char()
                tok = make(NOT_EQ, '!=')
            else:
                tok = make(BANG, '!')
        elif ch == '"':
            return make(STRING, self.read_string())
        elif ch in SINGLE_CHAR_TOKENS:
            tok = make(SINGLE_CHAR_TOKENS[ch], ch)
        elif is_letter(ch):
            word = self.read_while(is_letter)
            return make(lookup_ident(word), word)
        elif is_digit(ch):
            return make(INT, self.read_while(is_digit))
        else:
            tok = make(ILLEGAL, ch)
        self.read_char()
        return tok

    def tokens(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == EOF:
                return

    def skip_whitespace(self) -> None:
        while self.ch != '' and self.ch in WHITESPACE:
            self.read_char()

    def read_while(self, predicate) -> str:
        start = self.position
        while self.ch != '' and predicate(self.ch):
            self.read_char()
        return self.source[start:self.position]

    def read_string(self) -> str:
        # Leaves the cursor after the closing quote (or at the end of input).
        start = self.position + 1
        while True:
            self.read_char()
            if self.ch == '"' or self.ch == '':
                break
        literal = self.source[start:self.position]
        if self.ch == '"':
            self.read_char()
        return literal


def tokenize(source: str) -> List[Token]:
    """Convert source code into a list of tokens ending with EOF."""
    return list(Lexer(source).tokens())
