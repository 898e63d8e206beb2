"""Token definitions for the Monkey language.

Tokens are `lark.Token` instances: an immutable string holding the literal
text, tagged with a `type` and the line/column where it starts.
"""

from __future__ import annotations

from typing import Optional

from lark import Token

EOF = 'EOF'
ILLEGAL = 'ILLEGAL'

# Identifiers and literals
IDENT = 'IDENT'
INT = 'INT'
STRING = 'STRING'

# Operators
ASSIGN = 'ASSIGN'
PLUS = 'PLUS'
MINUS = 'MINUS'
BANG = 'BANG'
ASTERISK = 'ASTERISK'
SLASH = 'SLASH'
LT = 'LT'
GT = 'GT'
EQ = 'EQ'
NOT_EQ = 'NOT_EQ'

# Delimiters
COMMA = 'COMMA'
SEMICOLON = 'SEMICOLON'
COLON = 'COLON'
LPAREN = 'LPAREN'
RPAREN = 'RPAREN'
LBRACE = 'LBRACE'
RBRACE = 'RBRACE'
LBRACKET = 'LBRACKET'
RBRACKET = 'RBRACKET'

# Keywords
FUNCTION = 'FUNCTION'
LET = 'LET'
IF = 'IF'
ELSE = 'ELSE'
TRUE = 'TRUE'
FALSE = 'FALSE'
RETURN = 'RETURN'

KEYWORDS = {
    'fn': FUNCTION,
    'let': LET,
    'if': IF,
    'else': ELSE,
    'true': TRUE,
    'false': FALSE,
    'return': RETURN,
}

SINGLE_CHAR_TOKENS = {
    '+': PLUS,
    '-': MINUS,
    '*': ASTERISK,
    '/': SLASH,
    '<': LT,
    '>': GT,
    ',': COMMA,
    ';': SEMICOLON,
    ':': COLON,
    '(': LPAREN,
    ')': RPAREN,
    '{': LBRACE,
    '}': RBRACE,
    '[': LBRACKET,
    ']': RBRACKET,
}


def lookup_ident(word: str) -> str:
    """Return the keyword tag for `word`, or IDENT for plain identifiers."""
    return KEYWORDS.get(word, IDENT)


def new_token(type_: str, literal: str, start_pos: Optional[int] = None,
              line: Optional[int] = None, column: Optional[int] = None) -> Token:
    return Token(type_, literal, start_pos, line, column)
