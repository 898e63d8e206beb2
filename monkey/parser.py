"""Pratt parser for the Monkey language.

The parser pulls tokens from a `Lexer` with one token of lookahead and
builds a `Program`. Expressions are parsed by precedence climbing: each
token type may have a prefix parse function (used when the token starts
an expression) and an infix parse function (used when it follows a
complete left operand). Operator binding strength comes from the
`PRECEDENCES` table.

Parsing never raises. Failures are appended to `Parser.errors` and the
failed construct is replaced by `None` so that parsing can continue with
the next statement. Callers are expected to check `errors` before
evaluating the program.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Dict, List, Optional, Tuple

from lark import Token

from . import tokens as t
from .ast import (
    Program, Node, LetStatement, ReturnStatement, ExpressionStatement,
    BlockStatement, Identifier, IntegerLiteral, StringLiteral, BooleanLiteral,
    ArrayLiteral, HashLiteral, PrefixExpression, InfixExpression,
    IndexExpression, IfExpression, FunctionLiteral, CallExpression,
)
from .lexer import Lexer


class Precedence(IntEnum):
    LOWEST = 1
    EQUALS = 2       # ==
    LESSGREATER = 3  # > or <
    SUM = 4          # +
    PRODUCT = 5      # *
    PREFIX = 6       # -x or !x
    CALL = 7         # fn(x)
    INDEX = 8        # array[index]


PRECEDENCES = {
    t.EQ: Precedence.EQUALS,
    t.NOT_EQ: Precedence.EQUALS,
    t.LT: Precedence.LESSGREATER,
    t.GT: Precedence.LESSGREATER,
    t.PLUS: Precedence.SUM,
    t.MINUS: Precedence.SUM,
    t.SLASH: Precedence.PRODUCT,
    t.ASTERISK: Precedence.PRODUCT,
    t.LPAREN: Precedence.CALL,
    t.LBRACKET: Precedence.INDEX,
}

PrefixParseFn = Callable[[], Optional[Node]]
InfixParseFn = Callable[[Optional[Node]], Optional[Node]]


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.errors: List[str] = []

        self.prefix_parse_fns: Dict[str, PrefixParseFn] = {
            t.IDENT: self.parse_identifier,
            t.INT: self.parse_integer_literal,
            t.STRING: self.parse_string_literal,
            t.TRUE: self.parse_boolean,
            t.FALSE: self.parse_boolean,
            t.BANG: self.parse_prefix_expression,
            t.MINUS: self.parse_prefix_expression,
            t.LPAREN: self.parse_grouped_expression,
            t.IF: self.parse_if_expression,
            t.FUNCTION: self.parse_function_literal,
            t.LBRACKET: self.parse_array_literal,
            t.LBRACE: self.parse_hash_literal,
        }
        self.infix_parse_fns: Dict[str, InfixParseFn] = {
            t.PLUS: self.parse_infix_expression,
            t.MINUS: self.parse_infix_expression,
            t.SLASH: self.parse_infix_expression,
            t.ASTERISK: self.parse_infix_expression,
            t.EQ: self.parse_infix_expression,
            t.NOT_EQ: self.parse_infix_expression,
            t.LT: self.parse_infix_expression,
            t.GT: self.parse_infix_expression,
            t.LPAREN: self.parse_call_expression,
            t.LBRACKET: self.parse_index_expression,
        }

        # Read two tokens so cur_token and peek_token are both set
        self.cur_token: Token = lexer.next_token()
        self.peek_token: Token = lexer.next_token()

    def next_token(self) -> None:
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, type_: str) -> bool:
        return self.cur_token.type == type_

    def peek_token_is(self, type_: str) -> bool:
        return self.peek_token.type == type_

    def expect_peek(self, type_: str) -> bool:
        """Advance if the lookahead token has the given type, else record an error."""
        if self.peek_token_is(type_):
            self.next_token()
            return True
        self.peek_error(type_)
        return False

    def peek_error(self, type_: str) -> None:
        self.errors.append(f"expected next token to be {type_}, got {self.peek_token.type} instead")

    def no_prefix_parse_fn_error(self, type_: str) -> None:
        self.errors.append(f"no prefix parse function for {type_} found")

    def peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.type, Precedence.LOWEST)

    def cur_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.cur_token.type, Precedence.LOWEST)

    # Statements

    def parse_program(self) -> Program:
        program = Program()
        while not self.cur_token_is(t.EOF):
            try:
                stmt = self.parse_statement()
            except RecursionError:
                # the token stream is left mid-expression, so parsing stops here
                self.errors.append("maximum nesting depth exceeded")
                break
            if stmt is not None:
                program.statements.append(stmt)
            self.next_token()
        return program

    def parse_statement(self) -> Optional[Node]:
        token_type = self.cur_token.type
        if token_type == t.LET:
            return self.parse_let_statement()
        if token_type == t.RETURN:
            return self.parse_return_statement()
        if token_type == t.SEMICOLON:
            # empty statement
            return None
        return self.parse_expression_statement()

    def parse_let_statement(self) -> Optional[LetStatement]:
        token = self.cur_token
        if not self.expect_peek(t.IDENT):
            return None
        name = Identifier(self.cur_token, self.cur_token.value)
        if not self.expect_peek(t.ASSIGN):
            return None
        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)
        if self.peek_token_is(t.SEMICOLON):
            self.next_token()
        if value is None:
            return None
        return LetStatement(token, name, value)

    def parse_return_statement(self) -> Optional[ReturnStatement]:
        token = self.cur_token
        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)
        if self.peek_token_is(t.SEMICOLON):
            self.next_token()
        if value is None:
            return None
        return ReturnStatement(token, value)

    def parse_expression_statement(self) -> Optional[ExpressionStatement]:
        token = self.cur_token
        expression = self.parse_expression(Precedence.LOWEST)
        if self.peek_token_is(t.SEMICOLON):
            self.next_token()
        if expression is None:
            return None
        return ExpressionStatement(token, expression)

    def parse_block_statement(self) -> BlockStatement:
        block = BlockStatement(self.cur_token)
        self.next_token()
        while not self.cur_token_is(t.RBRACE) and not self.cur_token_is(t.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                block.statements.append(stmt)
            self.next_token()
        return block

    # Expressions

    def parse_expression(self, precedence: Precedence) -> Optional[Node]:
        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            self.no_prefix_parse_fn_error(self.cur_token.type)
            return None
        left = prefix()
        while not self.peek_token_is(t.SEMICOLON) and precedence < self.peek_precedence():
            infix = self.infix_parse_fns.get(self.peek_token.type)
            if infix is None:
                return left
            self.next_token()
            left = infix(left)
        return left

    def parse_identifier(self) -> Node:
        return Identifier(self.cur_token, self.cur_token.value)

    def parse_integer_literal(self) -> Optional[Node]:
        try:
            value = int(self.cur_token.value)
        except ValueError:
            self.errors.append(f"could not parse {self.cur_token.value} as integer")
            return None
        return IntegerLiteral(self.cur_token, value)

    def parse_string_literal(self) -> Node:
        return StringLiteral(self.cur_token, self.cur_token.value)

    def parse_boolean(self) -> Node:
        return BooleanLiteral(self.cur_token, self.cur_token_is(t.TRUE))

    def parse_prefix_expression(self) -> Node:
        token = self.cur_token
        self.next_token()
        right = self.parse_expression(Precedence.PREFIX)
        return PrefixExpression(token, token.value, right)

    def parse_infix_expression(self, left: Optional[Node]) -> Node:
        token = self.cur_token
        precedence = self.cur_precedence()
        self.next_token()
        right = self.parse_expression(precedence)
        return InfixExpression(token, token.value, left, right)

    def parse_grouped_expression(self) -> Optional[Node]:
        self.next_token()
        expression = self.parse_expression(Precedence.LOWEST)
        if not self.expect_peek(t.RPAREN):
            return None
        return expression

    def parse_if_expression(self) -> Optional[Node]:
        token = self.cur_token
        if not self.expect_peek(t.LPAREN):
            return None
        self.next_token()
        condition = self.parse_expression(Precedence.LOWEST)
        if not self.expect_peek(t.RPAREN):
            return None
        if not self.expect_peek(t.LBRACE):
            return None
        consequence = self.parse_block_statement()

        alternative = None
        if self.peek_token_is(t.ELSE):
            self.next_token()
            if self.peek_token_is(t.IF):
                # else if: wrap the nested if in a block of its own
                self.next_token()
                block_token = self.cur_token
                nested = self.parse_if_expression()
                if nested is None:
                    return None
                alternative = BlockStatement(block_token, [ExpressionStatement(block_token, nested)])
            else:
                if not self.expect_peek(t.LBRACE):
                    return None
                alternative = self.parse_block_statement()
        return IfExpression(token, condition, consequence, alternative)

    def parse_function_literal(self) -> Optional[Node]:
        token = self.cur_token
        if not self.expect_peek(t.LPAREN):
            return None
        parameters = self.parse_expression_list(t.RPAREN, self.parse_parameter)
        if parameters is None:
            return None
        if not self.expect_peek(t.LBRACE):
            return None
        body = self.parse_block_statement()
        return FunctionLiteral(token, parameters, body)

    def parse_parameter(self) -> Optional[Identifier]:
        if not self.cur_token_is(t.IDENT):
            self.errors.append(f"expected next token to be {t.IDENT}, got {self.cur_token.type} instead")
            return None
        return Identifier(self.cur_token, self.cur_token.value)

    def parse_call_expression(self, function: Optional[Node]) -> Optional[Node]:
        token = self.cur_token
        arguments = self.parse_expression_list(t.RPAREN)
        if arguments is None:
            return None
        return CallExpression(token, function, arguments)

    def parse_index_expression(self, left: Optional[Node]) -> Optional[Node]:
        token = self.cur_token
        self.next_token()
        index = self.parse_expression(Precedence.LOWEST)
        if not self.expect_peek(t.RBRACKET):
            return None
        return IndexExpression(token, left, index)

    def parse_array_literal(self) -> Optional[Node]:
        token = self.cur_token
        elements = self.parse_expression_list(t.RBRACKET)
        if elements is None:
            return None
        return ArrayLiteral(token, elements)

    def parse_hash_literal(self) -> Optional[Node]:
        token = self.cur_token
        pairs = self.parse_expression_list(t.RBRACE, self.parse_hash_pair)
        if pairs is None:
            return None
        return HashLiteral(token, pairs)

    def parse_hash_pair(self) -> Optional[Tuple[Node, Node]]:
        key = self.parse_expression(Precedence.LOWEST)
        if not self.expect_peek(t.COLON):
            return None
        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)
        if key is None or value is None:
            return None
        return (key, value)

    def parse_expression_list(self, end: str, parse_item: Optional[Callable] = None) -> Optional[list]:
        """Parse `item, item, ...` up to the `end` token.

        Shared by parameter lists, call arguments, array elements and hash
        pairs. The current token is the opening delimiter on entry and the
        closing one on a successful return.
        """
        if parse_item is None:
            parse_item = lambda: self.parse_expression(Precedence.LOWEST)
        items = []
        if self.peek_token_is(end):
            self.next_token()
            return items
        self.next_token()
        items.append(parse_item())
        while self.peek_token_is(t.COMMA):
            self.next_token()
            self.next_token()
            items.append(parse_item())
        if not self.expect_peek(end):
            return None
        if any(item is None for item in items):
            return None
        return items


def parse_program(source: str) -> Tuple[Program, List[str]]:
    """Parse Monkey source code into a Program and the list of parse errors."""
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    return program, parser.errors
