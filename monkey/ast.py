"""Abstract Syntax Tree (AST) definitions for the Monkey language.

Every node keeps the token it was built from, exposes `token_literal()`
and renders back to canonical source with `str(node)`. The rendering
parenthesises every prefix, infix and index expression, so parsing the
rendered text again yields an equivalent tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from lark import Token


def render(node: Optional['Node']) -> str:
    # Parser placeholders (None) render as nothing.
    return '' if node is None else str(node)


def render_statements(statements: List['Node']) -> str:
    parts = []
    for i, stmt in enumerate(statements):
        text = render(stmt)
        if isinstance(stmt, ExpressionStatement) and i < len(statements) - 1:
            text += ';'
        parts.append(text)
    return ' '.join(parts)


@dataclass
class Node:
    """Base class for all AST nodes."""
    token: Token

    def token_literal(self) -> str:
        return self.token.value


@dataclass
class Program:
    statements: List[Node] = field(default_factory=list)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ''

    def __str__(self) -> str:
        return render_statements(self.statements)


# Expressions

@dataclass
class Identifier(Node):
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class IntegerLiteral(Node):
    value: int

    def __str__(self) -> str:
        return self.token.value


@dataclass
class StringLiteral(Node):
    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass
class BooleanLiteral(Node):
    value: bool

    def __str__(self) -> str:
        return self.token.value


@dataclass
class ArrayLiteral(Node):
    elements: List[Optional[Node]]

    def __str__(self) -> str:
        return '[' + ', '.join(render(e) for e in self.elements) + ']'


@dataclass
class HashLiteral(Node):
    pairs: List[Tuple[Node, Node]]  # in source order

    def __str__(self) -> str:
        items = ', '.join(f'{render(k)}: {render(v)}' for k, v in self.pairs)
        return '{' + items + '}'


@dataclass
class PrefixExpression(Node):
    operator: str
    right: Optional[Node]

    def __str__(self) -> str:
        return f'({self.operator}{render(self.right)})'


@dataclass
class InfixExpression(Node):
    operator: str
    left: Optional[Node]
    right: Optional[Node]

    def __str__(self) -> str:
        return f'({render(self.left)} {self.operator} {render(self.right)})'


@dataclass
class IndexExpression(Node):
    left: Optional[Node]
    index: Optional[Node]

    def __str__(self) -> str:
        return f'({render(self.left)}[{render(self.index)}])'


@dataclass
class BlockStatement(Node):
    statements: List[Node] = field(default_factory=list)

    def __str__(self) -> str:
        if not self.statements:
            return '{ }'
        return '{ ' + render_statements(self.statements) + ' }'


@dataclass
class IfExpression(Node):
    condition: Optional[Node]
    consequence: BlockStatement
    alternative: Optional[BlockStatement] = None

    def __str__(self) -> str:
        text = f'if ({render(self.condition)}) {self.consequence}'
        if self.alternative is not None:
            text += f' else {self.alternative}'
        return text


@dataclass
class FunctionLiteral(Node):
    parameters: List[Identifier]
    body: BlockStatement

    def __str__(self) -> str:
        params = ', '.join(str(p) for p in self.parameters)
        return f'{self.token_literal()}({params}) {self.body}'


@dataclass
class CallExpression(Node):
    function: Optional[Node]  # Identifier or FunctionLiteral, or any callee expression
    arguments: List[Optional[Node]]

    def __str__(self) -> str:
        args = ', '.join(render(a) for a in self.arguments)
        return f'{render(self.function)}({args})'


# Statements

@dataclass
class LetStatement(Node):
    name: Identifier
    value: Optional[Node]

    def __str__(self) -> str:
        return f'{self.token_literal()} {self.name} = {render(self.value)};'


@dataclass
class ReturnStatement(Node):
    return_value: Optional[Node]

    def __str__(self) -> str:
        return f'{self.token_literal()} {render(self.return_value)};'


@dataclass
class ExpressionStatement(Node):
    expression: Optional[Node]

    def __str__(self) -> str:
        return render(self.expression)
