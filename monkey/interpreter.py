"""Tree-walking evaluator for the Monkey language.

`Interpreter.evaluate(node, env)` walks an AST node against an
`Environment` and returns a runtime `Object`. Evaluation never raises:
every failure is an `Error` value returned through the same channel as
ordinary results, and the first error met while evaluating a sequence
(program, block, array elements, call arguments) becomes the result of
that sequence.

`return` is modelled as a `ReturnValue` wrapper. Blocks pass it through
untouched so that it escapes arbitrarily nested `if` bodies, and it is
unwrapped exactly once, by the function call (or the program) that
encloses it.
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .ast import (
    Node, Program, LetStatement, ReturnStatement, ExpressionStatement,
    BlockStatement, Identifier, IntegerLiteral, StringLiteral, BooleanLiteral,
    ArrayLiteral, HashLiteral, PrefixExpression, InfixExpression,
    IndexExpression, IfExpression, FunctionLiteral, CallExpression,
)
from .environment import Environment
from .errors import MonkeySyntaxError
from .parser import parse_program
from .std import BUILTINS
from .types import (
    Object, Integer, String, Array, Hash, HashPair, Hashable,
    Function, Builtin, ReturnValue, Error, NULL, TRUE, FALSE,
    INTEGER_OBJ, STRING_OBJ, ARRAY_OBJ, HASH_OBJ,
    native_bool_to_boolean, is_truthy, is_abrupt,
)


class Interpreter:
    """Core interpreter that evaluates Monkey ASTs."""
    def __init__(self, debug_level: int = 0, debug_file: Optional[str] = 'debug.txt'):
        self.global_env = Environment()
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp: Optional[TextIO] = None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_file is None:
                print(msg, file=sys.stderr)
                return
            if self.debug_fp is None:
                self.debug_fp = open(self.debug_file, 'w', encoding='utf-8')
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def run(self, program: Program, env: Optional[Environment] = None) -> Object:
        if env is None:
            env = self.global_env
        result = self.evaluate(program, env)
        if self.debug_level >= 1:
            self.debug(f"program result: {result.type()} {result.inspect()}")
        return result

    def evaluate(self, node: Optional[Node], env: Environment) -> Object:
        """Evaluate `node` in `env`; host stack exhaustion becomes an Error value."""
        try:
            return self.eval_node(node, env)
        except RecursionError:
            return self.new_error('maximum recursion depth exceeded')

    def new_error(self, message: str) -> Error:
        if self.debug_level >= 3:
            self.debug(f"error: {message}")
        return Error(message)

    def eval_node(self, node: Optional[Node], env: Environment) -> Object:
        # Statements
        if isinstance(node, Program):
            return self.eval_program(node, env)
        if isinstance(node, ExpressionStatement):
            return self.eval_node(node.expression, env)
        if isinstance(node, BlockStatement):
            return self.eval_block_statement(node, env)
        if isinstance(node, ReturnStatement):
            value = self.eval_node(node.return_value, env)
            if is_abrupt(value):
                return value
            return ReturnValue(value)
        if isinstance(node, LetStatement):
            value = self.eval_node(node.value, env)
            if is_abrupt(value):
                return value
            if self.debug_level >= 2:
                self.debug(f"let {node.name.value} = {value.inspect()}")
            return env.set(node.name.value, value)
        # Literals
        if isinstance(node, IntegerLiteral):
            return Integer(node.value)
        if isinstance(node, StringLiteral):
            return String(node.value)
        if isinstance(node, BooleanLiteral):
            return native_bool_to_boolean(node.value)
        if isinstance(node, ArrayLiteral):
            elements = self.eval_expressions(node.elements, env)
            if not isinstance(elements, list):
                return elements
            return Array(elements)
        if isinstance(node, HashLiteral):
            return self.eval_hash_literal(node, env)
        # Expressions
        if isinstance(node, Identifier):
            return self.eval_identifier(node, env)
        if isinstance(node, PrefixExpression):
            right = self.eval_node(node.right, env)
            if is_abrupt(right):
                return right
            return self.eval_prefix_expression(node.operator, right)
        if isinstance(node, InfixExpression):
            left = self.eval_node(node.left, env)
            if is_abrupt(left):
                return left
            right = self.eval_node(node.right, env)
            if is_abrupt(right):
                return right
            return self.eval_infix_expression(node.operator, left, right)
        if isinstance(node, IfExpression):
            return self.eval_if_expression(node, env)
        if isinstance(node, FunctionLiteral):
            return Function(node.parameters, node.body, env)
        if isinstance(node, CallExpression):
            function = self.eval_node(node.function, env)
            if is_abrupt(function):
                return function
            args = self.eval_expressions(node.arguments, env)
            if not isinstance(args, list):
                return args
            return self.apply_function(function, args)
        if isinstance(node, IndexExpression):
            left = self.eval_node(node.left, env)
            if is_abrupt(left):
                return left
            index = self.eval_node(node.index, env)
            if is_abrupt(index):
                return index
            return self.eval_index_expression(left, index)
        if node is None:
            # placeholder left behind by a failed parse
            return NULL
        return self.new_error(f"unknown node: {type(node).__name__}")

    def eval_program(self, program: Program, env: Environment) -> Object:
        result: Object = NULL
        for stmt in program.statements:
            result = self.eval_node(stmt, env)
            if isinstance(result, ReturnValue):
                return result.value
            if isinstance(result, Error):
                return result
        return result

    def eval_block_statement(self, block: BlockStatement, env: Environment) -> Object:
        result: Object = NULL
        for stmt in block.statements:
            result = self.eval_node(stmt, env)
            # leave ReturnValue wrapped; the enclosing call unwraps it
            if isinstance(result, (ReturnValue, Error)):
                return result
        return result

    def eval_expressions(self, exprs: List[Optional[Node]], env: Environment):
        """Evaluate left to right; returns the first Error or ReturnValue instead of a list."""
        result: List[Object] = []
        for expr in exprs:
            evaluated = self.eval_node(expr, env)
            if is_abrupt(evaluated):
                return evaluated
            result.append(evaluated)
        return result

    def eval_identifier(self, node: Identifier, env: Environment) -> Object:
        value = env.get(node.value)
        if value is not None:
            return value
        builtin = BUILTINS.get(node.value)
        if builtin is not None:
            return builtin
        return self.new_error(f"identifier not found: {node.value}")

    def eval_prefix_expression(self, operator: str, right: Object) -> Object:
        if operator == '!':
            return self.eval_bang_operator_expression(right)
        if operator == '-':
            return self.eval_minus_prefix_operator_expression(right)
        return self.new_error(f"unknown operator: {operator}{right.type()}")

    def eval_bang_operator_expression(self, right: Object) -> Object:
        if right is TRUE:
            return FALSE
        if right is FALSE:
            return TRUE
        if right is NULL:
            return TRUE
        return FALSE

    def eval_minus_prefix_operator_expression(self, right: Object) -> Object:
        if not isinstance(right, Integer):
            return self.new_error(f"unknown operator: -{right.type()}")
        return Integer(-right.value)

    def eval_infix_expression(self, operator: str, left: Object, right: Object) -> Object:
        if left.type() != right.type():
            return self.new_error(f"type mismatch: {left.type()} {operator} {right.type()}")
        if left.type() == INTEGER_OBJ:
            return self.eval_integer_infix_expression(operator, left, right)
        if left.type() == STRING_OBJ:
            return self.eval_string_infix_expression(operator, left, right)
        # Booleans and null are singletons, so identity is equality
        if operator == '==':
            return native_bool_to_boolean(left is right)
        if operator == '!=':
            return native_bool_to_boolean(left is not right)
        return self.new_error(f"unknown operator: {left.type()} {operator} {right.type()}")

    def eval_integer_infix_expression(self, operator: str, left: Integer, right: Integer) -> Object:
        a = left.value
        b = right.value
        if operator == '+':
            return Integer(a + b)
        if operator == '-':
            return Integer(a - b)
        if operator == '*':
            return Integer(a * b)
        if operator == '/':
            if b == 0:
                return self.new_error("division by zero")
            # integer division truncating toward zero
            quotient = abs(a) // abs(b)
            return Integer(quotient if (a < 0) == (b < 0) else -quotient)
        if operator == '<':
            return native_bool_to_boolean(a < b)
        if operator == '>':
            return native_bool_to_boolean(a > b)
        if operator == '==':
            return native_bool_to_boolean(a == b)
        if operator == '!=':
            return native_bool_to_boolean(a != b)
        return self.new_error(f"unknown operator: {left.type()} {operator} {right.type()}")

    def eval_string_infix_expression(self, operator: str, left: String, right: String) -> Object:
        if operator != '+':
            return self.new_error(f"unknown operator: {left.type()} {operator} {right.type()}")
        return String(left.value + right.value)

    def eval_if_expression(self, node: IfExpression, env: Environment) -> Object:
        condition = self.eval_node(node.condition, env)
        if is_abrupt(condition):
            return condition
        truthy = is_truthy(condition)
        if self.debug_level >= 3:
            self.debug(f"if condition {condition.inspect()} -> {truthy}")
        if truthy:
            return self.eval_node(node.consequence, env)
        if node.alternative is not None:
            return self.eval_node(node.alternative, env)
        return NULL

    def eval_hash_literal(self, node: HashLiteral, env: Environment) -> Object:
        pairs = {}
        for key_node, value_node in node.pairs:
            key = self.eval_node(key_node, env)
            if is_abrupt(key):
                return key
            if not isinstance(key, Hashable):
                return self.new_error(f"unusable as hash key: {key.type()}")
            value = self.eval_node(value_node, env)
            if is_abrupt(value):
                return value
            pairs[key.hash_key()] = HashPair(key, value)
        return Hash(pairs)

    def eval_index_expression(self, left: Object, index: Object) -> Object:
        if left.type() == ARRAY_OBJ and index.type() == INTEGER_OBJ:
            elements = left.elements
            i = index.value
            if i < 0 or i >= len(elements):
                return NULL
            return elements[i]
        if left.type() == HASH_OBJ:
            if not isinstance(index, Hashable):
                return self.new_error(f"unusable as hash key: {index.type()}")
            pair = left.pairs.get(index.hash_key())
            if pair is None:
                return NULL
            return pair.value
        return self.new_error(f"index operator not supported: {left.type()}")

    def apply_function(self, function: Object, args: List[Object]) -> Object:
        if isinstance(function, Builtin):
            if self.debug_level >= 2:
                self.debug(f"call builtin {function.name} with {len(args)} argument(s)")
            return function.fn(args)
        if isinstance(function, Function):
            if self.debug_level >= 2:
                self.debug(f"call {function.inspect()} with {len(args)} argument(s)")
            call_env = self.extend_function_env(function, args)
            evaluated = self.eval_node(function.body, call_env)
            if isinstance(evaluated, ReturnValue):
                return evaluated.value
            return evaluated
        return self.new_error(f"not a function: {function.type()}")

    def extend_function_env(self, function: Function, args: List[Object]) -> Environment:
        # The new frame hangs off the defining environment, not the caller's.
        env = Environment.enclosed(function.env)
        for i, param in enumerate(function.parameters):
            # surplus arguments are ignored, missing ones are null
            env.set(param.value, args[i] if i < len(args) else NULL)
        return env


def evaluate(node: Optional[Node], env: Environment) -> Object:
    """Evaluate an AST node against `env` with a default interpreter."""
    return Interpreter().evaluate(node, env)


def run_program(source: str, env: Optional[Environment] = None, debug_level: int = 0) -> Object:
    """Convenience function to parse and evaluate a Monkey program from source.

    Raises MonkeySyntaxError when the source does not parse; runtime
    failures come back as Error values.
    """
    program, errors = parse_program(source)
    if errors:
        raise MonkeySyntaxError(errors)
    interpreter = Interpreter(debug_level=debug_level)
    try:
        return interpreter.run(program, env)
    finally:
        interpreter.close()
