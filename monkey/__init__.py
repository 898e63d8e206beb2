# Monkey language package
# This package provides a lexer, Pratt parser and tree-walking interpreter for Monkey.
from .environment import Environment
from .errors import MonkeyError, MonkeySyntaxError
from .interpreter import Interpreter, evaluate, run_program
from .parser import parse_program

__all__ = [
    'Environment',
    'Interpreter',
    'MonkeyError',
    'MonkeySyntaxError',
    'evaluate',
    'parse_program',
    'run_program',
]
