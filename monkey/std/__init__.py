from .core import BUILTINS, populate_builtins

__all__ = [
    'BUILTINS',
    'populate_builtins',
]
