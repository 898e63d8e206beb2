"""Runtime value types for the Monkey interpreter.

Every value produced by evaluation is an `Object`. Each variant reports
its type tag through `type()` and renders itself for display through
`inspect()`. Booleans and null are process-wide singletons (`TRUE`,
`FALSE`, `NULL`), so they can be compared by identity.

Only Integer, Boolean and String values can be used as hash keys. Their
`hash_key()` is computed on first use and cached on the instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, TYPE_CHECKING

if TYPE_CHECKING:
    from .ast import BlockStatement, Identifier
    from .environment import Environment

INTEGER_OBJ = 'INTEGER'
BOOLEAN_OBJ = 'BOOLEAN'
NULL_OBJ = 'NULL'
STRING_OBJ = 'STRING'
RETURN_VALUE_OBJ = 'RETURN_VALUE'
ERROR_OBJ = 'ERROR'
FUNCTION_OBJ = 'FUNCTION'
BUILTIN_OBJ = 'BUILTIN'
ARRAY_OBJ = 'ARRAY'
HASH_OBJ = 'HASH'

# str(int) refuses values longer than sys.get_int_max_str_digits()
DIGIT_CHUNK = 1000
DIGIT_CHUNK_BASE = 10 ** DIGIT_CHUNK


class Object:
    """Base class for all runtime values."""
    type_tag = ''

    def type(self) -> str:
        return self.type_tag

    def inspect(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class HashKey:
    type: str
    value: Any


class Hashable:
    """Mixin for values usable as hash keys."""

    def hash_key(self) -> HashKey:
        key = self.__dict__.get('_hash_key')
        if key is None:
            key = HashKey(self.type(), self.value)
            self.__dict__['_hash_key'] = key
        return key


@dataclass(eq=False)
class Integer(Hashable, Object):
    value: int
    type_tag = INTEGER_OBJ

    def inspect(self) -> str:
        return format_integer(self.value)


@dataclass(eq=False)
class String(Hashable, Object):
    value: str
    type_tag = STRING_OBJ

    def inspect(self) -> str:
        return self.value


class Boolean(Hashable, Object):
    type_tag = BOOLEAN_OBJ

    def __init__(self, value: bool):
        self.value = value

    def inspect(self) -> str:
        return 'true' if self.value else 'false'

    def __repr__(self) -> str:
        return f'Boolean({self.value})'


class Null(Object):
    type_tag = NULL_OBJ

    def inspect(self) -> str:
        return 'null'

    def __repr__(self) -> str:
        return 'NULL'


TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()


@dataclass(eq=False)
class ReturnValue(Object):
    """Wraps the value of a `return` until the enclosing call unwraps it."""
    value: Object
    type_tag = RETURN_VALUE_OBJ

    def inspect(self) -> str:
        return self.value.inspect()


@dataclass(eq=False)
class Error(Object):
    message: str
    type_tag = ERROR_OBJ

    def inspect(self) -> str:
        return 'ERROR: ' + self.message


@dataclass(eq=False)
class Array(Object):
    elements: List[Object] = field(default_factory=list)
    type_tag = ARRAY_OBJ

    def inspect(self) -> str:
        return '[' + ', '.join(e.inspect() for e in self.elements) + ']'


@dataclass(eq=False)
class HashPair:
    key: Object
    value: Object


@dataclass(eq=False)
class Hash(Object):
    pairs: Dict[HashKey, HashPair] = field(default_factory=dict)
    type_tag = HASH_OBJ

    def inspect(self) -> str:
        items = ', '.join(f'{p.key.inspect()}: {p.value.inspect()}' for p in self.pairs.values())
        return '{' + items + '}'


@dataclass(eq=False)
class Function(Object):
    """A closure: parameters and body plus the environment it was defined in."""
    parameters: List['Identifier']
    body: 'BlockStatement'
    env: 'Environment'
    type_tag = FUNCTION_OBJ

    def inspect(self) -> str:
        params = ', '.join(str(p) for p in self.parameters)
        return f'fn({params}) {self.body}'

    def __repr__(self) -> str:
        return f'<function fn({", ".join(str(p) for p in self.parameters)})>'


@dataclass(eq=False)
class Builtin(Object):
    name: str
    fn: Callable[[List[Object]], Object]
    type_tag = BUILTIN_OBJ

    def inspect(self) -> str:
        return 'builtin function'

    def __repr__(self) -> str:
        return f'<builtin {self.name}>'


def native_bool_to_boolean(value: bool) -> Boolean:
    return TRUE if value else FALSE


def is_truthy(obj: Object) -> bool:
    # NULL and false are falsy; everything else, including 0 and "", is truthy
    if obj is NULL or obj is FALSE:
        return False
    return True


def is_error(obj: Object) -> bool:
    return isinstance(obj, Error)


def is_abrupt(obj: Object) -> bool:
    """True for values that stop the enclosing evaluation: errors and returns."""
    return is_error(obj) or isinstance(obj, ReturnValue)


def format_integer(value: int) -> str:
    """Decimal text of `value`, with no limit on the number of digits."""
    if value < 0:
        return '-' + format_integer(-value)
    if value < DIGIT_CHUNK_BASE:
        return str(value)
    chunks = []
    while value >= DIGIT_CHUNK_BASE:
        value, low = divmod(value, DIGIT_CHUNK_BASE)
        chunks.append(str(low).zfill(DIGIT_CHUNK))
    chunks.append(str(value))
    return ''.join(reversed(chunks))
