from typing import Dict, List

from monkey.types import (
    Object, Builtin, Error, Integer, String, Array, NULL, ARRAY_OBJ,
)


def wrong_arg_count(got: int, want: int) -> Error:
    return Error(f'wrong number of arguments. got={got}, want={want}')


def populate_builtins() -> Dict[str, Builtin]:
    """Build the table of functions available to every Monkey program."""

    def std_len(args: List[Object]) -> Object:
        if len(args) != 1:
            return wrong_arg_count(len(args), 1)
        arg = args[0]
        if isinstance(arg, String):
            return Integer(len(arg.value))
        if isinstance(arg, Array):
            return Integer(len(arg.elements))
        return Error(f'argument to `len` not supported, got {arg.type()}')

    def std_first(args: List[Object]) -> Object:
        if len(args) != 1:
            return wrong_arg_count(len(args), 1)
        arr = args[0]
        if not isinstance(arr, Array):
            return Error(f'argument to `first` must be {ARRAY_OBJ}, got {arr.type()}')
        if arr.elements:
            return arr.elements[0]
        return NULL

    def std_last(args: List[Object]) -> Object:
        if len(args) != 1:
            return wrong_arg_count(len(args), 1)
        arr = args[0]
        if not isinstance(arr, Array):
            return Error(f'argument to `last` must be {ARRAY_OBJ}, got {arr.type()}')
        if arr.elements:
            return arr.elements[-1]
        return NULL

    def std_rest(args: List[Object]) -> Object:
        if len(args) != 1:
            return wrong_arg_count(len(args), 1)
        arr = args[0]
        if not isinstance(arr, Array):
            return Error(f'argument to `rest` must be {ARRAY_OBJ}, got {arr.type()}')
        if arr.elements:
            return Array(list(arr.elements[1:]))
        return NULL

    def std_push(args: List[Object]) -> Object:
        if len(args) != 2:
            return wrong_arg_count(len(args), 2)
        arr = args[0]
        if not isinstance(arr, Array):
            return Error(f'argument to `push` must be {ARRAY_OBJ}, got {arr.type()}')
        return Array(arr.elements + [args[1]])

    def std_puts(args: List[Object]) -> Object:
        for arg in args:
            print(arg.inspect())
        return NULL

    return {
        'len': Builtin('len', std_len),
        'first': Builtin('first', std_first),
        'last': Builtin('last', std_last),
        'rest': Builtin('rest', std_rest),
        'push': Builtin('push', std_push),
        'puts': Builtin('puts', std_puts),
    }


BUILTINS = populate_builtins()
