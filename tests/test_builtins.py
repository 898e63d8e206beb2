import pytest

from monkey.environment import Environment
from monkey.interpreter import evaluate
from monkey.parser import parse_program
from monkey.std import BUILTINS
from monkey.types import Error, NULL, Array, Integer


def run(source):
    program, errors = parse_program(source)
    assert errors == []
    return evaluate(program, Environment())


@pytest.mark.parametrize('source, expected', [
    ('len("")', 0),
    ('len("four")', 4),
    ('len("hello world")', 11),
    ('len([1, 2, 3])', 3),
    ('len([])', 0),
    ('first([1, 2, 3])', 1),
    ('last([1, 2, 3])', 3),
])
def test_builtin_values(source, expected):
    assert run(source).value == expected


@pytest.mark.parametrize('source, message', [
    ('len(1)', 'argument to `len` not supported, got INTEGER'),
    ('len("one", "two")', 'wrong number of arguments. got=2, want=1'),
    ('len()', 'wrong number of arguments. got=0, want=1'),
    ('first(1)', 'argument to `first` must be ARRAY, got INTEGER'),
    ('last("abc")', 'argument to `last` must be ARRAY, got STRING'),
    ('rest({})', 'argument to `rest` must be ARRAY, got HASH'),
    ('push(1, 1)', 'argument to `push` must be ARRAY, got INTEGER'),
    ('push([])', 'wrong number of arguments. got=1, want=2'),
])
def test_builtin_errors(source, message):
    result = run(source)
    assert isinstance(result, Error)
    assert result.message == message


@pytest.mark.parametrize('source', ['first([])', 'last([])', 'rest([])'])
def test_empty_array_builtins_return_null(source):
    assert run(source) is NULL


def test_rest_returns_new_array():
    result = run('let a = [1, 2, 3]; let b = rest(a); [a, b]')
    assert result.inspect() == '[[1, 2, 3], [2, 3]]'


def test_push_does_not_modify_original():
    result = run('let a = [1]; let b = push(a, 2); [a, b]')
    assert result.inspect() == '[[1], [1, 2]]'


def test_puts_writes_inspect_lines(capsys):
    result = run('puts("hello", 1, [true], {"k": "v"})')
    assert result is NULL
    assert capsys.readouterr().out == 'hello\n1\n[true]\n{k: v}\n'


def test_builtins_are_first_class_values():
    assert run('let l = len; l("abc")').value == 3
    assert run('len').inspect() == 'builtin function'


def test_builtin_table_calls_directly():
    assert BUILTINS['len'].fn([Array([Integer(1)])]).value == 1
    assert sorted(BUILTINS) == ['first', 'last', 'len', 'push', 'puts', 'rest']
