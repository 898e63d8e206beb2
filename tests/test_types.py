from monkey.types import (
    Integer, String, Boolean, Array, Hash, HashPair, HashKey, Error, Builtin,
    ReturnValue, TRUE, FALSE, NULL, native_bool_to_boolean, is_truthy,
)
from monkey.interpreter import run_program


def test_string_hash_keys_compare_by_value():
    hello1 = String('Hello World')
    hello2 = String('Hello World')
    diff = String('My name is johnny')
    assert hello1.hash_key() == hello2.hash_key()
    assert hello1.hash_key() != diff.hash_key()


def test_hash_keys_include_type_tag():
    assert Integer(1).hash_key() != TRUE.hash_key()
    assert Integer(1).hash_key() == HashKey('INTEGER', 1)
    assert String('1').hash_key() != Integer(1).hash_key()


def test_hash_key_is_cached_per_instance():
    s = String('abc')
    assert s.hash_key() is s.hash_key()


def test_boolean_singletons():
    assert native_bool_to_boolean(True) is TRUE
    assert native_bool_to_boolean(False) is FALSE


def test_truthiness():
    assert is_truthy(TRUE)
    assert is_truthy(Integer(0))
    assert is_truthy(String(''))
    assert not is_truthy(FALSE)
    assert not is_truthy(NULL)


def test_inspect_renderings():
    assert Integer(-3).inspect() == '-3'
    assert String('raw text').inspect() == 'raw text'
    assert TRUE.inspect() == 'true'
    assert Boolean(False).inspect() == 'false'
    assert NULL.inspect() == 'null'
    assert Error('boom').inspect() == 'ERROR: boom'
    assert ReturnValue(Integer(1)).inspect() == '1'
    assert Array([Integer(1), String('a')]).inspect() == '[1, a]'
    key = String('one')
    assert Hash({key.hash_key(): HashPair(key, Integer(1))}).inspect() == '{one: 1}'
    assert Builtin('len', lambda args: NULL).inspect() == 'builtin function'


def test_function_inspect():
    fn = run_program('fn(x, y) { x + y }')
    assert fn.type() == 'FUNCTION'
    assert fn.inspect() == 'fn(x, y) { (x + y) }'


def test_type_tags():
    assert [o.type() for o in (Integer(1), String(''), TRUE, NULL, Array(), Hash(), Error('e'))] == [
        'INTEGER', 'STRING', 'BOOLEAN', 'NULL', 'ARRAY', 'HASH', 'ERROR',
    ]


def test_inspect_integers_of_any_length():
    assert Integer(10 ** 5000).inspect() == '1' + '0' * 5000
    assert Integer(-(10 ** 5000) - 7).inspect() == '-1' + '0' * 4999 + '7'
    assert Integer(123).inspect() == '123'
