from pathlib import Path

from monkey.interpreter import run_program
from monkey.types import Error

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def run_example(name):
    source = (EXAMPLES / name).read_text(encoding='utf-8')
    return run_program(source)


def test_closures_program(capsys):
    run_example('closures.monkey')
    out = capsys.readouterr().out.strip()
    assert out == '5\n13'


def test_fibonacci_program(capsys):
    run_example('fibonacci.monkey')
    out = capsys.readouterr().out.strip()
    assert out == '610'


def test_map_reduce_program(capsys):
    run_example('map_reduce.monkey')
    out = capsys.readouterr().out.strip()
    assert out == '[2, 4, 6, 8]\n15'


def test_people_program(capsys):
    run_example('people.monkey')
    out = capsys.readouterr().out.strip()
    assert out == 'Alice\nAnna\n2\ntrue\nnull'


def test_grading_program(capsys):
    run_example('grading.monkey')
    out = capsys.readouterr().out.strip()
    assert out == 'A\nB\nC\nF'


def test_type_error_program_stops_at_error(capsys):
    result = run_example('type_error.monkey')
    out = capsys.readouterr().out.strip()
    assert out == 'before'
    assert isinstance(result, Error)
    assert result.inspect() == 'ERROR: type mismatch: INTEGER + BOOLEAN'
