"""CLI entry point for the Monkey interpreter.

Usage:
    python -m monkey [-v|-vv|-vvv]                    start the REPL
    python -m monkey [-v...] <program_file>           run a program
    python -m monkey --parse <program_file>           print the parsed program

Options:
  -v            Increase debug verbosity (can be repeated)
  --parse       Parse the given file and print its canonical rendering

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero.
"""

import argparse
import sys
from pathlib import Path

from .interpreter import Interpreter
from .parser import parse_program
from .repl import Shell, print_parser_errors
from .types import Error


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='monkey', description="Monkey language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--parse', action='store_true', help='print the parsed program instead of running it')
    parser.add_argument('program', nargs='?', help='Monkey program file (.monkey) to execute')
    args = parser.parse_args(argv)

    interpreter = Interpreter(debug_level=args.v)

    # Interactive mode
    if not args.program:
        if args.parse:
            parser.error('--parse requires a program file')
        try:
            Shell(interpreter).cmdloop()
        finally:
            interpreter.close()
        return

    program_file = Path(args.program)
    if not program_file.exists():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        sys.exit(1)
    with open(program_file, 'r', encoding='utf-8') as f:
        source = f.read()
    program, errors = parse_program(source)
    if errors:
        print_parser_errors(errors, sys.stderr)
        sys.exit(1)

    if args.parse:
        print(program)
        return

    try:
        result = interpreter.run(program)
    finally:
        interpreter.close()
    if isinstance(result, Error):
        print(result.inspect(), file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
