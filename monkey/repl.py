"""Handles interactive mode for the Monkey interpreter. Uses cmd as backend."""

import cmd
from typing import List, TextIO

from .environment import Environment
from .interpreter import Interpreter
from .parser import parse_program

MONKEY_FACE = r'''            __,__
   .--.  .-"     "-.  .--.
  / .. \/  .-. .-.  \/ .. \
 | |  '|  /   Y   \  |'  | |
 | \   \  \ 0 | 0 /  /   / |
  \ '- ,\.-"""""""-./, -' /
   ''-' /_   ^ ^   _\ '-''
       |  \._   _./  |
       \   \ '~' /   /
        '._ '-=-' _.'
           '-----'
'''


def print_parser_errors(errors: List[str], out: TextIO) -> None:
    print(MONKEY_FACE, file=out)
    print("Woops! We ran into some monkey business here!", file=out)
    print(" parser errors:", file=out)
    for msg in errors:
        print("\t" + msg, file=out)


class LineErrorHandler:
    """Reports a failure on one REPL line and keeps the session running."""
    def __init__(self, out: TextIO):
        self.out = out

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            return False
        if exc_type is KeyboardInterrupt:
            print("keyboard interrupt", file=self.out)
        elif exc_type is RecursionError:
            print("ERROR: maximum recursion depth exceeded", file=self.out)
        elif issubclass(exc_type, Exception):
            print(f"unknown error: '{exc_type.__name__}: {exc_val}'", file=self.out)
        else:
            return False
        return True


class Shell(cmd.Cmd):
    """Monkey read-eval-print loop.

    One Environment lives for the whole session, so bindings made on one
    line are visible on the next.
    """
    intro = "Hello! This is the Monkey programming language!\nFeel free to type in commands"
    prompt = ">> "

    def __init__(self, interpreter: Interpreter, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter
        self.env = Environment()
        self.error_handler = LineErrorHandler(self.stdout)

    def onecmd(self, line):
        """Sends every line to `default`; cmdloop's EOF marker ends the session."""
        if line == 'EOF':
            return self.do_EOF(line)
        if not line.strip():
            return self.emptyline()
        return self.default(line)

    def default(self, line):
        """Evaluates one line of Monkey source."""
        with self.error_handler:  # cmd.Cmd exits on an uncaught exception
            program, errors = parse_program(line)
            if errors:
                print_parser_errors(errors, self.stdout)
                return
            result = self.interpreter.run(program, self.env)
            print(result.inspect(), file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return True
