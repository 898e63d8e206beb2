from typing import List


class MonkeyError(Exception):
    """Base exception for host-side Monkey failures.

    Runtime errors inside a program are `Error` values, not exceptions;
    these are raised only by the convenience helpers around the core.
    """


class MonkeySyntaxError(MonkeyError):
    """Raised when source text cannot be parsed; carries every parser error."""
    def __init__(self, errors: List[str]):
        super().__init__('parser errors: ' + '; '.join(errors))
        self.errors = list(errors)
