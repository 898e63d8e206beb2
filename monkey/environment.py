from __future__ import annotations

from typing import Dict, Optional

from .types import Object


class Environment:
    """Represents a scope environment mapping identifiers to values.

    Scopes are shared by reference: a closure keeps the environment it was
    defined in, and every call frame created from it points back to that
    same object through `outer`.
    """
    def __init__(self, outer: Optional['Environment'] = None):
        self.outer = outer
        self.store: Dict[str, Object] = {}

    @classmethod
    def enclosed(cls, outer: 'Environment') -> 'Environment':
        return cls(outer=outer)

    def get(self, name: str) -> Optional[Object]:
        """Look `name` up in this scope and then in each enclosing one.

        Returns None when no scope in the chain binds the name.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return None

    def set(self, name: str, value: Object) -> Object:
        # Always binds locally; shadows, never rebinds, an outer name.
        self.store[name] = value
        return value

    def __repr__(self) -> str:
        return f'<Environment {sorted(self.store)} outer={self.outer is not None}>'
