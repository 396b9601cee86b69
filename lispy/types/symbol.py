from __future__ import annotations
import sys


class Symbol:
    """A name. Evaluates to whatever the name is bound to."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        # Interned: symbols are compared and used as binding keys constantly
        self.name = sys.intern(name)

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
