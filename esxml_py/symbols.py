"""Symbol atoms for esxml trees.

Tags and attribute names are symbols rather than strings, so that a string
in tag position can be rejected and the ``raw-string`` / ``comment`` markers
can be told apart from text.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Symbol:
    """An interned-by-value atom. Two symbols are equal when their names are."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise ValueError(f"Symbol name must be a string, got {type(self.name).__name__}")
        if not self.name:
            raise ValueError("Symbol name cannot be empty")

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"


def sym(name: str) -> Symbol:
    """Build a symbol from its name."""
    return Symbol(name)


class _SymbolNamespace:
    """Attribute access shorthand: ``S.div``, ``S.data_id``, ``S.class_``.

    Underscores become hyphens and a single trailing underscore is dropped,
    so Python keywords stay reachable. Item access keeps the name verbatim.
    """

    def __getattr__(self, name: str) -> Symbol:
        if name.startswith("__"):
            raise AttributeError(name)
        if name.endswith("_"):
            name = name[:-1]
        return Symbol(name.replace("_", "-"))

    def __getitem__(self, name: str) -> Symbol:
        return Symbol(name)


S = _SymbolNamespace()

RAW_STRING = Symbol("raw-string")
COMMENT = Symbol("comment")


__all__ = ["Symbol", "sym", "S", "RAW_STRING", "COMMENT"]
