"""Custom error types for esxml-py."""

from typing import Any, Optional, Tuple


class EsxmlError(Exception):
    """Base error for all esxml errors."""
    pass


class InvalidNodeError(EsxmlError):
    """Raised when a value is not a well-formed esxml node.

    The path is the sequence of slot indices leading from the root value to
    the offending node; the root itself has the empty path.
    """

    def __init__(self, reason: str, node: Any = None, path: Optional[Tuple[int, ...]] = None):
        self.reason = reason
        self.node = node
        self.path = tuple(path or ())
        super().__init__(f"Invalid esxml node at {format_path(self.path)}: {reason}: {node!r}")


def format_path(path: Tuple[int, ...]) -> str:
    """Render a slot path as ``root[2][1]``."""
    return "root" + "".join(f"[{index}]" for index in path)


__all__ = ["EsxmlError", "InvalidNodeError", "format_path"]
