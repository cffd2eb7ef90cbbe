"""Validating reader for esxml trees.

Turns a loosely shaped esxml value into the ``Node`` sum type before any
output is produced, so rendering never sees a malformed tree.

    [S.p, None, "Text ", [S.strong, None, "bold"]]
    -> ElementNode(tag="p", children=[TextNode(...), ElementNode(...)])
"""

import logging
from typing import Any, List, Tuple

from esxml_py.errors import InvalidNodeError, format_path
from esxml_py.nodes import (
    Node,
    TextNode,
    RawTextNode,
    CommentNode,
    ElementNode,
)
from esxml_py.symbols import Symbol, RAW_STRING, COMMENT

logger = logging.getLogger(__name__)

Path = Tuple[int, ...]


def is_sequence(value: Any) -> bool:
    """True for the sequence types esxml accepts as nodes."""
    return isinstance(value, (list, tuple))


def parse_esxml(value: Any) -> Node:
    """Validate an esxml value and convert it to a node tree.

    Args:
        value: A string, or a list/tuple node of the form
            ``[tag, attrs, *children]``, ``[RAW_STRING, text]`` or
            ``[COMMENT, None, text]``

    Returns:
        The root node of the validated tree

    Raises:
        InvalidNodeError: If any part of the tree is malformed
    """
    return _parse_node(value, ())


def _fail(reason: str, node: Any, path: Path) -> InvalidNodeError:
    logger.debug(f"Rejected esxml node at {format_path(path)}: {reason}")
    return InvalidNodeError(reason, node, path)


def _parse_node(value: Any, path: Path) -> Node:
    if isinstance(value, str):
        return TextNode(text=value)

    if not is_sequence(value):
        raise _fail("expected a string or a list", value, path)

    if len(value) < 2:
        raise _fail("node must have at least a tag and an attribute slot", value, path)

    head = value[0]

    if head == RAW_STRING:
        if not isinstance(value[1], str):
            raise _fail("raw-string payload must be a string", value, path)
        return RawTextNode(text=value[1])

    if head == COMMENT:
        if len(value) < 3 or not isinstance(value[2], str):
            raise _fail("comment payload must be a string in the third slot", value, path)
        return CommentNode(text=value[2])

    if not isinstance(head, Symbol):
        raise _fail("element tag must be a symbol", value, path)

    attributes = _parse_attributes(value[1], path + (1,))
    children = [
        _parse_node(child, path + (index,))
        for index, child in enumerate(value[2:], start=2)
    ]
    return ElementNode(tag=head.name, attributes=attributes, children=children)


def _parse_attributes(attrs: Any, path: Path) -> List[Tuple[str, str]]:
    return [(name.name, value) for name, value in read_attributes(attrs, path)]


def read_attributes(attrs: Any, path: Path = ()) -> List[Tuple[Symbol, str]]:
    """Validate an attribute slot into ordered ``(name, value)`` pairs.

    Accepts ``None``, an empty sequence, a dict keyed by symbols, or a
    sequence of ``(symbol, string)`` pairs. Duplicates are kept in order.

    Raises:
        InvalidNodeError: If the slot or any entry has the wrong shape
    """
    if attrs is None:
        return []

    if isinstance(attrs, dict):
        pairs = list(attrs.items())
    elif is_sequence(attrs):
        pairs = []
        for entry in attrs:
            if not is_sequence(entry) or len(entry) != 2:
                raise _fail("attribute entry must be a (name, value) pair", entry, path)
            pairs.append((entry[0], entry[1]))
    else:
        raise _fail("attributes must be None, a mapping or a list of pairs", attrs, path)

    result = []
    for name, attr_value in pairs:
        if not isinstance(name, Symbol):
            raise _fail("attribute name must be a symbol", name, path)
        if not isinstance(attr_value, str):
            raise _fail(f"value of attribute '{name}' must be a string", attr_value, path)
        result.append((name, attr_value))
    return result


__all__ = ["parse_esxml", "read_attributes", "is_sequence"]
