"""Accessors for esxml element values.

These read the raw list form directly, without converting to nodes.
"""

from typing import Any, List, Optional, Tuple, Union

from esxml_py.errors import InvalidNodeError
from esxml_py.reader import is_sequence, read_attributes
from esxml_py.symbols import Symbol, RAW_STRING, COMMENT


def _check_element(node: Any) -> None:
    if not is_sequence(node) or len(node) < 2:
        raise InvalidNodeError("expected an element list", node)
    head = node[0]
    if not isinstance(head, Symbol) or head in (RAW_STRING, COMMENT):
        raise InvalidNodeError("element tag must be a symbol", node)


def node_tag(node: Any) -> Symbol:
    """Return the tag symbol of an element."""
    _check_element(node)
    return node[0]


def node_attributes(node: Any) -> List[Tuple[Symbol, str]]:
    """Return the attributes of an element as ``(name, value)`` pairs."""
    _check_element(node)
    return read_attributes(node[1], (1,))


def node_attribute(name: Union[Symbol, str], node: Any) -> Optional[str]:
    """Return the value of the first attribute called ``name``, or None."""
    wanted = name if isinstance(name, Symbol) else Symbol(name)
    for attr_name, value in node_attributes(node):
        if attr_name == wanted:
            return value
    return None


def node_children(node: Any) -> List[Any]:
    """Return the child values of an element."""
    _check_element(node)
    return list(node[2:])


__all__ = ["node_tag", "node_attributes", "node_attribute", "node_children"]
