"""XML serialization for esxml nodes.

Converts a validated node tree to compact markup:
Elements become tags, attributes keep their order.
Elements without children self-close.
TextNode content and attribute values are entity-escaped.
RawTextNode and CommentNode content is written as-is.
"""

from __future__ import annotations

from typing import Any, List, Tuple

from esxml_py.nodes import (
    Node,
    TextNode,
    RawTextNode,
    CommentNode,
    ElementNode,
)
from esxml_py.reader import parse_esxml


def to_markup(value: Any) -> str:
    """Convert an esxml value straight to markup.

    The whole tree is validated before anything is rendered, so a failure
    never yields partial output.

    Raises:
        InvalidNodeError: If the value is not well-formed esxml
    """
    return serialize_to_xml(parse_esxml(value))


def serialize_to_xml(node: Node) -> str:
    """Convert a node tree to markup.

    Args:
        node: The root node to serialize

    Returns:
        Markup string for the node tree
    """
    if isinstance(node, TextNode):
        return _escape_xml(node.text)

    if isinstance(node, RawTextNode):
        return node.text

    if isinstance(node, CommentNode):
        return f"<!-- {node.text} -->"

    if isinstance(node, ElementNode):
        return _serialize_element(node)

    raise TypeError(f"Cannot serialize {type(node).__name__}")


def _serialize_element(node: ElementNode) -> str:
    attrs = _serialize_attributes(node.attributes)

    # Self-closing tag
    if not node.children:
        return f"<{node.tag}{attrs}/>"

    children_str = "".join(serialize_to_xml(child) for child in node.children)
    return f"<{node.tag}{attrs}>{children_str}</{node.tag}>"


def _serialize_attributes(attributes: List[Tuple[str, str]]) -> str:
    return "".join(f' {name}="{_escape_xml(value)}"' for name, value in attributes)


def _escape_xml(text: str) -> str:
    """Escape XML entities.

    & is replaced first so the ampersands of produced entities are left alone.
    """
    return (text
            .replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace('"', "&quot;")
            .replace("'", "&apos;"))


__all__ = ["to_markup", "serialize_to_xml"]
