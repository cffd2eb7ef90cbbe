"""Build esxml and SXML trees from JSON documents.

JSON has no symbols, so the head string of every array is read as the tag
(or as the ``raw-string`` / ``comment`` marker) and object keys in the
attribute slot are read as attribute names:

    ["img", {"src": "foo.png"}]  ->  [S.img, {S.src: "foo.png"}]
"""

from typing import Any

from esxml_py.symbols import Symbol, RAW_STRING, COMMENT

_MARKERS = {
    RAW_STRING.name: RAW_STRING,
    COMMENT.name: COMMENT,
}


def from_json(data: Any) -> Any:
    """Convert a JSON-decoded value into esxml.

    Values that do not have the expected shape are returned unchanged so
    that rendering reports them as invalid nodes.
    """
    if not _has_tag(data):
        return data

    head = data[0]
    if head in _MARKERS:
        return [_MARKERS[head], *data[1:]]

    result = [Symbol(head)]
    if len(data) > 1:
        result.append(_attributes_from_json(data[1]))
    result.extend(from_json(child) for child in data[2:])
    return result


def sxml_from_json(data: Any) -> Any:
    """Convert a JSON-decoded SXML value, reading every array head as a symbol.

    ``["a", ["@", ["href", "/"]], "Home"]`` keeps its shape with ``a``, ``@``
    and ``href`` turned into symbols.
    """
    if not _has_tag(data):
        return data
    return [Symbol(data[0]), *[sxml_from_json(child) for child in data[1:]]]


def _has_tag(data: Any) -> bool:
    return isinstance(data, list) and len(data) > 0 and isinstance(data[0], str) and data[0] != ""


def _attributes_from_json(attrs: Any) -> Any:
    if not isinstance(attrs, dict):
        return attrs
    # Empty names stay strings and are rejected when the tree is read
    return {(Symbol(name) if name else name): value for name, value in attrs.items()}


__all__ = ["from_json", "sxml_from_json"]
