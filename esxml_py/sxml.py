"""SXML to esxml conversion.

SXML keeps attributes in an optional ``[@, [name, value], ...]`` list right
after the tag, and elements without attributes omit it entirely:

    [S.a, [S["@"], [S.href, "/"], [S.hidden]], "Home"]
    -> [S.a, [(S.href, "/"), (S.hidden, "hidden")], "Home"]
"""

import logging
from typing import Any, Tuple

from esxml_py.errors import InvalidNodeError
from esxml_py.reader import is_sequence
from esxml_py.serialize.xml import to_markup
from esxml_py.symbols import Symbol

logger = logging.getLogger(__name__)

ATTRIBUTE_MARKER = Symbol("@")


def sxml_to_esxml(value: Any) -> Any:
    """Convert an SXML value to esxml.

    Attributes listed without a value take their own name as value, which is
    how boolean attributes such as ``hidden`` are spelled.

    Raises:
        InvalidNodeError: If the value is neither a string nor a tagged list
    """
    return _convert(value, ())


def sxml_to_xml(value: Any) -> str:
    """Render an SXML value as markup."""
    return to_markup(sxml_to_esxml(value))


def _convert(value: Any, path: Tuple[int, ...]) -> Any:
    if isinstance(value, str):
        return value

    if not is_sequence(value) or not value:
        raise InvalidNodeError("expected a string or a tagged list", value, path)

    tag = value[0]
    body_start = 1
    attrs = None

    if len(value) > 1 and _is_attribute_list(value[1]):
        attrs = [_convert_attribute(entry, path + (1,)) for entry in value[1][1:]]
        body_start = 2

    body = [
        _convert(child, path + (index,))
        for index, child in enumerate(value[body_start:], start=body_start)
    ]
    return [tag, attrs, *body]


def _is_attribute_list(value: Any) -> bool:
    return is_sequence(value) and len(value) > 0 and value[0] == ATTRIBUTE_MARKER


def _convert_attribute(entry: Any, path: Tuple[int, ...]) -> Tuple[Any, Any]:
    if not is_sequence(entry) or len(entry) not in (1, 2):
        raise InvalidNodeError("SXML attribute must be [name] or [name, value]", entry, path)

    name = entry[0]
    if len(entry) == 2 and entry[1] is not None:
        return (name, entry[1])

    logger.debug(f"Attribute {name!r} has no value, using its name")
    return (name, str(name))


__all__ = ["sxml_to_esxml", "sxml_to_xml", "ATTRIBUTE_MARKER"]
