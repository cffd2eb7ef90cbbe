"""Element node implementation."""

from typing import List, Literal, Tuple
from pydantic import Field

from .base import NodeBase


class ElementNode(NodeBase):
    """A markup element.

    Attributes are kept as an ordered list of ``(name, value)`` pairs rather
    than a dict so insertion order and duplicate names survive untouched.
    """

    kind: Literal["element"] = "element"
    tag: str = Field(..., min_length=1, description="Tag name")
    attributes: List[Tuple[str, str]] = Field(default_factory=list)
    children: List["Node"] = Field(default_factory=list)


__all__ = ["ElementNode"]
