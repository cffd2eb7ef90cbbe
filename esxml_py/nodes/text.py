"""Text-bearing node implementations."""

from typing import Literal
from pydantic import Field

from .base import NodeBase


class TextNode(NodeBase):
    """Literal text content, entity-escaped on output."""

    kind: Literal["text"] = "text"
    text: str = Field(..., description="The text content of this node")


class RawTextNode(NodeBase):
    """Text emitted verbatim, bypassing entity escaping."""

    kind: Literal["raw"] = "raw"
    text: str = Field(..., description="Markup emitted as-is")


class CommentNode(NodeBase):
    """A markup comment. Content is not escaped."""

    kind: Literal["comment"] = "comment"
    text: str = Field(..., description="Comment body")


__all__ = ["TextNode", "RawTextNode", "CommentNode"]
