"""esxml node models with discriminated union support."""

from typing import Annotated, Union
from pydantic import Field

from .base import NodeBase
from .text import TextNode, RawTextNode, CommentNode
from .element import ElementNode

Node = Annotated[
    Union[
        TextNode,
        RawTextNode,
        CommentNode,
        ElementNode,
    ],
    Field(discriminator="kind"),
]

# Resolve the forward reference to Node in ElementNode.children
ElementNode.model_rebuild()

__all__ = [
    "NodeBase",
    "Node",
    "TextNode",
    "RawTextNode",
    "CommentNode",
    "ElementNode",
]
