"""
esxml-py

Renders esxml, markup written as nested lists of symbols and strings,
to XML/HTML text.
"""

# Symbols
from .symbols import (
    Symbol,
    sym,
    S,
    RAW_STRING,
    COMMENT,
)

# Errors
from .errors import (
    EsxmlError,
    InvalidNodeError,
)

# Nodes - validated form of an esxml tree
from .nodes import (
    Node,
    NodeBase,
    TextNode,
    RawTextNode,
    CommentNode,
    ElementNode,
)

# Reading and rendering
from .reader import parse_esxml
from .serialize import serialize_to_xml, to_markup

# Tree accessors
from .tree import (
    node_tag,
    node_attributes,
    node_attribute,
    node_children,
)

# Other notations
from .sxml import sxml_to_esxml, sxml_to_xml
from .json_input import from_json, sxml_from_json

__all__ = [
    # Symbols
    'Symbol',
    'sym',
    'S',
    'RAW_STRING',
    'COMMENT',
    # Errors
    'EsxmlError',
    'InvalidNodeError',
    # Nodes
    'Node',
    'NodeBase',
    'TextNode',
    'RawTextNode',
    'CommentNode',
    'ElementNode',
    # Reading and rendering
    'parse_esxml',
    'serialize_to_xml',
    'to_markup',
    # Tree accessors
    'node_tag',
    'node_attributes',
    'node_attribute',
    'node_children',
    # Other notations
    'sxml_to_esxml',
    'sxml_to_xml',
    'from_json',
    'sxml_from_json',
]

__version__ = '1.0.0'
