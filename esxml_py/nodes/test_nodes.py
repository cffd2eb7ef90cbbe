"""Tests for esxml node models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from esxml_py.nodes import (
    Node,
    TextNode,
    RawTextNode,
    CommentNode,
    ElementNode,
)


class TestNodeModels:
    """Node construction and validation."""

    def test_kinds(self):
        assert TextNode(text="a").kind == "text"
        assert RawTextNode(text="a").kind == "raw"
        assert CommentNode(text="a").kind == "comment"
        assert ElementNode(tag="p").kind == "element"

    def test_element_defaults(self):
        node = ElementNode(tag="br")
        assert node.attributes == []
        assert node.children == []

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            TextNode(text="a", key="k")

    def test_empty_tag_rejected(self):
        with pytest.raises(ValidationError):
            ElementNode(tag="")

    def test_nodes_are_frozen(self):
        node = TextNode(text="a")
        with pytest.raises(ValidationError):
            node.text = "b"

    def test_children_accept_node_instances(self):
        child = ElementNode(tag="b", children=[TextNode(text="x")])
        node = ElementNode(tag="p", children=[child, CommentNode(text="c")])
        assert node.children[0].children[0].text == "x"
        assert isinstance(node.children[1], CommentNode)


class TestNodeUnion:
    """The Node union dispatches on kind."""

    def test_validate_from_dict(self):
        adapter = TypeAdapter(Node)
        node = adapter.validate_python({
            "kind": "element",
            "tag": "p",
            "attributes": [["id", "x"]],
            "children": [{"kind": "text", "text": "hi"}, {"kind": "raw", "text": "<br>"}],
        })
        assert isinstance(node, ElementNode)
        assert node.attributes == [("id", "x")]
        assert isinstance(node.children[0], TextNode)
        assert isinstance(node.children[1], RawTextNode)

    def test_dump_round_trip(self):
        node = ElementNode(tag="p", attributes=[("a", "1")], children=[TextNode(text="t")])
        adapter = TypeAdapter(Node)
        assert adapter.validate_python(node.model_dump()) == node

    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            TypeAdapter(Node).validate_python({"kind": "pi", "text": "x"})
