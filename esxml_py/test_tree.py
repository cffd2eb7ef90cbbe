"""Tests for esxml tree accessors."""

import pytest

from .errors import InvalidNodeError
from .symbols import S, RAW_STRING, COMMENT
from .tree import node_tag, node_attributes, node_attribute, node_children


LINK = [S.a, [(S.href, "/"), (S.class_, "nav"), (S.class_, "second")], "Home", [S.b, None]]


class TestAccessors:

    def test_tag(self):
        assert node_tag(LINK) == S.a

    def test_attributes(self):
        assert node_attributes(LINK) == [(S.href, "/"), (S.class_, "nav"), (S.class_, "second")]

    def test_attributes_from_dict(self):
        assert node_attributes([S.p, {S.id: "x"}]) == [(S.id, "x")]

    def test_attributes_nil(self):
        assert node_attributes([S.br, None]) == []

    def test_attribute_lookup(self):
        assert node_attribute(S.href, LINK) == "/"
        assert node_attribute("class", LINK) == "nav"
        assert node_attribute(S.title, LINK) is None

    def test_children(self):
        assert node_children(LINK) == ["Home", [S.b, None]]
        assert node_children([S.br, None]) == []


class TestAccessorErrors:

    @pytest.mark.parametrize("value", [
        "text",
        None,
        [S.div],
        ["div", None],
        [RAW_STRING, "<b>"],
        [COMMENT, None, "c"],
    ])
    def test_non_elements_rejected(self, value):
        with pytest.raises(InvalidNodeError):
            node_tag(value)

    def test_bad_attribute_slot(self):
        with pytest.raises(InvalidNodeError):
            node_attributes([S.div, "oops"])

    def test_bare_symbol_attribute_entry(self):
        with pytest.raises(InvalidNodeError) as excinfo:
            node_attributes([S.p, [S.a]])
        assert excinfo.value.path == (1,)

    def test_three_item_attribute_entry(self):
        with pytest.raises(InvalidNodeError) as excinfo:
            node_attribute(S.a, [S.p, [(S.a, "1", "x")]])
        assert excinfo.value.path == (1,)

    def test_non_string_attribute_value(self):
        with pytest.raises(InvalidNodeError):
            node_attribute(S.width, [S.img, {S.width: 10}])
