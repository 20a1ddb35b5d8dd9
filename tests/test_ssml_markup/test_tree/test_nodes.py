"""Tests for the node tree data model."""

import pytest

from ssml_markup.tree import Attribute, Element, Text, node_from_dict


@pytest.fixture
def speak_tree() -> Element:
    return Element("speak", children=[
        Text("Hello "),
        Element("emphasis", [Attribute("level", "strong")], [Text("big")]),
        Element("p", children=[
            Element("s", children=[Text("one")]),
            Element("s", children=[Text("two")]),
        ]),
    ])


class TestAttribute:
    def test_defaults_to_empty_value(self):
        assert Attribute("checked").value == ""

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError, match="Attribute name cannot be empty"):
            Attribute("")

    def test_is_hashable(self):
        assert {Attribute("a", "1"), Attribute("a", "1")} == {Attribute("a", "1")}


class TestElement:
    """Test Element accessors and navigation."""

    def test_defaults(self):
        element = Element("break")
        assert element.attributes == []
        assert element.children == []

    def test_empty_name_accepted(self):
        """Test construction is permissive about names."""
        assert Element("").name == ""

    def test_structural_equality(self):
        first = Element("a", [Attribute("x", "1")], [Text("t")])
        second = Element("a", [Attribute("x", "1")], [Text("t")])
        assert first == second
        assert first != Element("a", [Attribute("x", "2")], [Text("t")])

    def test_attribute_order_is_significant(self):
        first = Element("a", [Attribute("x", "1"), Attribute("y", "2")])
        second = Element("a", [Attribute("y", "2"), Attribute("x", "1")])
        assert first != second

    def test_get_attribute(self):
        element = Element("say-as", [Attribute("interpret-as", "date")])
        assert element.get_attribute("interpret-as") == "date"
        assert element.get_attribute("format") is None
        assert element.get_attribute("format", "mdy") == "mdy"
        assert element.has_attribute("interpret-as")
        assert not element.has_attribute("format")

    def test_set_attribute_replaces_in_place(self):
        element = Element("a", [Attribute("x", "1"), Attribute("y", "2")])
        element.set_attribute("x", "3")
        assert element.attributes == [Attribute("x", "3"), Attribute("y", "2")]

    def test_set_attribute_appends(self):
        element = Element("a", [Attribute("x", "1")])
        element.set_attribute("z", "9")
        assert element.attributes[-1] == Attribute("z", "9")

    def test_child_elements(self, speak_tree):
        assert [child.name for child in speak_tree.child_elements] == ["emphasis", "p"]

    def test_find(self, speak_tree):
        found = speak_tree.find("s")
        assert found is not None
        assert found.children == [Text("one")]
        assert speak_tree.find("missing") is None

    def test_find_excludes_self(self, speak_tree):
        assert speak_tree.find("speak") is None

    def test_find_all_in_document_order(self, speak_tree):
        assert [s.text_content for s in speak_tree.find_all("s")] == ["one", "two"]

    def test_text_content(self, speak_tree):
        assert speak_tree.text_content == "Hello bigonetwo"

    def test_iter_deep_tree(self):
        node = Element("n", [], [Text("leaf")])
        for _ in range(1999):
            node = Element("n", [], [node])

        assert node.text_content == "leaf"
        assert len(node.find_all("n")) == 1999

    def test_iter_document_order(self, speak_tree):
        names = [
            node.name if isinstance(node, Element) else node.value
            for node in speak_tree.iter()
        ]
        assert names == ["speak", "Hello ", "emphasis", "big", "p", "s", "one", "s", "two"]


class TestDictConversion:
    def test_to_dict(self):
        element = Element("a", [Attribute("x", "1")], [Text("t")])
        assert element.to_dict() == {
            "type": "element",
            "name": "a",
            "attributes": [{"name": "x", "value": "1"}],
            "children": [{"type": "text", "value": "t"}],
        }

    def test_node_from_dict_round_trip(self, speak_tree):
        assert node_from_dict(speak_tree.to_dict()) == speak_tree
        assert node_from_dict(Text("x").to_dict()) == Text("x")

    def test_node_from_dict_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown node type"):
            node_from_dict({"type": "comment"})
