"""Tests for XML document parsing."""

from __future__ import annotations

from atlas2html.document_source import DOCUMENT_NODE_NAME, parse_document


class TestParseDocument:
    """Tests for parse_document function."""

    def test_top_level_elements_are_children_of_document(self) -> None:
        """The document node wraps the root element."""
        document = parse_document("<destinations><destination atlas_id='1'/></destinations>")

        assert document.name == DOCUMENT_NODE_NAME
        assert [child.name for child in document.children] == ["destinations"]

    def test_keeps_attributes_and_child_order(self) -> None:
        """Attributes are strings and element children keep document order."""
        document = parse_document(
            '<root><a id="1" kind="x"/><b/><a id="2"/></root>'
        )
        root = document.children[0]

        assert [child.name for child in root.children] == ["a", "b", "a"]
        assert root.children[0].attributes == {"id": "1", "kind": "x"}
        assert [child.attributes["id"] for child in root.iter_children("a")] == ["1", "2"]
        assert root.find_child("b") is root.children[1]
        assert root.find_child("missing") is None

    def test_cdata_becomes_text(self) -> None:
        """CDATA sections are exposed as element text."""
        document = parse_document("<overview><![CDATA[<b>bold</b> words]]></overview>")

        assert document.children[0].text == "<b>bold</b> words"

    def test_whitespace_only_text_is_none(self) -> None:
        """Indentation between elements is not treated as text."""
        document = parse_document("<root>\n  <child>value</child>\n</root>")
        root = document.children[0]

        assert root.text is None
        assert root.children[0].text == "value"

    def test_comments_are_dropped(self) -> None:
        """Comments contribute neither children nor text."""
        document = parse_document("<root><!-- note --><child/></root>")
        root = document.children[0]

        assert root.text is None
        assert [child.name for child in root.children] == ["child"]

    def test_handles_nesting(self) -> None:
        """Nested elements are converted level by level."""
        depth = 100
        text = "<n>" * depth + "leaf" + "</n>" * depth
        node = parse_document(text)

        levels = 0
        while node.children:
            node = node.children[0]
            levels += 1

        assert levels == depth
        assert node.text == "leaf"

    def test_text_without_elements_has_no_children(self) -> None:
        """Input without markup yields an empty document."""
        document = parse_document("")

        assert document.children == []

    def test_text_is_first_run_without_padding(self) -> None:
        """Only the first non-blank run counts, with its whitespace removed."""
        document = parse_document("<overview>\n  <![CDATA[text]]>\n</overview>")

        assert document.children[0].text == "text"
        assert document.children[0].leading_text == "text"

    def test_leading_text_only_before_first_element(self) -> None:
        """Text following a child element is not leading text."""
        mixed = parse_document("<overview>intro<p>x</p>tail</overview>").children[0]
        trailing = parse_document("<overview><p>x</p>tail</overview>").children[0]

        assert (mixed.text, mixed.leading_text) == ("intro", "intro")
        assert (trailing.text, trailing.leading_text) == ("tail", None)


class TestPublicErrors:
    """Tests for the error kinds exported by the package."""

    def test_missing_dependency_error_is_not_exported(self) -> None:
        """ParseError only signals a missing bs4/lxml install."""
        import atlas2html
        from atlas2html.exceptions import Atlas2htmlError, ParseError

        assert "ParseError" not in atlas2html.__all__
        assert issubclass(ParseError, Atlas2htmlError)
        assert "not installed" in (ParseError.__doc__ or "")
