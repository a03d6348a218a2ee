"""Tests for the template parser."""

import pytest

from querybinder.errors import (
    MalformedTemplate,
    NestedConditionalBlock,
    UnterminatedConditionalBlock,
)
from querybinder.global_models import Specifier
from querybinder.template.models import (
    ConditionalBlockNode,
    LiteralNode,
    PlaceholderNode,
)
from querybinder.template.parser import TemplateParser, parse_template


class TestLiteralText:
    """Tests for templates without control characters."""

    def test_plain_sql_is_single_literal(self):
        """Test that text without placeholders becomes one literal node."""
        parsed = parse_template("SELECT name FROM users WHERE user_id = 1")

        assert parsed.nodes == [
            LiteralNode(text="SELECT name FROM users WHERE user_id = 1")
        ]
        assert parsed.placeholder_count == 0

    def test_empty_template(self):
        """Test that an empty template has no nodes."""
        parsed = parse_template("")

        assert parsed.nodes == []
        assert parsed.placeholder_count == 0

    def test_closing_brace_outside_block_is_literal(self):
        """Test that a stray closing brace is ordinary text."""
        parsed = parse_template("a } b")

        assert parsed.nodes == [LiteralNode(text="a } b")]


class TestPlaceholders:
    """Tests for placeholder tokens."""

    @pytest.mark.parametrize(
        "token,specifier",
        [
            ("?", Specifier.PLAIN),
            ("?d", Specifier.INT),
            ("?f", Specifier.FLOAT),
            ("?a", Specifier.ARRAY),
            ("?#", Specifier.IDENTIFIER),
        ],
    )
    def test_specifier_tokens(self, token, specifier):
        """Test that every token resolves to its specifier."""
        parsed = parse_template(f"id = {token}")

        assert parsed.nodes == [
            LiteralNode(text="id = "),
            PlaceholderNode(specifier=specifier),
        ]
        assert parsed.placeholder_count == 1

    def test_unknown_letter_stays_literal(self):
        """Test that ?x is a plain placeholder followed by literal x."""
        parsed = parse_template("?x")

        assert parsed.nodes == [
            PlaceholderNode(specifier=Specifier.PLAIN),
            LiteralNode(text="x"),
        ]

    def test_adjacent_placeholders(self):
        """Test placeholders with no text between them."""
        parsed = parse_template("??d?a")

        assert [node.specifier for node in parsed.nodes] == [
            Specifier.PLAIN,
            Specifier.INT,
            Specifier.ARRAY,
        ]
        assert parsed.placeholder_count == 3

    def test_placeholder_at_end_of_template(self):
        """Test that a trailing ? is a plain placeholder."""
        parsed = parse_template("WHERE name = ?")

        assert parsed.nodes[-1] == PlaceholderNode(specifier=Specifier.PLAIN)

    def test_text_after_placeholder(self):
        """Test that text following a placeholder is kept."""
        parsed = parse_template("IN (?a) AND x")

        assert parsed.nodes == [
            LiteralNode(text="IN ("),
            PlaceholderNode(specifier=Specifier.ARRAY),
            LiteralNode(text=") AND x"),
        ]


class TestConditionalBlocks:
    """Tests for {...} conditional blocks."""

    def test_block_children(self):
        """Test that block contents are parsed into child nodes."""
        parsed = parse_template("SELECT * FROM t {WHERE id = ?d} LIMIT 1")

        assert parsed.nodes == [
            LiteralNode(text="SELECT * FROM t "),
            ConditionalBlockNode(
                children=[
                    LiteralNode(text="WHERE id = "),
                    PlaceholderNode(specifier=Specifier.INT),
                ]
            ),
            LiteralNode(text=" LIMIT 1"),
        ]
        assert parsed.placeholder_count == 1
        assert parsed.block_count == 1

    def test_placeholders_in_blocks_are_counted(self):
        """Test that the count includes placeholders inside blocks."""
        parsed = parse_template("? {?d ?f} ?# {?a}")

        assert parsed.placeholder_count == 5
        assert parsed.block_count == 2

    def test_empty_block(self):
        """Test that {} produces a block without children."""
        parsed = parse_template("a{}b")

        assert parsed.nodes == [
            LiteralNode(text="a"),
            ConditionalBlockNode(children=[]),
            LiteralNode(text="b"),
        ]

    def test_nested_block_rejected(self):
        """Test that a block inside a block raises NestedConditionalBlock."""
        with pytest.raises(NestedConditionalBlock) as exc_info:
            parse_template("{a {b}}")

        assert exc_info.value.position == 3

    def test_unterminated_block_rejected(self):
        """Test that an unclosed block raises UnterminatedConditionalBlock."""
        with pytest.raises(UnterminatedConditionalBlock) as exc_info:
            parse_template("SELECT {WHERE id = ?d")

        assert exc_info.value.position == 7

    def test_opening_brace_at_end(self):
        """Test that a lone { at the end of the template is unterminated."""
        with pytest.raises(UnterminatedConditionalBlock):
            parse_template("SELECT 1 {")

    def test_errors_are_malformed_template(self):
        """Test that both structural errors share a base class."""
        assert issubclass(NestedConditionalBlock, MalformedTemplate)
        assert issubclass(UnterminatedConditionalBlock, MalformedTemplate)


class TestTemplateParser:
    """Tests for TemplateParser state handling."""

    def test_parse_twice_gives_same_result(self):
        """Test that the placeholder count is reset between parses."""
        parser = TemplateParser("?d {?a}")

        first = parser.parse()
        second = parser.parse()

        assert first == second
        assert second.placeholder_count == 2

    def test_parsers_are_independent(self):
        """Test that separate parsers do not share counters."""
        TemplateParser("? ? ?").parse()
        parsed = TemplateParser("?").parse()

        assert parsed.placeholder_count == 1
