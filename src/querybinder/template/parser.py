"""Single-pass parser for query templates.

The template language has two control characters:

- ``?`` starts a placeholder, optionally followed by one specifier letter
  (``d``, ``f``, ``a`` or ``#``).
- ``{`` opens a conditional block that runs until the next ``}``.

Everything else is literal text. There is no escape sequence.
"""

from typing import List, Union

from querybinder.errors import NestedConditionalBlock, UnterminatedConditionalBlock
from querybinder.global_models import PARAMETER_SYMBOL, Specifier
from querybinder.template.models import (
    ConditionalBlockNode,
    LiteralNode,
    ParsedTemplate,
    PlaceholderNode,
)

BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"

ParsedNode = Union[LiteralNode, PlaceholderNode, ConditionalBlockNode]


class TemplateParser:
    """Parse a query template into literal, placeholder and block nodes.

    A parser instance owns all of its scan state, so separate instances can
    be used from separate threads.

    Example:
        >>> parsed = TemplateParser("SELECT ?# FROM t {WHERE id = ?d}").parse()
        >>> parsed.placeholder_count
        2
    """

    def __init__(self, template: str):
        """Initialize the parser.

        Args:
            template: The raw template text.
        """
        self.template = template
        self._placeholder_count = 0

    def parse(self) -> ParsedTemplate:
        """Parse the template.

        Returns:
            ParsedTemplate with the ordered nodes and the number of
            placeholders found, including those inside conditional blocks.

        Raises:
            NestedConditionalBlock: If a block is opened inside another block.
            UnterminatedConditionalBlock: If a block is never closed.
        """
        self._placeholder_count = 0
        nodes = self._parse_fragment(self.template, offset=0)
        return ParsedTemplate(nodes=nodes, placeholder_count=self._placeholder_count)

    def _parse_fragment(self, text: str, offset: int) -> List[ParsedNode]:
        """Scan one fragment of the template.

        Args:
            text: The fragment to scan (whole template or a block body).
            offset: Position of ``text`` within the whole template, used for
                error reporting.

        Returns:
            Nodes found in the fragment, in template order.
        """
        nodes: List[ParsedNode] = []
        buffer: List[str] = []
        length = len(text)
        i = 0

        while i < length:
            char = text[i]

            if char == BLOCK_OPEN:
                self._flush(buffer, nodes)
                end = self._find_block_end(text, i, offset)
                # Block bodies never contain "{", so this never recurses twice
                children = self._parse_fragment(text[i + 1 : end], offset + i + 1)
                nodes.append(ConditionalBlockNode(children=children))
                i = end + 1

            elif char == PARAMETER_SYMBOL:
                self._flush(buffer, nodes)
                next_char = text[i + 1] if i + 1 < length else None
                specifier = Specifier.from_letter(next_char)
                nodes.append(PlaceholderNode(specifier=specifier))
                self._placeholder_count += 1
                i += len(specifier.value)

            else:
                buffer.append(char)
                i += 1

        self._flush(buffer, nodes)
        return nodes

    @staticmethod
    def _find_block_end(text: str, start: int, offset: int) -> int:
        """Return the index of the ``}`` closing the block opened at ``start``."""
        for j in range(start + 1, len(text)):
            if text[j] == BLOCK_OPEN:
                raise NestedConditionalBlock(position=offset + j)
            if text[j] == BLOCK_CLOSE:
                return j

        raise UnterminatedConditionalBlock(position=offset + start)

    @staticmethod
    def _flush(buffer: List[str], nodes: List[ParsedNode]) -> None:
        if buffer:
            nodes.append(LiteralNode(text="".join(buffer)))
            buffer.clear()


def parse_template(template: str) -> ParsedTemplate:
    """Parse a template string.

    Args:
        template: The raw template text.

    Returns:
        The parsed template.
    """
    return TemplateParser(template).parse()
