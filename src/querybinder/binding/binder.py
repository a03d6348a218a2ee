"""Bind positional arguments to the placeholders of a parsed template."""

from typing import Any, List, Sequence, Tuple, Union

from querybinder.binding.formatter import format_value
from querybinder.binding.skip import needs_skip
from querybinder.errors import ArgumentCountMismatch
from querybinder.template.models import (
    ConditionalBlockNode,
    LiteralNode,
    ParsedTemplate,
    PlaceholderNode,
)

BoundNode = Union[LiteralNode, ConditionalBlockNode]


class ParameterBinder:
    """Substitute arguments into a parsed template.

    One argument cursor is shared across the whole template. Placeholders
    inside a conditional block are bound in order; the first one whose
    argument is the skip sentinel (or a container holding it) drops the
    whole block.

    By default a dropped block consumes exactly one argument, even if it has
    further placeholders after the skipped one. Later placeholders then read
    the arguments those placeholders would have used. Pass
    ``consume_skipped=True`` to advance past every remaining placeholder of
    the dropped block instead.
    """

    def __init__(self, consume_skipped: bool = False):
        """Initialize the binder.

        Args:
            consume_skipped: Whether a dropped block consumes the arguments of
                all its remaining placeholders.
        """
        self.consume_skipped = consume_skipped

    def bind(self, parsed: ParsedTemplate, args: Sequence[Any]) -> List[BoundNode]:
        """Bind ``args`` to the placeholders of ``parsed``.

        ``parsed`` is left untouched, so the same parsed template can be
        bound again with other arguments.

        Args:
            parsed: Output of the template parser.
            args: Positional arguments, one per placeholder.

        Returns:
            Nodes with every surviving placeholder replaced by a LiteralNode
            and dropped blocks removed.

        Raises:
            ArgumentCountMismatch: If the argument count differs from the
                placeholder count. No substitution is attempted.
            QueryBuilderError: Any formatting error from the value formatter.
            TypeError: If ``args`` is a string or bytes rather than a
                sequence of arguments.
        """
        if isinstance(args, (str, bytes, bytearray)):
            raise TypeError(
                f"args must be a sequence of arguments, not {type(args).__name__}"
            )
        args = list(args)
        if parsed.placeholder_count != len(args):
            raise ArgumentCountMismatch(
                expected=parsed.placeholder_count, actual=len(args)
            )

        bound: List[BoundNode] = []
        cursor = 0

        for node in parsed.nodes:
            if node.kind == "literal":
                bound.append(node.model_copy())

            elif node.kind == "placeholder":
                bound.append(self._bind_placeholder(node, args[cursor]))
                cursor += 1

            else:
                block = node.model_copy(deep=True)
                cursor, keep = self._bind_block(block, args, cursor)
                if keep:
                    bound.append(block)

        return bound

    def _bind_block(
        self, block: ConditionalBlockNode, args: List[Any], cursor: int
    ) -> Tuple[int, bool]:
        """Bind the placeholders of one block in place.

        Returns:
            The advanced cursor and whether the block survives.
        """
        remaining = block.placeholder_count

        for index, child in enumerate(block.children):
            if child.kind != "placeholder":
                continue

            arg = args[cursor]
            if needs_skip(arg):
                cursor += remaining if self.consume_skipped else 1
                return cursor, False

            block.children[index] = self._bind_placeholder(child, arg)
            cursor += 1
            remaining -= 1

        return cursor, True

    @staticmethod
    def _bind_placeholder(node: PlaceholderNode, arg: Any) -> LiteralNode:
        return LiteralNode(text=format_value(node.specifier, arg))


def bind_parameters(
    parsed: ParsedTemplate, args: Sequence[Any], consume_skipped: bool = False
) -> List[BoundNode]:
    """Bind positional arguments to a parsed template.

    See ParameterBinder for the skip rules.
    """
    return ParameterBinder(consume_skipped=consume_skipped).bind(parsed, args)
