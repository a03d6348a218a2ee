"""Flatten bound template nodes back into SQL text."""

from typing import Iterable, Union

from querybinder.template.models import (
    ConditionalBlockNode,
    LiteralNode,
    PlaceholderNode,
)


def _node_text(node: Union[LiteralNode, PlaceholderNode]) -> str:
    if node.kind == "literal":
        return node.text
    # Unbound placeholders only appear when previewing a parsed template
    return node.specifier.value


def serialize_nodes(
    nodes: Iterable[Union[LiteralNode, PlaceholderNode, ConditionalBlockNode]],
) -> str:
    """Concatenate the text of every node in order.

    Surviving conditional blocks contribute the text of their children;
    blocks removed during binding are simply absent from ``nodes``.

    Args:
        nodes: Bound nodes as returned by the binder.

    Returns:
        The query string.
    """
    parts = []
    for node in nodes:
        if node.kind == "block":
            parts.extend(_node_text(child) for child in node.children)
        else:
            parts.append(_node_text(node))
    return "".join(parts)
