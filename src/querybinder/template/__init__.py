"""Template parsing for querybinder.

A template is SQL text with ``?``-style placeholders and optional ``{...}``
conditional blocks:

    >>> from querybinder.template import parse_template, serialize_nodes
    >>> parsed = parse_template("SELECT * FROM t {WHERE id = ?d}")
    >>> parsed.placeholder_count
    1
    >>> serialize_nodes(parsed.nodes)
    'SELECT * FROM t WHERE id = ?d'
"""

from querybinder.template.models import (
    ConditionalBlockNode,
    LiteralNode,
    Node,
    ParsedTemplate,
    PlaceholderNode,
)
from querybinder.template.parser import TemplateParser, parse_template
from querybinder.template.serializer import serialize_nodes

__all__ = [
    # Models
    "Node",
    "LiteralNode",
    "PlaceholderNode",
    "ConditionalBlockNode",
    "ParsedTemplate",
    # Parsing
    "TemplateParser",
    "parse_template",
    # Serialization
    "serialize_nodes",
]
