"""Pydantic models for parsed query templates."""

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field

from querybinder.global_models import Specifier


class LiteralNode(BaseModel):
    """Raw template text, emitted verbatim."""

    kind: Literal["literal"] = "literal"
    text: str = Field(..., description="Template text or bound argument text")


class PlaceholderNode(BaseModel):
    """An unresolved parameter awaiting a positional argument."""

    kind: Literal["placeholder"] = "placeholder"
    specifier: Specifier = Field(
        Specifier.PLAIN, description="Formatting rule selected by the token"
    )


BlockChild = Annotated[
    Union[LiteralNode, PlaceholderNode], Field(discriminator="kind")
]


class ConditionalBlockNode(BaseModel):
    """A ``{...}`` fragment kept or dropped as a unit.

    Children are limited to literals and placeholders, so blocks cannot nest.
    """

    kind: Literal["block"] = "block"
    children: List[BlockChild] = Field(default_factory=list)

    @property
    def placeholder_count(self) -> int:
        return sum(1 for child in self.children if child.kind == "placeholder")


Node = Annotated[
    Union[LiteralNode, PlaceholderNode, ConditionalBlockNode],
    Field(discriminator="kind"),
]


class ParsedTemplate(BaseModel):
    """Result of parsing a template: its nodes and total placeholder count."""

    nodes: List[Node] = Field(default_factory=list)
    placeholder_count: int = Field(
        0, description="Placeholders found anywhere, including inside blocks"
    )

    @property
    def block_count(self) -> int:
        return sum(1 for node in self.nodes if node.kind == "block")
