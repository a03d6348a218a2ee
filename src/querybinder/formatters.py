"""Output formatters for parsed templates."""

import json
from pathlib import Path
from typing import Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text

from querybinder.template.models import ParsedTemplate


class TextFormatter:
    """Format a parsed template as a Rich table for terminal display."""

    @staticmethod
    def format(parsed: ParsedTemplate, console: Console) -> None:
        """
        Print one row per node, with block children indented under their block.

        Args:
            parsed: The parsed template
            console: Rich Console instance for output
        """
        if not parsed.nodes:
            console.print("[yellow]Template is empty.[/yellow]")
            return

        table = Table(title="Template Nodes", title_style="bold")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Kind", style="cyan")
        table.add_column("Content", style="green")

        for index, node in enumerate(parsed.nodes):
            if node.kind == "block":
                summary = Text(f"{len(node.children)} child node(s)", style="dim")
                table.add_row(str(index), "block", summary)
                for child_index, child in enumerate(node.children):
                    kind, content = _describe(child)
                    table.add_row(f"{index}.{child_index}", f"  {kind}", content)
            else:
                kind, content = _describe(node)
                table.add_row(str(index), kind, content)

        console.print(table)
        console.print(
            f"[dim]Placeholders: {parsed.placeholder_count}, "
            f"conditional blocks: {parsed.block_count}[/dim]"
        )


def _describe(node) -> Tuple[str, Text]:
    if node.kind == "literal":
        # repr keeps leading/trailing whitespace visible
        return "literal", Text(repr(node.text))
    return "placeholder", Text(node.specifier.value, style="bold magenta")


class JsonFormatter:
    """Format a parsed template as JSON."""

    @staticmethod
    def format(parsed: ParsedTemplate) -> str:
        """
        Format a parsed template as JSON.

        Output format:
        {
          "placeholder_count": 1,
          "nodes": [
            {"kind": "literal", "text": "SELECT * FROM t "},
            {"kind": "block", "children": [
              {"kind": "literal", "text": "WHERE id = "},
              {"kind": "placeholder", "specifier": "?d"}
            ]}
          ]
        }

        Args:
            parsed: The parsed template

        Returns:
            JSON-formatted string
        """
        data = parsed.model_dump(mode="json")
        return json.dumps(
            {"placeholder_count": data["placeholder_count"], "nodes": data["nodes"]},
            indent=2,
        )


class OutputWriter:
    """Write formatted output to file or stdout."""

    @staticmethod
    def write(content: str, output_file: Optional[Path] = None) -> None:
        """
        Write content to file or stdout.

        Args:
            content: The content to write
            output_file: Optional file path. If None, writes to stdout.
        """
        if output_file:
            output_file.write_text(content, encoding="utf-8")
        else:
            print(content)
