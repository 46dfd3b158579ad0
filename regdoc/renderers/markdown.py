"""Markdown renderer.

The layout has no Markdown equivalent for spanned cells, so it is drawn
as a fixed-width ASCII diagram inside a fenced block.  Each bit column
is ``CHARS_PER_BIT`` characters wide including its separator, and labels
longer than their cell are truncated.  The field table is a GitHub
Flavoured Markdown table with ``<br/>`` line breaks.
"""

from __future__ import annotations

from typing import List

from ..formatting import CHARS_PER_BIT
from ..model import RegisterDefinition
from ..tree import Row, Table
from .base import DocumentRenderer, renderer_registry


@renderer_registry.register("markdown")
class MarkdownRenderer(DocumentRenderer):
    """Render register tables in Markdown."""

    line_break = "<br/>"

    def _diagram_row(self, row: Row) -> str:
        parts = []
        for cell in row:
            width = max(CHARS_PER_BIT * cell.colspan - 1, 0)
            parts.append(cell.text[:width].center(width))
        return "|" + "|".join(parts) + "|"

    def render_layout(self, table: Table) -> str:
        columns = table.column_count()
        rule = "+" + "-" * max(CHARS_PER_BIT * columns - 1, 0) + "+"
        lines: List[str] = [rule]
        for row in table.rows:
            lines.append(self._diagram_row(row))
            lines.append(rule)
        return "\n".join(lines)

    def render_fields(self, table: Table) -> str:
        rows: List[str] = []
        for header in table.head:
            headers = header.texts()
            # Header row with alignment specifier
            rows.append("| " + " | ".join(headers) + " |")
            rows.append("|" + "|".join([":" + "-" * (len(h) + 1) for h in headers]) + "|")
        for row in table.body:
            rows.append("| " + " | ".join(row.texts()) + " |")
        return "\n".join(rows)

    def render_document(self, definition: RegisterDefinition, layout_output: str, fields_output: str) -> str:
        parts = [f"# Register {definition.name}", ""]
        if definition.description:
            parts += [definition.description, ""]
        parts += ["## Layout", "", "```", layout_output, "```", ""]
        parts += ["## Fields", "", fields_output]
        return "\n".join(parts)
