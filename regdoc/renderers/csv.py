"""CSV renderer.

Renders the layout and field tables as CSV.  A cell spanning several
columns is written once and followed by empty columns, so every layout
row has one column per register bit.
"""

from __future__ import annotations

import csv
import io
from typing import List

from ..model import RegisterDefinition
from ..tree import Row, Table
from .base import DocumentRenderer, renderer_registry


@renderer_registry.register("csv")
class CsvRenderer(DocumentRenderer):
    """Render register tables in CSV format.

    Example output for the layout of a register with two half-word fields
    (columns elided)::

        31,30,...,16,15,...,0
        f1,,...,,f0,...,
        0x0,,...,,0x0,...,
        0x00000000,,...,
    """

    # csv quotes embedded newlines, so descriptions keep them
    line_break = "\n"

    def _expand(self, row: Row) -> List[str]:
        values: List[str] = []
        for cell in row:
            values.append(cell.text)
            values.extend([""] * max(cell.colspan - 1, 0))
        return values

    def _render_table(self, table: Table) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        for row in table.rows:
            writer.writerow(self._expand(row))
        return output.getvalue().rstrip("\r\n")

    def render_layout(self, table: Table) -> str:
        return self._render_table(table)

    def render_fields(self, table: Table) -> str:
        return self._render_table(table)

    def render_document(self, definition: RegisterDefinition, layout_output: str, fields_output: str) -> str:
        return f"{layout_output}\n\n{fields_output}"
