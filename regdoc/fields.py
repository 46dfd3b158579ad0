"""Field reference table of a register."""

from __future__ import annotations

from typing import Iterable

from .formatting import HTML_LINE_BREAK, bit_range_label, normalize_line_breaks
from .model import Field
from .tree import Cell, OutputRegion, Row, Table

#: Column titles paired with the CSS class of their cells.
COLUMNS = (
    ("Bits", "fields_nbits"),
    ("Name", "fields_name"),
    ("Access", "fields_access"),
    ("Description", "fields_description"),
)


class FieldTableRenderer:
    """Build the ``Bits | Name | Access | Description`` table.

    Rows follow the order of the input.  Line breaks in the documentation
    are replaced with ``line_break``; the rest of the text is copied
    verbatim, so callers must make sure it is safe for the output medium.
    """

    def __init__(self, line_break: str = HTML_LINE_BREAK) -> None:
        self.line_break = line_break

    def _header_row(self) -> Row:
        return Row(Cell(title, header=True, css_class=css) for title, css in COLUMNS)

    def _field_row(self, field: Field) -> Row:
        return Row([
            Cell(bit_range_label(field), css_class="fields_nbits"),
            Cell(field.name, css_class="fields_name"),
            Cell(field.access, css_class="fields_access"),
            Cell(
                normalize_line_breaks(field.doc, self.line_break),
                css_class="fields_description",
                markup=True,
            ),
        ])

    def build(self, fields: Iterable[Field]) -> Table:
        return Table(
            css_class="fields",
            head=[self._header_row()],
            body=[self._field_row(f) for f in fields],
        )

    def render(self, region: OutputRegion, fields: Iterable[Field]) -> Table:
        """Replace the content of ``region`` with the table of ``fields``."""
        table = self.build(fields)
        region.replace(table)
        return table
