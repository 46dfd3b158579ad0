"""Bit layout diagram of a register.

The layout is a table with one column per register bit:

* a header row with the bit indexes 31 down to 0,
* a row with one label cell per field, spanning the field's width,
* a row with one editable default-value cell per field,
* a row with a single editable cell for the whole register value.

The header is fixed; it shows raw bit positions, not field boundaries.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from .formatting import default_value_text, register_value_text, should_rotate_label
from .model import REGISTER_WIDTH, Field
from .tree import Cell, OutputRegion, Row, Table

logger = logging.getLogger(__name__)


class LayoutRenderer:
    """Build the bit layout table of a register from its fields.

    The renderer keeps no state between calls; ``width`` only sets the
    number of index columns and the size of the register value cell.
    """

    def __init__(self, width: int = REGISTER_WIDTH) -> None:
        self.width = width

    def _index_row(self) -> Row:
        return Row(
            Cell(str(bit), header=True, css_class="layout_bit_index")
            for bit in range(self.width - 1, -1, -1)
        )

    def _name_row(self, fields: List[Field]) -> Row:
        cells = []
        for f in fields:
            rotate = should_rotate_label(f)
            if rotate:
                logger.debug("label '%s' does not fit %d bit(s), rotating", f.name, f.nbits)
            cells.append(Cell(f.name, colspan=f.nbits, css_class="layout_field_name", rotate=rotate))
        return Row(cells)

    def _value_row(self, fields: List[Field]) -> Row:
        return Row(
            Cell(default_value_text(f), colspan=f.nbits, css_class="fieldvalue", editable=True)
            for f in fields
        )

    def _register_row(self) -> Row:
        return Row([
            Cell(register_value_text(self.width), colspan=self.width, css_class="regvalue", editable=True),
        ])

    def build(self, fields: Iterable[Field]) -> Table:
        """Return the layout table for ``fields`` without touching any region."""
        fields_list = list(fields)
        return Table(
            css_class="layout",
            head=[self._index_row()],
            body=[
                self._name_row(fields_list),
                self._value_row(fields_list),
                self._register_row(),
            ],
        )

    def render(self, region: OutputRegion, fields: Iterable[Field]) -> Table:
        """Replace the content of ``region`` with the layout of ``fields``."""
        table = self.build(fields)
        region.replace(table)
        return table
