"""Text formatting helpers shared by the layout and field renderers.

Each helper is a pure function of a single field (or a string) so it can
be tested on its own.
"""

from __future__ import annotations

import re
from typing import Optional

from .model import REGISTER_WIDTH, Field

#: Characters per bit column assumed when deciding whether a label fits.
CHARS_PER_BIT = 4

#: Marker substituted for line breaks in HTML output.
HTML_LINE_BREAK = "<br>"

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def bit_range_label(field: Field) -> str:
    """Return ``"lsb"`` for single-bit fields and ``"msb:lsb"`` otherwise."""
    if field.nbits == 1:
        return str(field.lsb)
    return f"{field.msb}:{field.lsb}"


def default_value_text(field: Field) -> str:
    """Placeholder value shown in a field's value cell."""
    if field.nbits == 1:
        return "0"
    return "0x0"


def register_value_text(width: int = REGISTER_WIDTH) -> str:
    """Placeholder value for the whole register, one hex digit per nibble."""
    digits = (width + 3) // 4
    return "0x" + "0" * digits


def should_rotate_label(field: Field) -> bool:
    """Whether ``field.name`` is too long to be drawn horizontally.

    The threshold is a fixed number of characters per bit column rather
    than a measured text width.
    """
    return len(field.name) > CHARS_PER_BIT * field.nbits


def normalize_line_breaks(text: Optional[str], marker: str = HTML_LINE_BREAK) -> str:
    """Replace every ``\\r\\n``, ``\\r`` or ``\\n`` in ``text`` with ``marker``.

    ``None`` gives the empty string.  Nothing else in the text is changed;
    in particular no markup escaping happens here.
    """
    if not text:
        return ""
    return _LINE_BREAK_RE.sub(marker, text)
