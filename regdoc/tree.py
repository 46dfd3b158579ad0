"""Immutable output tree produced by the renderers.

A :class:`Table` is a head and a body made of :class:`Row` objects,
which in turn hold :class:`Cell` objects.  The tree carries everything a
serializer needs (text, column span, CSS class, whether the cell is an
editable value or a rotated label) and nothing about the concrete output
medium.

An :class:`OutputRegion` is a named slot holding at most one tree.  It
is replaced as a whole, never patched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cell:
    """A single table cell.

    ``markup`` flags text that is already formatted for the output medium
    (descriptions with line-break markers) and must be emitted as is.
    """

    text: str
    colspan: int = 1
    css_class: str = ""
    header: bool = False
    editable: bool = False
    rotate: bool = False
    markup: bool = False


@dataclass(frozen=True)
class Row:
    cells: Tuple[Cell, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", tuple(self.cells))

    def span(self) -> int:
        """Number of columns covered by this row."""
        return sum(c.colspan for c in self.cells)

    def texts(self) -> Tuple[str, ...]:
        return tuple(c.text for c in self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)


@dataclass(frozen=True)
class Table:
    css_class: str
    head: Tuple[Row, ...] = field(default_factory=tuple)
    body: Tuple[Row, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "head", tuple(self.head))
        object.__setattr__(self, "body", tuple(self.body))

    @property
    def rows(self) -> Tuple[Row, ...]:
        """Head rows followed by body rows."""
        return self.head + self.body

    def column_count(self) -> int:
        return max((r.span() for r in self.rows), default=0)


class OutputRegion:
    """A named output slot owned by one renderer.

    ``replace`` swaps in a complete tree; ``clear`` empties the slot.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._content: Optional[Table] = None

    @property
    def content(self) -> Optional[Table]:
        return self._content

    def replace(self, content: Table) -> None:
        logger.debug("region %s: replacing content with %d row(s)", self.name, len(content.rows))
        self._content = content

    def clear(self) -> None:
        self._content = None

    def is_empty(self) -> bool:
        return self._content is None

    def __repr__(self) -> str:
        state = "empty" if self._content is None else f"{len(self._content.rows)} rows"
        return f"OutputRegion({self.name!r}, {state})"
