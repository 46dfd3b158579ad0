"""Data model for register definitions.

A register is described by an ordered list of :class:`Field` objects,
each covering a contiguous range of bits.  The order of the list is the
display order; by convention the most significant field comes first but
nothing here enforces it.

The model is deliberately passive.  It does not check that fields fit
into the register or that they do not overlap; that is the job of
:func:`regdoc.validation.validate_fields`, so that the renderers can
still draw (incorrect but harmless) output for malformed definitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

#: Width of the registers drawn by the layout renderer.
REGISTER_WIDTH = 32


@dataclass(frozen=True)
class Field:
    """A contiguous bit range of a register.

    ``lsb`` is the index of the least significant bit and ``nbits`` the
    width.  ``access`` is a free-form tag, typically ``rw`` or ``ro``.
    ``doc`` holds optional multi-line documentation; ``None`` and the
    empty string are treated the same.
    """

    name: str
    lsb: int
    nbits: int
    access: str = "rw"
    doc: Optional[str] = None

    @property
    def msb(self) -> int:
        return self.lsb + self.nbits - 1

    def bits(self) -> range:
        """Bit positions covered by this field, lowest first."""
        return range(self.lsb, self.lsb + self.nbits)

    def __str__(self) -> str:
        # formatting imports this module
        from .formatting import bit_range_label
        return f"{self.access} {self.name}[{bit_range_label(self)}]"


@dataclass(frozen=True)
class RegisterDefinition:
    """A named, ordered and immutable list of fields."""

    name: str
    fields: Tuple[Field, ...] = field(default_factory=tuple)
    description: Optional[str] = None

    def __post_init__(self) -> None:
        # Accept any iterable but always store a tuple.
        object.__setattr__(self, "fields", tuple(self.fields))

    def total_width(self) -> int:
        return sum(f.nbits for f in self.fields)

    def get_field(self, name: str) -> Optional[Field]:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __str__(self) -> str:
        return f"register {self.name}"
