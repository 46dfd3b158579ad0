"""Geometry checks for register definitions.

The renderers draw whatever they are given.  :func:`validate_fields`
checks a complete field list up front so that a bad definition is
rejected before anything is drawn:

* every field has a name and a width of at least one bit,
* ``lsb`` lies in the register and ``lsb + nbits`` does not pass its top,
* no two fields claim the same bit,
* the widths add up to the register width.

All problems are collected and reported together.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from .errors import FieldIssue, RegisterValidationError
from .model import REGISTER_WIDTH, Field, RegisterDefinition

logger = logging.getLogger(__name__)


def find_issues(fields: Iterable[Field], width: int = REGISTER_WIDTH) -> List[FieldIssue]:
    """Return every geometry problem in ``fields``; empty when valid."""
    issues: List[FieldIssue] = []
    owners: Dict[int, int] = {}
    fields_list = list(fields)

    for index, f in enumerate(fields_list):
        def issue(message: str) -> None:
            issues.append(FieldIssue(message, index=index, name=f.name))

        if not f.name:
            issue("name is empty")
        if f.nbits < 1:
            issue(f"nbits must be at least 1, got {f.nbits}")
            continue
        if f.lsb < 0 or f.lsb >= width:
            issue(f"lsb {f.lsb} is outside 0..{width - 1}")
            continue
        if f.lsb + f.nbits > width:
            issue(f"bits {f.msb}:{f.lsb} extend past bit {width - 1}")
            continue

        clashes = sorted({owners[b] for b in f.bits() if b in owners})
        for other in clashes:
            issue(f"overlaps field #{other} '{fields_list[other].name}'")
        for b in f.bits():
            owners.setdefault(b, index)

    total = sum(f.nbits for f in fields_list)
    if total != width:
        issues.append(FieldIssue(f"field widths add up to {total} bits, expected {width}"))
    return issues


def validate_fields(fields: Iterable[Field], register: str = "", width: int = REGISTER_WIDTH) -> None:
    """Raise :class:`RegisterValidationError` if ``fields`` is inconsistent."""
    issues = find_issues(fields, width)
    if issues:
        logger.debug("register %s: %d issue(s)", register, len(issues))
        raise RegisterValidationError(register, issues)


def validate_register(definition: RegisterDefinition, width: int = REGISTER_WIDTH) -> None:
    validate_fields(definition.fields, definition.name, width)
