"""Exceptions raised by the register documentation tools."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional


class RegdocError(Exception):
    """Base class for every error raised by :mod:`regdoc`."""


@dataclass(frozen=True)
class FieldIssue:
    """One problem found in a field list.

    ``index`` is the position of the offending field in the definition and
    ``name`` its display name; both are ``None`` for register-wide problems
    such as a wrong total width.
    """

    message: str
    index: Optional[int] = None
    name: Optional[str] = None

    def __str__(self) -> str:
        if self.index is None:
            return self.message
        return f"field #{self.index} '{self.name}': {self.message}"


class RegisterValidationError(RegdocError):
    """A register's field geometry is inconsistent."""

    def __init__(self, register: str, issues: Iterable[FieldIssue]) -> None:
        self.register = register
        self.issues: List[FieldIssue] = list(issues)
        lines = "; ".join(str(issue) for issue in self.issues)
        super().__init__(f"register '{register}' is invalid: {lines}")


class DefinitionLoadError(RegdocError):
    """A register definition file could not be read or understood."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(f"{source}: {message}")


class UnknownRegisterError(RegdocError, KeyError):
    """A register name was not found in a catalog."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(name)

    def __str__(self) -> str:
        return (
            f"unknown register '{self.name}'. "
            f"Available: {', '.join(self.available) or '(none)'}"
        )
