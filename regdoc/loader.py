"""Loading register definitions from files.

A loader turns a file into a :class:`RegisterCatalog`, an ordered
collection of :class:`regdoc.model.RegisterDefinition` objects that can
be looked up by name.  Loaders are registered by key in
``loader_registry``; :func:`load_catalog` picks one from the file suffix
unless a key is given.

The JSON loader accepts three document shapes::

    [ {"name": "f0", "lsb": 0, "nbits": 32, "access": "rw"} ]

    {"name": "CTRL", "fields": [ ... ]}

    {"registers": [ {"name": "CTRL", "fields": [ ... ]}, ... ]}

A bare field list is named after the file stem.  Field objects must
have ``name``, ``lsb`` and ``nbits``; ``access`` defaults to ``rw`` and
``doc`` is optional.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, ValidationError
from pydantic import Field as ModelField

from .errors import DefinitionLoadError, UnknownRegisterError
from .model import Field, RegisterDefinition
from .registry import Registry

logger = logging.getLogger(__name__)

loader_registry = Registry("loader")

#: Directory holding the sample definitions shipped with the package.
DATA_DIR = Path(__file__).parent / "data"


class FieldEntry(BaseModel):
    """One field object of a definition file."""

    model_config = ConfigDict(extra="forbid")

    name: StrictStr
    lsb: StrictInt
    nbits: StrictInt
    access: StrictStr = "rw"
    doc: Optional[StrictStr] = None

    def to_field(self) -> Field:
        return Field(name=self.name, lsb=self.lsb, nbits=self.nbits, access=self.access, doc=self.doc)


class RegisterEntry(BaseModel):
    """One register object: a name, optional doc and its fields."""

    model_config = ConfigDict(extra="forbid")

    name: StrictStr = ModelField(min_length=1)
    doc: Optional[StrictStr] = None
    fields: List[FieldEntry]

    def to_definition(self) -> RegisterDefinition:
        return RegisterDefinition(
            name=self.name,
            fields=tuple(f.to_field() for f in self.fields),
            description=self.doc,
        )


class CatalogDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    registers: List[RegisterEntry]


class RegisterCatalog:
    """Register definitions in file order, addressable by name."""

    def __init__(self, registers: Iterable[RegisterDefinition] = (), source: str = "") -> None:
        self.source = source
        self._registers: Dict[str, RegisterDefinition] = {}
        for reg in registers:
            if reg.name in self._registers:
                raise DefinitionLoadError(source or "<catalog>", f"duplicate register '{reg.name}'")
            self._registers[reg.name] = reg

    def get(self, name: str) -> RegisterDefinition:
        if name not in self._registers:
            raise UnknownRegisterError(name, self._registers.keys())
        return self._registers[name]

    def first(self) -> RegisterDefinition:
        if not self._registers:
            raise DefinitionLoadError(self.source or "<catalog>", "no registers defined")
        return next(iter(self._registers.values()))

    def names(self) -> List[str]:
        return list(self._registers.keys())

    def __iter__(self) -> Iterator[RegisterDefinition]:
        return iter(self._registers.values())

    def __len__(self) -> int:
        return len(self._registers)

    def __contains__(self, name: str) -> bool:
        return name in self._registers


class DefinitionLoader(ABC):
    """Base class for register definition loaders."""

    @abstractmethod
    def load(self, path: Union[str, Path]) -> RegisterCatalog:
        """Read ``path`` and return its registers.

        Raises:
            DefinitionLoadError: If the file cannot be read or parsed.
        """
        raise NotImplementedError


@loader_registry.register("json")
class JsonDefinitionLoader(DefinitionLoader):
    """Read register definitions from JSON documents."""

    def load(self, path: Union[str, Path]) -> RegisterCatalog:
        path = Path(path)
        source = str(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DefinitionLoadError(source, f"cannot read file: {exc.strerror or exc}") from exc
        catalog = self.loads(text, source=source, default_name=path.stem)
        logger.info("loaded %d register(s) from %s", len(catalog), source)
        return catalog

    def loads(self, text: str, source: str = "<string>", default_name: str = "register") -> RegisterCatalog:
        """Parse a JSON document already held in memory."""
        try:
            doc = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DefinitionLoadError(source, f"invalid JSON: {exc}") from exc

        if isinstance(doc, list):
            doc = {"name": default_name, "fields": doc}
        elif isinstance(doc, dict):
            if "registers" not in doc:
                doc = dict(doc)
                doc.setdefault("name", default_name)
        else:
            raise DefinitionLoadError(source, "expected a list of fields or an object")

        try:
            if "registers" in doc:
                entries = CatalogDocument.model_validate(doc).registers
            else:
                entries = [RegisterEntry.model_validate(doc)]
        except ValidationError as exc:
            problems = "; ".join(_describe(error, doc) for error in exc.errors())
            raise DefinitionLoadError(source, problems) from exc

        return RegisterCatalog((entry.to_definition() for entry in entries), source=source)


def _describe(error: Dict[str, Any], doc: Dict[str, Any]) -> str:
    """Turn one pydantic error into a message naming the register and field."""
    loc = list(error["loc"])
    where: List[str] = []

    if loc[:1] == ["registers"] and len(loc) > 1:
        index = loc[1]
        entry = doc["registers"][index]
        name = entry.get("name") if isinstance(entry, dict) else None
        where.append(f"register '{name}'" if isinstance(name, str) and name else f"register #{index}")
        loc = loc[2:]
    elif loc[:1] != ["registers"]:
        where.append(f"register '{doc.get('name')}'")

    in_field = len(loc) >= 2 and loc[0] == "fields" and isinstance(loc[1], int)
    if in_field:
        where.append(f"field #{loc[1]}")
        loc = loc[2:]

    key = loc[-1] if loc else None
    kind = error["type"]
    if key == "name" and not in_field and kind in ("missing", "string_type", "string_too_short"):
        problem = "register without a name"
    elif kind == "missing":
        problem = f"missing '{key}'"
    elif kind == "extra_forbidden":
        problem = f"unknown key(s) {key}"
    elif kind == "int_type":
        problem = f"'{key}' must be an integer"
    elif kind == "string_type":
        problem = f"'{key}' must be a string"
    elif kind == "list_type":
        problem = f"'{key}' must be a list"
    elif kind in ("model_type", "dict_type"):
        problem = "expected an object"
    else:
        problem = error["msg"]

    if not where:
        return problem
    return f"{', '.join(where)}: {problem}"


def loader_for(path: Union[str, Path], key: Optional[str] = None) -> DefinitionLoader:
    """Return the loader registered under ``key`` or under the file suffix."""
    if key is None:
        key = Path(path).suffix.lstrip(".").lower()
    try:
        return loader_registry.create(key)
    except KeyError as exc:
        raise DefinitionLoadError(str(path), f"no loader for '{key}' ({exc.args[0]})") from exc


def load_catalog(path: Union[str, Path], key: Optional[str] = None) -> RegisterCatalog:
    return loader_for(path, key).load(path)


def sample_catalog() -> RegisterCatalog:
    """The sample registers shipped in :data:`DATA_DIR`."""
    return load_catalog(DATA_DIR / "nandcmd.json")
