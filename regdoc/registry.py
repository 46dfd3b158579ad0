"""Keyed registry for definition loaders and document renderers.

``regdoc.loader`` registers one loader per definition file type and
``regdoc.renderers`` one renderer per output format, each under a short
key with a class decorator::

    renderer_registry = Registry("renderer")

    @renderer_registry.register("html")
    class HtmlRenderer(DocumentRenderer):
        ...

    renderer = renderer_registry.create("html", title="NAND registers")

``bitview.py`` offers the keys as ``--format`` and ``--loader`` choices,
and :func:`regdoc.loader.loader_for` looks a loader up by file suffix.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Type, TypeVar

T = TypeVar("T")


class Registry:
    """Map string keys to classes and instantiate them on demand."""

    def __init__(self, name: str = "registry") -> None:
        """Initialize the registry.

        Args:
            name: Label used in error messages (``"renderer"``, ``"loader"``).
        """
        self._name = name
        self._items: Dict[str, Type[Any]] = {}

    def register(self, key: str) -> Callable[[Type[T]], Type[T]]:
        """Class decorator registering the decorated class under ``key``.

        Raises:
            ValueError: If ``key`` is already taken.
        """
        def decorator(cls: Type[T]) -> Type[T]:
            if key in self._items:
                raise ValueError(
                    f"{self._name}: key '{key}' already registered "
                    f"to {self._items[key].__name__}"
                )
            self._items[key] = cls
            return cls
        return decorator

    def get(self, key: str) -> Type[Any]:
        """Return the class registered under ``key``.

        Raises:
            KeyError: If ``key`` is not registered.  The message lists the
                available keys.
        """
        if key not in self._items:
            available = ", ".join(sorted(self._items.keys()))
            raise KeyError(
                f"{self._name}: unknown key '{key}'. "
                f"Available: {available}"
            )
        return self._items[key]

    def create(self, key: str, **kwargs: Any) -> Any:
        """Instantiate the class registered under ``key`` with ``kwargs``."""
        return self.get(key)(**kwargs)

    def keys(self) -> List[str]:
        """Registered keys, in registration order."""
        return list(self._items.keys())

    def __contains__(self, key: str) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)
