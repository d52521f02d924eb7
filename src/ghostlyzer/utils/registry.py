"""Type registry — explicit name-to-class table.

The deterministic alternative to ``TypeProvider``: classes are registered
by name during startup, then ``freeze()`` makes the table read-only and
lookups are a single dict access. No module scanning, no ambiguity when
two modules declare the same simple name.

Usage::

    types = TypeRegistry()

    @types.register
    class OrderPlaced: ...

    types.register(LegacyEvent, name="legacy.event")
    types.freeze()
    types.get("OrderPlaced")  # OrderPlaced
"""

from collections.abc import Callable, Iterator
from typing import TypeVar, overload

from ghostlyzer.errors import ConfigurationError
from ghostlyzer.utils.types import full_name

T = TypeVar("T", bound=type)


class TypeRegistry:
    """Name -> class table. Mutable until ``freeze()``."""

    __slots__ = ("_frozen", "_types")

    def __init__(self) -> None:
        self._types: dict[str, type] = {}
        self._frozen = False

    @overload
    def register(self, cls: T, *, name: str | None = None) -> T: ...

    @overload
    def register(self, cls: None = None, *, name: str | None = None) -> Callable[[T], T]: ...

    def register(self, cls: T | None = None, *, name: str | None = None) -> T | Callable[[T], T]:
        """Register *cls* under *name* (default: its simple name).

        Works as a plain call, a bare decorator, or ``@register(name=...)``.
        Raises ``ConfigurationError`` after ``freeze()`` or when the name
        is already taken by a different class.
        """

        def decorator(target: T) -> T:
            self._add(target.__name__ if name is None else name, target)
            return target

        if cls is None:
            return decorator
        return decorator(cls)

    def _add(self, name: str, cls: type) -> None:
        if not name:
            msg = f"Cannot register {full_name(cls)} under an empty name."
            raise ConfigurationError(msg)
        if self._frozen:
            msg = f"Cannot register {name!r}: registry is frozen."
            raise ConfigurationError(msg)
        existing = self._types.get(name)
        if existing is not None and existing is not cls:
            msg = (
                f"Type name {name!r} already registered to {full_name(existing)}; "
                f"cannot register {full_name(cls)}"
            )
            raise ConfigurationError(msg)
        self._types[name] = cls

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> type | None:
        """Look up a class by registered name. Returns ``None`` if not found."""
        return self._types.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)
