"""Find classes by name among the modules loaded into the process.

Two queries, both first-match-wins over ``sys.modules`` order:

- ``find_in_referenced_modules(name)``: only modules the entry module
  imports directly (its ``import`` statements, not theirs).
- ``find_in_all_loaded_modules(name)``: every loaded module.

A class matches when its full name (``module.QualName``) or its simple
name equals *name*. When several modules declare the same simple name,
which one wins depends on import order; use ``TypeRegistry`` when that
matters.

Both scans are linear in the number of loaded classes. Call them during
startup or configuration, not per request.
"""

import ast
import importlib.util
import inspect
import logging
import sys
from collections.abc import Callable, Iterator, Mapping
from types import FunctionType, ModuleType
from typing import Any, TypeVar

from ghostlyzer.config import CoreConfig
from ghostlyzer.errors import TypeLookupError

logger = logging.getLogger("ghostlyzer.types")

T = TypeVar("T", bound=type)

ModuleSource = Callable[[], Mapping[str, ModuleType | None]]


def _loaded_modules() -> Mapping[str, ModuleType | None]:
    return sys.modules


def _is_class(obj: object) -> bool:
    # type(obj) never consults a proxy's __class__ property
    return issubclass(type(obj), type)


def full_name(cls: type) -> str:
    """``module.QualName`` for *cls*."""
    return f"{cls.__module__}.{cls.__qualname__}"


def iter_declared_types(module: ModuleType, *, nested: bool = True) -> Iterator[type]:
    """Yield classes declared in *module*, in definition order.

    Classes imported from elsewhere are skipped. With *nested*, classes
    declared in a class body follow their enclosing class.
    """
    name = module.__name__
    for obj in list(vars(module).values()):
        if _is_class(obj) and obj.__module__ == name and "." not in obj.__qualname__:
            yield obj
            if nested:
                yield from _iter_nested(obj)


def _iter_nested(cls: type) -> Iterator[type]:
    prefix = cls.__qualname__ + "."
    for obj in list(vars(cls).values()):
        if (
            _is_class(obj)
            and obj.__module__ == cls.__module__
            and obj.__qualname__.startswith(prefix)
            and "." not in obj.__qualname__[len(prefix):]
        ):
            yield obj
            yield from _iter_nested(obj)


def referenced_module_names(module: ModuleType) -> frozenset[str]:
    """Names of the modules *module* imports directly.

    Read from the module's source. Without readable source (missing, or
    edited into invalid syntax since it was loaded), fall back to the
    modules bound in its globals and the defining modules of the classes
    and functions it imported.
    """
    try:
        source = inspect.getsource(module)
        tree = ast.parse(source)
    except (OSError, TypeError, SyntaxError, ValueError):
        logger.debug("No usable source for %r; using its globals", module.__name__)
        return _names_from_globals(module)
    return _names_from_tree(tree, module)


def _names_from_tree(tree: ast.AST, module: ModuleType) -> frozenset[str]:
    package = getattr(module, "__package__", None) or ""
    names: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            base = node.module or ""
            if node.level:
                try:
                    base = importlib.util.resolve_name("." * node.level + base, package)
                except ImportError:
                    continue
            if not base:
                continue
            names.add(base)
            # ``from pkg import sub`` may name a submodule
            names.update(f"{base}.{alias.name}" for alias in node.names if alias.name != "*")
    return frozenset(names)


def _names_from_globals(module: ModuleType) -> frozenset[str]:
    names: set[str] = set()
    for obj in list(vars(module).values()):
        if issubclass(type(obj), ModuleType):
            if obj is not module:
                names.add(obj.__name__)
        elif _is_class(obj) or issubclass(type(obj), FunctionType):
            origin = getattr(obj, "__module__", None)
            if origin and origin != module.__name__:
                names.add(origin)
    return frozenset(names)


def _matches(cls: type, name: str) -> bool:
    return cls.__name__ == name or full_name(cls) == name


class TypeProvider:
    """Class lookup over the loaded-module catalog.

    Read-only: the catalog is queried, never modified.

    Usage::

        provider = TypeProvider()
        handler_cls = provider.find_in_referenced_modules("OrderHandler")
    """

    __slots__ = ("_config", "_modules")

    def __init__(
        self,
        config: CoreConfig | None = None,
        modules: ModuleSource | None = None,
    ) -> None:
        self._config = config or CoreConfig()
        self._modules = modules or _loaded_modules

    def entry_module(self) -> ModuleType | None:
        """The configured entry module, if it was loaded from a file.

        ``None`` under interactive sessions, ``python -c``, and hosts that
        never set one.
        """
        module = self._snapshot().get(self._config.entry_module)
        if module is None or not getattr(module, "__file__", None):
            return None
        return module

    def find_in_referenced_modules(self, name: str) -> type | None:
        """First class named *name* in a module the entry module imports."""
        entry = self.entry_module()
        if entry is None:
            logger.debug("No entry module %r; cannot resolve %r", self._config.entry_module, name)
            return None

        referenced = referenced_module_names(entry)
        modules = [
            module
            for module_name, module in self._snapshot().items()
            if issubclass(type(module), ModuleType) and module_name in referenced
        ]
        return self._first_match(modules, name)

    def find_in_all_loaded_modules(self, name: str) -> type | None:
        """First class named *name* in any loaded module."""
        modules = [m for m in self._snapshot().values() if issubclass(type(m), ModuleType)]
        return self._first_match(modules, name)

    def _snapshot(self) -> dict[str, ModuleType | None]:
        try:
            # Copy: imports on other threads may grow sys.modules mid-scan.
            return dict(self._modules())
        except Exception as exc:
            msg = "Unable to enumerate loaded modules"
            raise TypeLookupError(msg) from exc

    def _first_match(self, modules: list[ModuleType], name: str) -> type | None:
        nested = self._config.include_nested_types
        for module in modules:
            for cls in iter_declared_types(module, nested=nested):
                if _matches(cls, name):
                    logger.debug("Resolved %r to %s", name, full_name(cls))
                    return cls
        logger.debug("Type %r not found in %d modules", name, len(modules))
        return None


_default_provider = TypeProvider()


def find_in_referenced_modules(name: str) -> type | None:
    """First class named *name* in a module imported by ``__main__``."""
    return _default_provider.find_in_referenced_modules(name)


def find_in_all_loaded_modules(name: str) -> type | None:
    """First class named *name* in any loaded module."""
    return _default_provider.find_in_all_loaded_modules(name)


# -- Record detection --


def record(cls: T) -> T:
    """Mark *cls* as a record (value-semantics type).

    Prefer this over the structural checks in ``is_record_type``::

        @record
        @dataclass(frozen=True)
        class Money:
            amount: int
            currency: str
    """
    cls.__ghostlyzer_record__ = True  # type: ignore[attr-defined]
    return cls


def is_record_type(cls: type) -> bool:
    """Whether *cls* is a record.

    An explicit ``@record`` marker decides first. Otherwise look for what
    the class machinery synthesizes for value types: a copy-with-changes
    method (``__replace__``, or a named tuple's ``_replace``) or a
    generated equality contract (a dataclass with ``eq=True``).
    """
    marker: Any = getattr(cls, "__ghostlyzer_record__", None)
    if marker is not None:
        return bool(marker)

    if "__replace__" in vars(cls):
        return True
    if issubclass(cls, tuple) and hasattr(cls, "_fields") and hasattr(cls, "_replace"):
        return True

    params = vars(cls).get("__dataclass_params__")
    return params is not None and bool(params.eq)
