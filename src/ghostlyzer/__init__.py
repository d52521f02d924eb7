"""Ghostlyzer — core utilities for the ghostlyzer web stack.

Leaf helpers consumed by routing, serialization and plugin code:

- ``NoSynchronizationContextScope``: clear the ambient synchronization
  context for the duration of a blocking wait.
- ``SlugifyParameterTransformer``: kebab-case route parameters in
  generated URLs.
- ``TypeProvider``: find a class by name among loaded modules.

Basic usage::

    from ghostlyzer import NoSynchronizationContextScope, slugify

    with NoSynchronizationContextScope.enter():
        ...

    slugify("UserProfile")  # "user-profile"
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "CoreConfig",
    "GhostlyzerError",
    "LoopSynchronizationContext",
    "NoSynchronizationContextScope",
    "SlugifyParameterTransformer",
    "SynchronizationContext",
    "TypeLookupError",
    "TypeProvider",
    "TypeRegistry",
    "UrlBuilder",
    "UrlGenerationError",
    "find_in_all_loaded_modules",
    "find_in_referenced_modules",
    "is_record_type",
    "record",
    "run_blocking",
    "slugify",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "ghostlyzer.errors",
    "CoreConfig": "ghostlyzer.config",
    "GhostlyzerError": "ghostlyzer.errors",
    "LoopSynchronizationContext": "ghostlyzer.utils.sync_context",
    "NoSynchronizationContextScope": "ghostlyzer.utils.sync_context",
    "SlugifyParameterTransformer": "ghostlyzer.routing.transformer",
    "SynchronizationContext": "ghostlyzer.utils.sync_context",
    "TypeLookupError": "ghostlyzer.errors",
    "TypeProvider": "ghostlyzer.utils.types",
    "TypeRegistry": "ghostlyzer.utils.registry",
    "UrlBuilder": "ghostlyzer.routing.urls",
    "UrlGenerationError": "ghostlyzer.errors",
    "find_in_all_loaded_modules": "ghostlyzer.utils.types",
    "find_in_referenced_modules": "ghostlyzer.utils.types",
    "is_record_type": "ghostlyzer.utils.types",
    "record": "ghostlyzer.utils.types",
    "run_blocking": "ghostlyzer.utils.sync_context",
    "slugify": "ghostlyzer.routing.transformer",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import ghostlyzer`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
