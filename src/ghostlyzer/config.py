"""Core configuration.

CoreConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CoreConfig:
    """Core utility configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = CoreConfig(lowercase_urls=True, entry_module="myapp.main")
    """

    # Type lookup
    entry_module: str = "__main__"  # Module whose imports define the "referenced" set
    include_nested_types: bool = True  # Also search classes declared inside classes

    # Outbound URLs
    lowercase_urls: bool = False
    append_trailing_slash: bool = False
