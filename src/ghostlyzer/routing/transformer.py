"""Outbound parameter transformers.

A transformer rewrites a route value on its way into a generated URL.
``SlugifyParameterTransformer`` turns ``UserProfile`` into ``user-profile``.
"""

import re
from typing import Protocol, runtime_checkable

_BOUNDARY = re.compile(r"([a-z])([A-Z])")


@runtime_checkable
class OutboundParameterTransformer(Protocol):
    """Rewrites a route value for an outbound URL.

    Returns ``None`` when there is no value to render.
    """

    def transform_outbound(self, value: object | None) -> str | None: ...


def slugify(value: object | None) -> str | None:
    """Convert camelCase / PascalCase to kebab-case.

    A hyphen goes between every lowercase letter and the uppercase letter
    right after it, then the whole string is lowercased. Runs of capitals
    and digits never get a hyphen::

        slugify("UserId")      # "user-id"
        slugify("HTTPServer")  # "httpserver"
        slugify("page2Title")  # "page2title"
        slugify(None)          # None
    """
    if value is None:
        return None
    return _BOUNDARY.sub(r"\1-\2", str(value)).lower()


class SlugifyParameterTransformer:
    """Kebab-cases route values in generated URLs.

    Registered under the ``slugify`` constraint by default, so a template
    like ``/{controller:slugify}/{action:slugify}`` renders
    ``controller="UserProfile"`` as ``/user-profile/...``.
    """

    __slots__ = ()

    def transform_outbound(self, value: object | None) -> str | None:
        return slugify(value)
