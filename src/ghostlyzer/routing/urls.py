"""Outbound URL generation for named routes.

Templates are registered during setup and rendered by name::

    urls = UrlBuilder()
    urls.add("profile", "/{controller:slugify}/{action:slugify}/{id:int}")
    urls.url_for("profile", controller="UserProfile", action="ShowAll", id=7)
    # "/user-profile/show-all/7"

A segment constraint is either a converter from ``CONVERTERS`` (the
value is validated) or a name in the transformer map (the value is
rewritten by ``transform_outbound``).
"""

import logging
from collections.abc import Mapping
from urllib.parse import quote, urlencode

from ghostlyzer.config import CoreConfig
from ghostlyzer.errors import ConfigurationError, UrlGenerationError
from ghostlyzer.routing.params import CONVERTERS, format_param
from ghostlyzer.routing.route import RouteTemplate, parse_path
from ghostlyzer.routing.transformer import (
    OutboundParameterTransformer,
    SlugifyParameterTransformer,
)

logger = logging.getLogger("ghostlyzer.routing")


def default_transformers() -> dict[str, OutboundParameterTransformer]:
    """The constraint map used when none is given."""
    return {"slugify": SlugifyParameterTransformer()}


class UrlBuilder:
    """Named route templates rendered into outbound paths."""

    __slots__ = ("_config", "_routes", "_transformers")

    def __init__(
        self,
        config: CoreConfig | None = None,
        transformers: Mapping[str, OutboundParameterTransformer] | None = None,
    ) -> None:
        self._config = config or CoreConfig()
        self._transformers: dict[str, OutboundParameterTransformer] = (
            dict(transformers) if transformers is not None else default_transformers()
        )
        self._routes: dict[str, RouteTemplate] = {}

        clash = set(self._transformers) & set(CONVERTERS)
        if clash:
            msg = f"Transformer names shadow built-in converters: {sorted(clash)}"
            raise ConfigurationError(msg)

    def add(self, name: str, path: str) -> RouteTemplate:
        """Register a named route template.

        Raises ``ConfigurationError`` for a duplicate name or an unknown
        segment constraint, so mistakes surface at startup.
        """
        if name in self._routes:
            msg = f"Duplicate route name: {name!r}"
            raise ConfigurationError(msg)

        segments = tuple(parse_path(path))
        for seg in segments:
            if not seg.is_param:
                continue
            if seg.param_type not in CONVERTERS and seg.param_type not in self._transformers:
                msg = (
                    f"Route {name!r} uses unknown constraint {seg.param_type!r} "
                    f"in segment {seg.value!r}"
                )
                raise ConfigurationError(msg)

        template = RouteTemplate(name=name, path=path, segments=segments)
        self._routes[name] = template
        return template

    def url_for(self, name: str, /, **values: object) -> str:
        """Build the path for route *name* from *values*.

        Values not consumed by the template are appended as a query string.
        Raises ``UrlGenerationError`` for an unknown route, a missing value,
        or a value its converter rejects.
        """
        template = self._routes.get(name)
        if template is None:
            raise UrlGenerationError(name, "no route registered under this name")

        remaining = dict(values)
        parts: list[str] = []
        for seg in template.segments:
            if not seg.is_param:
                parts.append(seg.value)
                continue

            param = seg.param_name or ""
            if param not in remaining or remaining[param] is None:
                raise UrlGenerationError(name, f"missing value for {param!r}")
            parts.append(self._render(name, seg.param_type, remaining.pop(param)))

        path = "/" + "/".join(parts)
        if self._config.lowercase_urls:
            path = path.lower()
        if self._config.append_trailing_slash and not path.endswith("/"):
            path += "/"

        query = {k: v for k, v in remaining.items() if v is not None}
        if query:
            path = f"{path}?{urlencode(query, doseq=True)}"

        logger.debug("Generated %r for route %r", path, name)
        return path

    def _render(self, route: str, param_type: str, value: object) -> str:
        transformer = self._transformers.get(param_type)
        if transformer is not None:
            text = transformer.transform_outbound(value)
            if not text:
                raise UrlGenerationError(route, f"{param_type} produced no value for {value!r}")
            return quote(text, safe="")

        try:
            text = format_param(value, param_type)
        except ValueError as exc:
            raise UrlGenerationError(route, str(exc)) from exc
        return quote(text, safe="/" if param_type == "path" else "")

    @property
    def routes(self) -> list[RouteTemplate]:
        """Return all registered templates in registration order."""
        return list(self._routes.values())

    def __contains__(self, name: str) -> bool:
        return name in self._routes

    def __len__(self) -> int:
        return len(self._routes)
