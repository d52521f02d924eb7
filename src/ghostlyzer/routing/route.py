"""Outbound route templates: ``/users/{id:int}/{tab:slugify}``."""

import re
from dataclasses import dataclass

# {name} or {name:constraint}
_PLACEHOLDER = re.compile(r"^\{(?P<name>[^{}:]+)(?::(?P<constraint>[^{}]+))?\}$")


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One ``/``-separated piece of a template.

    Literal segments carry ``param_name=None``; placeholders carry the
    value's name and its constraint (``str`` when none is given).
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


@dataclass(frozen=True, slots=True)
class RouteTemplate:
    """A named route path, parsed once at registration time."""

    name: str
    path: str
    segments: tuple[PathSegment, ...]

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(s.param_name for s in self.segments if s.param_name)


def parse_path(path: str) -> list[PathSegment]:
    """Split a template into segments, dropping empty pieces.

    ``"/{action:slugify}"`` yields one placeholder with
    ``param_type="slugify"``; ``"/users"`` yields one literal.
    """
    segments: list[PathSegment] = []
    for part in filter(None, path.split("/")):
        m = _PLACEHOLDER.match(part)
        if m is None:
            segments.append(PathSegment(value=part))
        else:
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=m["name"],
                    param_type=m["constraint"] or "str",
                )
            )
    return segments
