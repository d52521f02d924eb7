"""Path parameter converters.

Built-in converters for route path segments like ``{id:int}``. Outbound,
a converter's pattern validates the rendered value before it is encoded.
"""

import re

# (regex_pattern, python_type) for each supported converter
CONVERTERS: dict[str, tuple[str, type]] = {
    "str": (r"[^/]+", str),
    "int": (r"-?\d+", int),
    "float": (r"-?\d+(?:\.\d+)?", float),
    "path": (r".+", str),
}

_COMPILED: dict[str, re.Pattern[str]] = {
    name: re.compile(f"^{pattern}$") for name, (pattern, _) in CONVERTERS.items()
}


def format_param(value: object, param_type: str) -> str:
    """Render *value* for a converter-typed segment.

    Raises ``ValueError`` if the rendered value does not fit the converter.
    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    pattern = _COMPILED[param_type]
    _, target_type = CONVERTERS[param_type]
    if isinstance(value, bool) or (target_type is not str and not isinstance(value, (int, float, str))):
        msg = f"{value!r} is not a valid {param_type} value"
        raise ValueError(msg)
    text = str(value)
    if not pattern.match(text):
        msg = f"{text!r} does not match the {param_type} converter"
        raise ValueError(msg)
    return text
