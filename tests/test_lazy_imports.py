"""Tests for ghostlyzer.__init__ — lazy import registry covers all public names."""

import pytest

import ghostlyzer


@pytest.mark.parametrize("name", ghostlyzer.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(ghostlyzer, name)
    assert obj is not None, f"ghostlyzer.{name} resolved to None"


def test_all_names_in_lazy_registry() -> None:
    """Every name in __all__ has a corresponding entry in _LAZY_IMPORTS."""
    missing = set(ghostlyzer.__all__) - set(ghostlyzer._LAZY_IMPORTS)
    assert not missing, (
        f"Names in __all__ but not in _LAZY_IMPORTS: {sorted(missing)}. "
        f"Add them to _LAZY_IMPORTS in ghostlyzer/__init__.py."
    )


def test_lazy_registry_no_extras() -> None:
    """Every name in _LAZY_IMPORTS should be in __all__ (public API contract)."""
    extras = set(ghostlyzer._LAZY_IMPORTS) - set(ghostlyzer.__all__)
    assert not extras, f"Names in _LAZY_IMPORTS but not in __all__: {sorted(extras)}."


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        ghostlyzer.__getattr__("ThisDoesNotExist")
