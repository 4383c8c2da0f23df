"""Domain value objects (immutable, self-validating)."""

from docshare.domain.value_objects.core import HexColor

__all__ = [
    "HexColor",
]
