"""Domain value objects for docshare.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
from dataclasses import dataclass

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-f]{3}|[0-9a-f]{6})$")


@dataclass(frozen=True)
class HexColor:
    """Value object for a tag color.

    Must be a hex triplet '#RRGGBB' or its shorthand '#RGB'. Stored lowercase.
    """

    value: str

    def __post_init__(self) -> None:
        """Normalize to lowercase and validate format.

        Raises:
            ValueError: If the value is not a hex color.
        """
        object.__setattr__(self, "value", (self.value or "").strip().lower())
        if not _HEX_COLOR_RE.match(self.value):
            raise ValueError("Color must be a hex triplet such as '#1a2b3c' or '#abc'")
