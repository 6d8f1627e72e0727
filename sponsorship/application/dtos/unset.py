"""Explicit "not specified" marker for partial records.

Fields holding UNSET are left out of INSERT columns, UPDATE assignments and
WHERE predicates. None is a real value (NULL), as are 0 and "".
"""

from typing import Final


class Unset:
    """Type of the UNSET singleton."""

    _instance: "Unset | None" = None

    def __new__(cls) -> "Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = Unset()
