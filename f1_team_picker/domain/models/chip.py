"""Chip (special action) domain model."""

from enum import Enum
from typing import Optional, Union


class Chip(str, Enum):
    """One-time overrides that relax transfer or budget constraints.

    At most one chip is active per computation.
    """

    NONE = "none"
    WILDCARD = "wildcard"  # free transfers forced, budget unchanged
    LIMITLESS = "limitless"  # free transfers forced, budget unconstrained

    @classmethod
    def parse(cls, value: Optional[Union[str, "Chip"]]) -> "Chip":
        """Resolve a chip from a command argument; None means no chip."""
        if value is None:
            return cls.NONE
        if isinstance(value, Chip):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(chip.value for chip in cls)
            raise ValueError(f"Unknown chip '{value}'. Expected one of: {valid}") from None

    @property
    def is_active(self) -> bool:
        return self is not Chip.NONE
