"""Error taxonomy for the team search engine.

Every fault detected by the engines surfaces immediately to the caller. The
computation is pure and deterministic, so nothing here is retried or recovered.
"""

from typing import Any, Dict, Optional


class TeamPickerError(Exception):
    """Base class for all engine faults."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MalformedInputError(TeamPickerError):
    """A roster references an unknown identifier, or an entity lacks a numeric field."""

    def __init__(
        self,
        message: str,
        entity_id: Any = None,
        field: Optional[str] = None,
        kind: Optional[str] = None,
    ):
        details = {"entity_id": entity_id, "field": field, "kind": kind}
        super().__init__(
            message, {key: value for key, value in details.items() if value is not None}
        )
        self.entity_id = entity_id
        self.field = field
        self.kind = kind

    @classmethod
    def missing_entity(cls, entity_id: Any, kind: str) -> "MalformedInputError":
        """Create an error for an identifier absent from its pool."""
        return cls(
            f"Unknown {kind} '{entity_id}': not present in the {kind} pool",
            entity_id=entity_id,
            kind=kind,
        )


class EmptyPoolError(TeamPickerError):
    """A pool is too small to fill a single team."""

    def __init__(self, kind: str, available: int, required: int):
        super().__init__(
            f"Need at least {required} {kind}s to build a team, got {available}",
            {"kind": kind, "available": available, "required": required},
        )
        self.kind = kind
        self.available = available
        self.required = required
