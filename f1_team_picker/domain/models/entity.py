"""Driver and constructor domain model with pool construction."""

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from f1_team_picker.config import config
from ..common.exceptions import MalformedInputError

EntityId = Union[str, int]


class EntityKind(str, Enum):
    """Kinds of priced entities in the fantasy game."""

    DRIVER = "driver"
    CONSTRUCTOR = "constructor"


class EntityDomain(BaseModel):
    """
    A priced, scored driver or constructor.

    Scores are external point projections; the model never derives them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    entity_id: EntityId = Field(..., description="Identifier, unique within its kind")
    price: float = Field(..., ge=0.0, description="Current price in millions")
    expected_points: float = Field(
        ..., alias="expectedPoints", description="Projected points (can be negative)"
    )
    expected_price_change: float = Field(
        ..., alias="expectedPriceChange", description="Projected price change"
    )


EntityPool = Dict[EntityId, EntityDomain]


def _identifier_of(record: Any, index: int) -> EntityId:
    """Resolve the pool key for a sequence record: its identifier field or its position."""
    if isinstance(record, EntityDomain):
        return record.entity_id
    if isinstance(record, Mapping):
        for field in config.data_contracts.identifier_fields:
            if record.get(field) is not None:
                return record[field]
    return index


def _to_entity(entity_id: EntityId, record: Any, kind: EntityKind) -> EntityDomain:
    if isinstance(record, EntityDomain):
        if record.entity_id == entity_id:
            return record
        return record.model_copy(update={"entity_id": entity_id})

    if not isinstance(record, Mapping):
        raise MalformedInputError(
            f"{kind.value.title()} '{entity_id}' is not a record: {record!r}",
            entity_id=entity_id,
            kind=kind.value,
        )

    try:
        return EntityDomain.model_validate({**record, "entity_id": entity_id})
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise MalformedInputError(
            f"{kind.value.title()} '{entity_id}' has invalid field '{field}': {error['msg']}",
            entity_id=entity_id,
            field=field,
            kind=kind.value,
        ) from e


def build_entity_pool(
    raw_pool: Any, kind: EntityKind, by_position: bool = False
) -> EntityPool:
    """
    Normalize a raw pool into a keyed pool in enumeration order.

    Accepts a mapping of identifier -> record, or a sequence of records. Sequence
    records are keyed by their identifier field when they carry one, otherwise by
    their position, so rosters over positional pools reference integer indices.
    With ``by_position`` every sequence record is keyed by its position, for
    rosters that list indices into rows which also carry a code.

    Args:
        raw_pool: Mapping or sequence of records (dicts or EntityDomain)
        kind: Entity kind, used in error messages
        by_position: Key sequence records by index even when they carry a code

    Returns:
        Dictionary of identifier -> EntityDomain

    Raises:
        MalformedInputError: If a record is missing a numeric field or an
            identifier appears twice
    """
    if isinstance(raw_pool, Mapping):
        return {
            entity_id: _to_entity(entity_id, record, kind)
            for entity_id, record in raw_pool.items()
        }

    if isinstance(raw_pool, Sequence) and not isinstance(raw_pool, (str, bytes)):
        pool: EntityPool = {}
        for index, record in enumerate(raw_pool):
            entity_id = index if by_position else _identifier_of(record, index)
            if entity_id in pool:
                raise MalformedInputError(
                    f"Duplicate {kind.value} identifier '{entity_id}'",
                    entity_id=entity_id,
                    kind=kind.value,
                )
            pool[entity_id] = _to_entity(entity_id, record, kind)
        return pool

    raise MalformedInputError(
        f"{kind.value.title()} pool must be a mapping or a sequence, "
        f"got {type(raw_pool).__name__}",
        kind=kind.value,
    )
