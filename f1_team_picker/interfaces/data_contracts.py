"""
Interface-layer data contract validation using Pydantic models.

Validates the payload assembled from the extracted drivers, constructors and
current team screenshots before it reaches the optimization service, using
fail-fast principles.
"""

from collections.abc import Mapping, Sized
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from f1_team_picker.config import config
from f1_team_picker.domain.common.exceptions import MalformedInputError
from f1_team_picker.domain.models import (
    EntityKind,
    EntityPool,
    RosterDomain,
    build_entity_pool,
)


class DataContractError(Exception):
    """Raised when interface data contracts are violated."""

    pass


class TeamData(BaseModel):
    """Validated inputs for one optimization run."""

    model_config = ConfigDict(frozen=True)

    drivers: EntityPool
    constructors: EntityPool
    current_team: RosterDomain


def _check_count(raw_pool: Any, expected: int, label: str) -> None:
    if not isinstance(raw_pool, Sized) or isinstance(raw_pool, (str, bytes)):
        raise DataContractError(f"Expected {expected} {label}, found none")
    if len(raw_pool) != expected:
        raise DataContractError(f"Expected {expected} {label}, found {len(raw_pool)}")


def _build_pool(raw_pool: Any, kind: EntityKind, by_position: bool) -> EntityPool:
    try:
        return build_entity_pool(raw_pool, kind, by_position=by_position)
    except MalformedInputError as e:
        raise DataContractError(e.message) from e


def validate_team_data(raw: Any) -> TeamData:
    """
    Validate an extracted payload of the form
    ``{"Drivers": ..., "Constructors": ..., "CurrentTeam": {...}}``.

    Args:
        raw: Payload assembled from the extraction service

    Returns:
        TeamData with keyed pools and the parsed current team

    Raises:
        DataContractError: If a table has the wrong size, a record is
            incomplete, or the current team is missing or inconsistent
    """
    if not isinstance(raw, Mapping):
        raise DataContractError(f"Payload must be an object, got {type(raw).__name__}")

    contracts = config.data_contracts
    _check_count(raw.get("Drivers"), contracts.expected_driver_count, "drivers")
    _check_count(
        raw.get("Constructors"), contracts.expected_constructor_count, "constructors"
    )

    current_team = raw.get("CurrentTeam")
    if not isinstance(current_team, Mapping):
        raise DataContractError("CurrentTeam is missing")
    try:
        roster = RosterDomain.model_validate(current_team)
        roster.validate_size(
            config.optimization.drivers_per_team,
            config.optimization.constructors_per_team,
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'team'}: {error['msg']}"
            for error in e.errors()
        )
        raise DataContractError(f"Invalid CurrentTeam: {problems}") from e
    except ValueError as e:
        raise DataContractError(f"Invalid CurrentTeam: {e}") from e

    drivers = _build_pool(raw["Drivers"], EntityKind.DRIVER, roster.uses_positions)
    constructors = _build_pool(
        raw["Constructors"], EntityKind.CONSTRUCTOR, roster.uses_positions
    )

    unknown = [d for d in roster.drivers if d not in drivers] + [
        c for c in roster.constructors if c not in constructors
    ]
    if unknown:
        raise DataContractError(
            f"CurrentTeam references unknown entries: {', '.join(map(str, unknown))}"
        )

    return TeamData(drivers=drivers, constructors=constructors, current_team=roster)
