"""Roster domain model for the user's current fantasy team."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .entity import EntityId


class RosterDomain(BaseModel):
    """
    A fantasy team: drivers, constructors, DRS boost and transfer state.

    Member lists have set semantics; their order is kept for presentation.
    Accepts the camelCase keys of the extracted team payload. Team size depends
    on the game rules in effect, so it is checked with ``validate_size``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    drivers: List[EntityId] = Field(..., description="Driver identifiers")
    constructors: List[EntityId] = Field(..., description="Constructor identifiers")
    drs_boost: EntityId = Field(
        ..., alias="drsBoost", description="Driver whose points count twice"
    )
    free_transfers: int = Field(
        ..., alias="freeTransfers", ge=0, description="Transfers without penalty"
    )
    cost_cap_remaining: float = Field(
        ..., alias="costCapRemaining", description="Unspent budget in millions"
    )

    @model_validator(mode="after")
    def validate_members(self):
        """Enforce unique members and a DRS driver from the team."""
        if len(set(self.drivers)) != len(self.drivers):
            raise ValueError("Roster drivers must be unique")
        if len(set(self.constructors)) != len(self.constructors):
            raise ValueError("Roster constructors must be unique")
        if self.drs_boost not in self.drivers:
            raise ValueError(f"DRS boost driver '{self.drs_boost}' is not in the roster")
        return self

    def validate_size(self, drivers_needed: int, constructors_needed: int) -> None:
        """Raise ValueError unless the roster has exactly the given team shape."""
        if len(self.drivers) != drivers_needed:
            raise ValueError(
                f"Roster must have exactly {drivers_needed} drivers, got {len(self.drivers)}"
            )
        if len(self.constructors) != constructors_needed:
            raise ValueError(
                f"Roster must have exactly {constructors_needed} constructors, "
                f"got {len(self.constructors)}"
            )

    @property
    def uses_positions(self) -> bool:
        """Whether members reference pool rows by index rather than by code."""
        members = [*self.drivers, *self.constructors]
        return all(isinstance(m, int) and not isinstance(m, bool) for m in members)
