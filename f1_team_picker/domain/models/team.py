"""Budget and scored team domain models."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .entity import EntityId


class TeamBudget(BaseModel):
    """Spend and available budget derived from a roster."""

    model_config = ConfigDict(frozen=True)

    total_price: float = Field(..., description="Price of all team members")
    cost_cap_remaining: float = Field(..., description="Unspent budget")
    overall_budget: float = Field(..., description="total_price + cost_cap_remaining")


class ScoredTeam(BaseModel):
    """A budget-feasible candidate team ranked by projected points."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(..., ge=1, description="1-based rank in the result list")
    drivers: List[EntityId] = Field(..., description="Drivers in pool order")
    constructors: List[EntityId] = Field(..., description="Constructors in pool order")
    drs_driver: EntityId = Field(..., description="Driver with the DRS boost")
    total_price: float = Field(..., ge=0.0, description="Price of all members")
    transfers_needed: int = Field(
        ..., ge=0, description="Members not already in the current roster"
    )
    penalty: float = Field(..., ge=0.0, description="Points deducted for extra transfers")
    projected_points: float = Field(..., description="Points including DRS bonus, net of penalty")
    expected_price_change: float = Field(..., description="Projected team value change")

    @property
    def members(self) -> List[EntityId]:
        """All drivers followed by all constructors."""
        return [*self.drivers, *self.constructors]
