"""Transfer plan domain model."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .chip import Chip
from .entity import EntityId


class TransferPlan(BaseModel):
    """Concrete actions that turn the current roster into a target team."""

    model_config = ConfigDict(frozen=True)

    drivers_to_add: List[EntityId] = Field(default_factory=list)
    drivers_to_remove: List[EntityId] = Field(default_factory=list)
    constructors_to_add: List[EntityId] = Field(default_factory=list)
    constructors_to_remove: List[EntityId] = Field(default_factory=list)
    new_drs: Optional[EntityId] = Field(
        None, description="New DRS driver, only when it changes"
    )
    chip_to_activate: Optional[Chip] = Field(
        None, description="Chip that must be played to make the transfers"
    )

    @property
    def num_transfers(self) -> int:
        """Number of members brought in."""
        return len(self.drivers_to_add) + len(self.constructors_to_add)

    @property
    def has_changes(self) -> bool:
        """Whether any action is needed at all."""
        return bool(
            self.num_transfers
            or self.drivers_to_remove
            or self.constructors_to_remove
            or self.new_drs is not None
            or self.chip_to_activate is not None
        )
