"""Base utilities for F1 Fantasy team optimization.

This module contains shared functionality used across all optimization modules:
- Boundary normalization of pools, rosters and chips
- Keyed entity lookup with fail-fast errors
- Chip-dependent transfer and budget rules
- Penalty and DRS driver helpers
"""

import math
from typing import Any, Iterable, Optional, Tuple, Union

from pydantic import ValidationError

from f1_team_picker.config import OptimizationConfig, config
from ...common.exceptions import MalformedInputError
from ...models import (
    Chip,
    EntityDomain,
    EntityId,
    EntityKind,
    EntityPool,
    RosterDomain,
    build_entity_pool,
)


class OptimizationBaseMixin:
    """Mixin providing shared optimization utilities.

    Public methods of the composed service normalize their raw inputs with the
    ``_as_*`` helpers; everything below that boundary works on keyed pools and
    domain models only.
    """

    optimization_config: Optional[OptimizationConfig] = None

    @property
    def rules(self) -> OptimizationConfig:
        """Game rules in effect: the service override or the global config."""
        return self.optimization_config or config.optimization

    # Boundary normalization

    def _as_pool(
        self, raw_pool: Any, kind: EntityKind, roster: Optional[RosterDomain] = None
    ) -> EntityPool:
        """Build a keyed pool, keying rows by index when the roster lists indices."""
        by_position = roster is not None and roster.uses_positions
        return build_entity_pool(raw_pool, kind, by_position=by_position)

    def _as_roster(self, raw_roster: Any) -> RosterDomain:
        """Parse a roster and check it against the team shape in effect."""
        try:
            roster = (
                raw_roster
                if isinstance(raw_roster, RosterDomain)
                else RosterDomain.model_validate(raw_roster)
            )
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or None
            raise MalformedInputError(
                f"Invalid current roster: {error['msg']}", field=field
            ) from e

        try:
            roster.validate_size(
                self.rules.drivers_per_team, self.rules.constructors_per_team
            )
        except ValueError as e:
            raise MalformedInputError(f"Invalid current roster: {e}") from e
        return roster

    def _as_chip(self, chip: Optional[Union[str, Chip]]) -> Chip:
        return Chip.parse(chip)

    # Lookup

    def _lookup_entity(
        self, pool: EntityPool, entity_id: EntityId, kind: EntityKind
    ) -> EntityDomain:
        """Get an entity from its pool, failing on unknown identifiers."""
        try:
            return pool[entity_id]
        except KeyError:
            raise MalformedInputError.missing_entity(entity_id, kind.value) from None

    def _validate_roster_members(
        self, roster: RosterDomain, drivers: EntityPool, constructors: EntityPool
    ) -> None:
        """Ensure every roster member exists in its pool."""
        for driver_id in roster.drivers:
            self._lookup_entity(drivers, driver_id, EntityKind.DRIVER)
        for constructor_id in roster.constructors:
            self._lookup_entity(constructors, constructor_id, EntityKind.CONSTRUCTOR)

    def _sum_price_change(
        self, pool: EntityPool, entity_ids: Iterable[EntityId], kind: EntityKind
    ) -> float:
        return sum(
            self._lookup_entity(pool, entity_id, kind).expected_price_change
            for entity_id in entity_ids
        )

    # Game rules

    def resolve_transfer_rules(
        self, roster: RosterDomain, chip: Chip, overall_budget: float
    ) -> Tuple[int, float]:
        """Get (free_transfers, budget) for the chip in play.

        Args:
            roster: Current roster
            chip: Chip selected for this transfer window
            overall_budget: Budget derived from the current roster

        Returns:
            Tuple of free transfers and the spending limit
        """
        if not chip.is_active:
            return roster.free_transfers, overall_budget
        budget = math.inf if chip is Chip.LIMITLESS else overall_budget
        return self.rules.chip_free_transfers, budget

    def calculate_penalty(self, transfers_needed: int, free_transfers: int) -> float:
        """Points deducted for transfers beyond the free allowance."""
        return max(0, transfers_needed - free_transfers) * self.rules.transfer_penalty

    def _select_drs_driver(self, combo: Tuple[EntityDomain, ...]) -> EntityDomain:
        """Highest projected scorer; the first one wins ties."""
        drs_driver = combo[0]
        for driver in combo[1:]:
            if driver.expected_points > drs_driver.expected_points:
                drs_driver = driver
        return drs_driver
