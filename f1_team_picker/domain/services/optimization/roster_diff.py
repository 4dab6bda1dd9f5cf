"""Transfer planning between the current roster and a chosen team."""

from typing import Any, List, Optional, Sequence

from loguru import logger

from .budget_calculator import BudgetCalculatorMixin
from ...models import (
    Chip,
    EntityId,
    EntityKind,
    EntityPool,
    RosterDomain,
    ScoredTeam,
    TransferPlan,
)


def _missing_from(members: Sequence[EntityId], other: Sequence[EntityId]) -> List[EntityId]:
    """Members absent from other, in their original order."""
    other_set = set(other)
    return [member for member in members if member not in other_set]


class RosterDiffMixin(BudgetCalculatorMixin):
    """Mixin computing the concrete actions to reach a target team."""

    def calculate_transfer_plan(
        self,
        current_roster: Any,
        target_team: ScoredTeam,
        drivers: Any,
        constructors: Any,
        chip: Any = Chip.NONE,
    ) -> TransferPlan:
        """Work out the adds, removes, DRS change and chip needed for a target team.

        Args:
            current_roster: Current roster (RosterDomain or extracted team dict)
            target_team: Team chosen from find_best_teams
            drivers: Driver pool, needed to price the current roster
            constructors: Constructor pool, needed to price the current roster
            chip: Chip selected for the search that produced the target

        Returns:
            TransferPlan; neither roster is modified

        Raises:
            MalformedInputError: If the current roster references unknown entities
        """
        roster = self._as_roster(current_roster)
        return self._transfer_plan(
            roster,
            target_team,
            self._as_pool(drivers, EntityKind.DRIVER, roster),
            self._as_pool(constructors, EntityKind.CONSTRUCTOR, roster),
            self._as_chip(chip),
        )

    def _transfer_plan(
        self,
        roster: RosterDomain,
        target_team: ScoredTeam,
        drivers: EntityPool,
        constructors: EntityPool,
        chip: Chip,
    ) -> TransferPlan:
        self._validate_roster_members(roster, drivers, constructors)
        new_drs = target_team.drs_driver if target_team.drs_driver != roster.drs_boost else None

        chip_to_activate: Optional[Chip] = None
        if chip is Chip.WILDCARD:
            if target_team.transfers_needed > roster.free_transfers:
                chip_to_activate = Chip.WILDCARD
        elif chip is Chip.LIMITLESS:
            budget = self._team_budget(roster, drivers, constructors)
            if target_team.total_price > budget.overall_budget:
                chip_to_activate = Chip.LIMITLESS

        plan = TransferPlan(
            drivers_to_add=_missing_from(target_team.drivers, roster.drivers),
            drivers_to_remove=_missing_from(roster.drivers, target_team.drivers),
            constructors_to_add=_missing_from(target_team.constructors, roster.constructors),
            constructors_to_remove=_missing_from(roster.constructors, target_team.constructors),
            new_drs=new_drs,
            chip_to_activate=chip_to_activate,
        )
        logger.debug(
            f"🔄 Plan for team #{target_team.row}: {plan.num_transfers} transfers, "
            f"DRS {'-> ' + str(new_drs) if new_drs is not None else 'unchanged'}, "
            f"chip {chip_to_activate.value if chip_to_activate else 'not needed'}"
        )
        return plan
