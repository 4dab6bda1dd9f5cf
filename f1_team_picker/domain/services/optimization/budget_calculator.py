"""Budget calculation for F1 Fantasy rosters."""

from typing import Any

from loguru import logger

from .optimization_base import OptimizationBaseMixin
from ...models import EntityKind, EntityPool, RosterDomain, TeamBudget


class BudgetCalculatorMixin(OptimizationBaseMixin):
    """Mixin deriving total spend and available budget for a roster."""

    def calculate_team_budget(
        self, roster: Any, drivers: Any, constructors: Any
    ) -> TeamBudget:
        """Calculate the price of a roster and the budget it gives access to.

        Args:
            roster: Current roster (RosterDomain or extracted team dict)
            drivers: Driver pool (mapping or sequence)
            constructors: Constructor pool (mapping or sequence)

        Returns:
            TeamBudget with total_price, cost_cap_remaining and overall_budget

        Raises:
            MalformedInputError: If a roster member is missing from its pool
        """
        roster = self._as_roster(roster)
        return self._team_budget(
            roster,
            self._as_pool(drivers, EntityKind.DRIVER, roster),
            self._as_pool(constructors, EntityKind.CONSTRUCTOR, roster),
        )

    def _team_budget(
        self, roster: RosterDomain, drivers: EntityPool, constructors: EntityPool
    ) -> TeamBudget:
        driver_prices = sum(
            self._lookup_entity(drivers, driver_id, EntityKind.DRIVER).price
            for driver_id in roster.drivers
        )
        constructor_prices = sum(
            self._lookup_entity(constructors, constructor_id, EntityKind.CONSTRUCTOR).price
            for constructor_id in roster.constructors
        )
        total_price = driver_prices + constructor_prices

        budget = TeamBudget(
            total_price=total_price,
            cost_cap_remaining=roster.cost_cap_remaining,
            overall_budget=total_price + roster.cost_cap_remaining,
        )
        logger.debug(
            f"💰 Team value ${budget.total_price:.1f}M + cap ${budget.cost_cap_remaining:.1f}M "
            f"= ${budget.overall_budget:.1f}M"
        )
        return budget
