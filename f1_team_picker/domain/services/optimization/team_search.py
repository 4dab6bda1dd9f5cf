"""Exhaustive team search for F1 Fantasy.

Every combination of drivers and constructors is scored; there is no heuristic
pruning beyond the hard budget filter. Ranking is stable, so among equally
scored teams the one generated first (pool order) is shown first.

Projected points for a team:
    sum(driver points) + DRS driver points + sum(constructor points) - penalty
where the DRS driver is the team's highest projected scorer and the penalty is
charged per transfer beyond the free allowance.
"""

import heapq
from itertools import combinations
from math import comb
from typing import Any, List, NamedTuple, Tuple

from loguru import logger

from .budget_calculator import BudgetCalculatorMixin
from ...common.exceptions import EmptyPoolError
from ...models import (
    Chip,
    EntityId,
    EntityKind,
    EntityPool,
    RosterDomain,
    ScoredTeam,
)


class _ConstructorCombo(NamedTuple):
    constructor_ids: Tuple[EntityId, ...]
    price: float
    points: float
    price_change: float
    transfers: int


class _Candidate(NamedTuple):
    driver_ids: Tuple[EntityId, ...]
    constructor_ids: Tuple[EntityId, ...]
    drs_driver: EntityId
    total_price: float
    transfers_needed: int
    penalty: float
    projected_points: float
    expected_price_change: float


class TeamSearchMixin(BudgetCalculatorMixin):
    """Mixin providing the ranked search over all feasible teams."""

    def find_best_teams(
        self,
        drivers: Any,
        constructors: Any,
        current_roster: Any,
        chip: Any = Chip.NONE,
    ) -> List[ScoredTeam]:
        """Find the highest scoring teams reachable from the current roster.

        Args:
            drivers: Driver pool (mapping or sequence)
            constructors: Constructor pool (mapping or sequence)
            current_roster: Current roster (RosterDomain or extracted team dict)
            chip: Chip in play (Chip, chip name or None)

        Returns:
            Up to ``max_candidates`` teams sorted by projected points, best first.
            Empty when no combination fits the budget.

        Raises:
            EmptyPoolError: If a pool cannot fill a single team
            MalformedInputError: If the roster references unknown entities
        """
        roster = self._as_roster(current_roster)
        return self._find_best_teams(
            self._as_pool(drivers, EntityKind.DRIVER, roster),
            self._as_pool(constructors, EntityKind.CONSTRUCTOR, roster),
            roster,
            self._as_chip(chip),
        )

    def _find_best_teams(
        self,
        drivers: EntityPool,
        constructors: EntityPool,
        roster: RosterDomain,
        chip: Chip,
    ) -> List[ScoredTeam]:
        drivers_per_team = self.rules.drivers_per_team
        constructors_per_team = self.rules.constructors_per_team

        if len(drivers) < drivers_per_team:
            raise EmptyPoolError(EntityKind.DRIVER.value, len(drivers), drivers_per_team)
        if len(constructors) < constructors_per_team:
            raise EmptyPoolError(
                EntityKind.CONSTRUCTOR.value, len(constructors), constructors_per_team
            )

        team_budget = self._team_budget(roster, drivers, constructors)
        free_transfers, budget = self.resolve_transfer_rules(
            roster, chip, team_budget.overall_budget
        )
        logger.info(
            f"🏎️ Searching C({len(drivers)},{drivers_per_team}) x "
            f"C({len(constructors)},{constructors_per_team}) = "
            f"{comb(len(drivers), drivers_per_team) * comb(len(constructors), constructors_per_team)} teams "
            f"(chip: {chip.value}, free transfers: {free_transfers}, budget: ${budget:.1f}M)"
        )

        current_drivers = set(roster.drivers)
        current_constructors = set(roster.constructors)

        # Penalty only depends on the transfer count
        max_transfers = drivers_per_team + constructors_per_team
        penalties = [
            self.calculate_penalty(transfers, free_transfers)
            for transfers in range(max_transfers + 1)
        ]

        constructor_combos = [
            _ConstructorCombo(
                constructor_ids=tuple(c.entity_id for c in combo),
                price=sum(c.price for c in combo),
                points=sum(c.expected_points for c in combo),
                price_change=sum(c.expected_price_change for c in combo),
                transfers=sum(
                    1 for c in combo if c.entity_id not in current_constructors
                ),
            )
            for combo in combinations(constructors.values(), constructors_per_team)
        ]

        feasible = 0

        def feasible_teams():
            nonlocal feasible
            for driver_combo in combinations(drivers.values(), drivers_per_team):
                driver_ids = tuple(d.entity_id for d in driver_combo)
                driver_price = sum(d.price for d in driver_combo)
                driver_points = sum(d.expected_points for d in driver_combo)
                driver_price_change = sum(d.expected_price_change for d in driver_combo)
                driver_transfers = sum(
                    1 for driver_id in driver_ids if driver_id not in current_drivers
                )

                drs_driver = self._select_drs_driver(driver_combo)
                total_driver_points = driver_points + drs_driver.expected_points

                for cons in constructor_combos:
                    total_price = driver_price + cons.price
                    if total_price > budget:
                        continue

                    feasible += 1
                    transfers_needed = driver_transfers + cons.transfers
                    penalty = penalties[transfers_needed]
                    yield _Candidate(
                        driver_ids=driver_ids,
                        constructor_ids=cons.constructor_ids,
                        drs_driver=drs_driver.entity_id,
                        total_price=total_price,
                        transfers_needed=transfers_needed,
                        penalty=penalty,
                        projected_points=total_driver_points + cons.points - penalty,
                        expected_price_change=driver_price_change + cons.price_change,
                    )

        # nsmallest is sorted(...)[:n], so ties keep generation order
        top_teams = heapq.nsmallest(
            self.rules.max_candidates,
            feasible_teams(),
            key=lambda candidate: -candidate.projected_points,
        )
        logger.info(f"✅ {feasible} teams within budget, returning top {len(top_teams)}")

        if chip is Chip.LIMITLESS:
            # Limitless teams report the current roster's price change
            current_price_change = self._sum_price_change(
                drivers, roster.drivers, EntityKind.DRIVER
            ) + self._sum_price_change(
                constructors, roster.constructors, EntityKind.CONSTRUCTOR
            )
            top_teams = [
                candidate._replace(expected_price_change=current_price_change)
                for candidate in top_teams
            ]

        return [
            ScoredTeam(
                row=row,
                drivers=list(candidate.driver_ids),
                constructors=list(candidate.constructor_ids),
                drs_driver=candidate.drs_driver,
                total_price=candidate.total_price,
                transfers_needed=candidate.transfers_needed,
                penalty=candidate.penalty,
                projected_points=candidate.projected_points,
                expected_price_change=candidate.expected_price_change,
            )
            for row, candidate in enumerate(top_teams, start=1)
        ]
