"""Optimization service for F1 Fantasy team selection.

This service contains the team selection algorithms:
- Budget calculation for the current roster
- Exhaustive search over every 5-driver / 2-constructor team within budget
- Transfer planning from the current roster to a chosen team
- Wildcard and Limitless chip handling

This is a thin facade that composes all optimization mixins.
"""

from typing import Optional

from f1_team_picker.config import OptimizationConfig
from .optimization import RosterDiffMixin, TeamSearchMixin


class OptimizationService(TeamSearchMixin, RosterDiffMixin):
    """Service for F1 Fantasy team optimization.

    This class composes all optimization functionality through mixins:
    - OptimizationBaseMixin: Shared utilities (inherited via other mixins)
    - BudgetCalculatorMixin: Team price and budget (inherited via other mixins)
    - TeamSearchMixin: Ranked search over all feasible teams
    - RosterDiffMixin: Transfers needed to reach a chosen team
    """

    def __init__(self, optimization_config: Optional[OptimizationConfig] = None):
        """Initialize optimization service.

        Args:
            optimization_config: Optional game rules override (defaults to global config)
        """
        self.optimization_config = optimization_config
