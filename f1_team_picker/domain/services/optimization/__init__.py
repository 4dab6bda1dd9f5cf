"""Optimization module for F1 Fantasy team selection.

This module provides:
- Team budget calculation
- Exhaustive ranked team search
- Transfer planning towards a chosen team

Usage:
    from f1_team_picker.domain.services import OptimizationService

    service = OptimizationService()
    teams = service.find_best_teams(drivers, constructors, current_roster)
"""

from .optimization_base import OptimizationBaseMixin
from .budget_calculator import BudgetCalculatorMixin
from .team_search import TeamSearchMixin
from .roster_diff import RosterDiffMixin

__all__ = [
    "OptimizationBaseMixin",
    "BudgetCalculatorMixin",
    "TeamSearchMixin",
    "RosterDiffMixin",
]
