"""Domain models with strict data contracts for the team search engine."""

from .chip import Chip
from .entity import EntityDomain, EntityId, EntityKind, EntityPool, build_entity_pool
from .roster import RosterDomain
from .team import ScoredTeam, TeamBudget
from .transfer_plan import TransferPlan

__all__ = [
    "Chip",
    "EntityDomain",
    "EntityId",
    "EntityKind",
    "EntityPool",
    "build_entity_pool",
    "RosterDomain",
    "ScoredTeam",
    "TeamBudget",
    "TransferPlan",
]
