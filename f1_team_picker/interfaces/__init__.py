"""Presentation-layer adapters for the chat front end."""

from .data_contracts import DataContractError, TeamData, validate_team_data
from .display_utils import format_transfer_plan, teams_to_dataframe

__all__ = [
    "DataContractError",
    "TeamData",
    "validate_team_data",
    "format_transfer_plan",
    "teams_to_dataframe",
]
