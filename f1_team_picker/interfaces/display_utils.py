"""
Display utilities for the presentation layer.

Helper functions for turning ranked teams and transfer plans into tables and
messages for the chat layer.
"""

import pandas as pd
from typing import List

from f1_team_picker.domain.models import ScoredTeam, TransferPlan

TEAM_COLUMNS = [
    "row",
    "drivers",
    "constructors",
    "drs_driver",
    "total_price",
    "transfers_needed",
    "penalty",
    "projected_points",
    "expected_price_change",
]


def teams_to_dataframe(teams: List[ScoredTeam], round_decimals: int = 2) -> pd.DataFrame:
    """
    Create a display DataFrame of ranked teams, one row per team

    Args:
        teams: Ranked teams from the optimization service
        round_decimals: Number of decimal places for numeric columns

    Returns:
        DataFrame indexed by rank with member lists joined into strings
    """
    if not teams:
        return pd.DataFrame(columns=TEAM_COLUMNS).set_index("row")

    df = pd.DataFrame([team.model_dump() for team in teams], columns=TEAM_COLUMNS)
    df["drivers"] = df["drivers"].apply(lambda members: ", ".join(map(str, members)))
    df["constructors"] = df["constructors"].apply(
        lambda members: ", ".join(map(str, members))
    )

    numeric_columns = ["total_price", "penalty", "projected_points", "expected_price_change"]
    df[numeric_columns] = df[numeric_columns].round(round_decimals)
    return df.set_index("row")


def _join(members: List) -> str:
    return ", ".join(str(member) for member in members)


def format_transfer_plan(plan: TransferPlan) -> str:
    """Render a transfer plan as a short chat message."""
    if not plan.has_changes:
        return "✅ No changes needed, your current team is already the pick"

    lines = []
    if plan.drivers_to_remove:
        lines.append(f"➖ Drivers out: {_join(plan.drivers_to_remove)}")
    if plan.drivers_to_add:
        lines.append(f"➕ Drivers in: {_join(plan.drivers_to_add)}")
    if plan.constructors_to_remove:
        lines.append(f"➖ Constructors out: {_join(plan.constructors_to_remove)}")
    if plan.constructors_to_add:
        lines.append(f"➕ Constructors in: {_join(plan.constructors_to_add)}")
    if plan.new_drs is not None:
        lines.append(f"🚀 DRS boost: {plan.new_drs}")
    if plan.chip_to_activate is not None:
        lines.append(f"🃏 Activate chip: {plan.chip_to_activate.value.upper()}")
    return "\n".join(lines)
