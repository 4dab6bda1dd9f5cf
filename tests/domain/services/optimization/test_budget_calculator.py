"""Unit tests for team budget calculation."""

import pytest

from f1_team_picker.domain.common.exceptions import MalformedInputError
from f1_team_picker.domain.models import RosterDomain, TeamBudget


class TestCalculateTeamBudget:
    """Test calculate_team_budget method."""

    def test_budget_from_keyed_pools(self, service, drivers, constructors, current_team):
        """Test totalPrice, costCapRemaining and overallBudget."""
        budget = service.calculate_team_budget(current_team, drivers, constructors)

        # 30+28+25+23+24 + 35+32 = 197
        assert budget == TeamBudget(
            total_price=197, cost_cap_remaining=10, overall_budget=207
        )

    def test_budget_from_positional_pools(self, service):
        """Test that sequence pools without identifiers are looked up by index."""

        def record(price):
            return {"price": price, "expectedPoints": 1, "expectedPriceChange": 0}

        drivers = [record(price) for price in (5, 10, 15, 20, 25, 30)]
        constructors = [record(20), record(30), record(40)]
        roster = {
            "drivers": [1, 0, 2, 3, 4],
            "constructors": [1, 0],
            "drsBoost": 1,
            "freeTransfers": 1,
            "costCapRemaining": 0,
        }

        budget = service.calculate_team_budget(roster, drivers, constructors)

        # drivers: 10+5+15+20+25, constructors: 30+20
        assert budget.total_price == 125
        assert budget.overall_budget == 125

    def test_index_roster_over_coded_rows(self, service):
        """Test that a roster of indices addresses rows that also carry DR/CN codes."""

        def record(price):
            return {"price": price, "expectedPoints": 1, "expectedPriceChange": 0}

        drivers = [
            {"DR": code, **record(price)}
            for code, price in zip(
                ["VER", "HAM", "PER", "SAI", "LEC", "NOR"], (5, 10, 15, 20, 25, 30)
            )
        ]
        constructors = [
            {"CN": code, **record(price)}
            for code, price in zip(["RED", "MER", "FER"], (20, 30, 40))
        ]
        roster = {
            "drivers": [1, 0, 2, 3, 4],
            "constructors": [1, 0],
            "drsBoost": 1,
            "freeTransfers": 1,
            "costCapRemaining": 0,
        }

        budget = service.calculate_team_budget(roster, drivers, constructors)

        assert budget.total_price == 125

    def test_budget_accepts_domain_roster(self, service, drivers, constructors, current_team):
        """Test that a parsed RosterDomain is used as is."""
        roster = RosterDomain.model_validate(current_team)

        budget = service.calculate_team_budget(roster, drivers, constructors)

        assert budget.overall_budget == 207

    def test_negative_cost_cap(self, service, drivers, constructors, current_team):
        """Test that an overspent cap lowers the overall budget."""
        current_team["costCapRemaining"] = -3.5

        budget = service.calculate_team_budget(current_team, drivers, constructors)

        assert budget.overall_budget == pytest.approx(193.5)

    def test_missing_driver_fails_fast(self, service, drivers, constructors, current_team):
        """Test that an unknown driver raises instead of counting as zero."""
        del drivers["LEC"]

        with pytest.raises(MalformedInputError) as exc_info:
            service.calculate_team_budget(current_team, drivers, constructors)

        assert exc_info.value.entity_id == "LEC"
        assert exc_info.value.kind == "driver"

    def test_missing_constructor_fails_fast(
        self, service, drivers, constructors, current_team
    ):
        """Test that an unknown constructor raises."""
        current_team["constructors"] = ["RED", "MCL"]

        with pytest.raises(MalformedInputError, match="MCL"):
            service.calculate_team_budget(current_team, drivers, constructors)

    def test_missing_price_field(self, service, drivers, constructors, current_team):
        """Test that a record without a price is reported with the field name."""
        del drivers["VER"]["price"]

        with pytest.raises(MalformedInputError) as exc_info:
            service.calculate_team_budget(current_team, drivers, constructors)

        assert exc_info.value.entity_id == "VER"
        assert exc_info.value.field == "price"
