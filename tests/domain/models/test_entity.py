"""Tests for entity domain model and pool construction."""

import pytest
from pydantic import ValidationError

from f1_team_picker.domain.common.exceptions import MalformedInputError
from f1_team_picker.domain.models import (
    EntityDomain,
    EntityKind,
    build_entity_pool,
)


def _record(**overrides):
    record = {"price": 20.5, "expectedPoints": 12.0, "expectedPriceChange": 0.1}
    record.update(overrides)
    return record


class TestEntityDomain:
    """Test EntityDomain model."""

    def test_entity_from_camel_case(self):
        """Test creating an entity from extracted JSON keys."""
        entity = EntityDomain.model_validate({"entity_id": "VER", **_record()})

        assert entity.entity_id == "VER"
        assert entity.price == 20.5
        assert entity.expected_points == 12.0
        assert entity.expected_price_change == 0.1

    def test_entity_from_field_names(self):
        """Test creating an entity with Python field names."""
        entity = EntityDomain(
            entity_id=3, price=10, expected_points=-2, expected_price_change=-0.3
        )

        assert entity.entity_id == 3
        assert entity.expected_points == -2

    def test_negative_price_rejected(self):
        """Test that prices must be non-negative."""
        with pytest.raises(ValidationError):
            EntityDomain.model_validate({"entity_id": "VER", **_record(price=-1)})

    def test_entity_is_frozen(self):
        """Test that entities cannot be mutated."""
        entity = EntityDomain.model_validate({"entity_id": "VER", **_record()})

        with pytest.raises(ValidationError):
            entity.price = 99


class TestBuildEntityPool:
    """Test build_entity_pool function."""

    def test_mapping_keeps_keys_and_order(self):
        """Test that a mapping pool is keyed by its keys in order."""
        pool = build_entity_pool(
            {"VER": _record(), "HAM": _record(), "NOR": _record()}, EntityKind.DRIVER
        )

        assert list(pool) == ["VER", "HAM", "NOR"]
        assert pool["HAM"].entity_id == "HAM"

    def test_sequence_with_identifier_field(self):
        """Test that extracted table rows are keyed by their DR/CN field."""
        pool = build_entity_pool(
            [{"CN": "RED", **_record()}, {"CN": "MER", **_record()}],
            EntityKind.CONSTRUCTOR,
        )

        assert list(pool) == ["RED", "MER"]

    def test_sequence_without_identifier_uses_position(self):
        """Test that anonymous rows are keyed by index."""
        pool = build_entity_pool([_record(price=5), _record(price=10)], EntityKind.DRIVER)

        assert list(pool) == [0, 1]
        assert pool[1].price == 10

    def test_by_position_overrides_identifier_field(self):
        """Test that coded rows are keyed by index when asked to."""
        pool = build_entity_pool(
            [{"DR": "VER", **_record(price=5)}, {"DR": "HAM", **_record(price=10)}],
            EntityKind.DRIVER,
            by_position=True,
        )

        assert list(pool) == [0, 1]
        assert pool[1].price == 10

    def test_by_position_ignored_for_mappings(self):
        """Test that mapping pools keep their keys."""
        pool = build_entity_pool({"VER": _record()}, EntityKind.DRIVER, by_position=True)

        assert list(pool) == ["VER"]

    def test_sequence_of_entities(self):
        """Test that EntityDomain rows are keyed by their own identifier."""
        entities = [
            EntityDomain(entity_id="A", price=1, expected_points=1, expected_price_change=0),
            EntityDomain(entity_id="B", price=2, expected_points=2, expected_price_change=0),
        ]

        pool = build_entity_pool(entities, EntityKind.DRIVER)

        assert pool["B"] is entities[1]

    def test_duplicate_identifier_rejected(self):
        """Test that a repeated identifier in a table fails fast."""
        with pytest.raises(MalformedInputError, match="Duplicate driver"):
            build_entity_pool(
                [{"DR": "VER", **_record()}, {"DR": "VER", **_record()}],
                EntityKind.DRIVER,
            )

    def test_missing_field_reported(self):
        """Test that a missing numeric field names the entity and field."""
        record = _record()
        del record["expectedPriceChange"]

        with pytest.raises(MalformedInputError) as exc_info:
            build_entity_pool({"VER": record}, EntityKind.DRIVER)

        assert exc_info.value.entity_id == "VER"
        assert exc_info.value.kind == "driver"
        assert exc_info.value.field in ("expectedPriceChange", "expected_price_change")

    def test_non_numeric_field_reported(self):
        """Test that a non-numeric price is rejected rather than defaulted."""
        with pytest.raises(MalformedInputError, match="price"):
            build_entity_pool({"VER": _record(price="n/a")}, EntityKind.DRIVER)

    def test_non_record_rejected(self):
        """Test that a bare number is not accepted as a record."""
        with pytest.raises(MalformedInputError, match="not a record"):
            build_entity_pool({"VER": 30}, EntityKind.DRIVER)

    def test_invalid_pool_type(self):
        """Test that a pool must be a mapping or a sequence."""
        with pytest.raises(MalformedInputError, match="mapping or a sequence"):
            build_entity_pool("VER,HAM", EntityKind.DRIVER)
