"""Tests for the City and RoadEntry value types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from roadledger.domain.types import City, ErrorCode, RoadEntry


class TestCity:
    def test_position_is_zero_based(self) -> None:
        assert City(index=1, name="Kigali").position == 0
        assert City(index=7, name="Rusizi").position == 6

    def test_index_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            City(index=0, name="Kigali")

    def test_frozen(self) -> None:
        city = City(index=1, name="Kigali")
        with pytest.raises(ValidationError):
            city.name = "Other"  # type: ignore[misc]


class TestRoadEntry:
    def test_label_follows_matrix_order(self) -> None:
        road = RoadEntry(
            number=1,
            first=City(index=2, name="Huye"),
            second=City(index=3, name="Muhanga"),
            budget=56.7,
        )
        assert road.label == "Huye-Muhanga"

    def test_budget_defaults_to_zero(self) -> None:
        road = RoadEntry(
            number=1, first=City(index=1, name="A"), second=City(index=2, name="B")
        )
        assert road.budget == 0.0


class TestErrorCode:
    def test_values_are_their_names(self) -> None:
        for code in ErrorCode:
            assert str(code) == code.name
