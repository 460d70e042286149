"""Unit tests for Activity entity."""

import math
from datetime import datetime, timedelta, timezone

import pytest

from carbon_footprint.domain.activity.category import ActivityCategory
from carbon_footprint.domain.activity.entities import Activity
from carbon_footprint.domain.activity.value_objects import AverageEmissions
from carbon_footprint.domain.shared.errors import NotFoundError, PreconditionError

JAN_1 = datetime(2023, 1, 1, tzinfo=timezone.utc)


def make_activity(**overrides) -> Activity:
    data = {
        "user_id": "user123",
        "type": "transportation",
        "value": 100,
        "unit": "km",
        "date": JAN_1,
    }
    data.update(overrides)
    return Activity.create(**data)


class TestActivityCreation:
    """Test Activity construction."""

    def test_create_activity(self) -> None:
        """New activity has no id and no emission."""
        activity = make_activity()

        assert activity.id is None
        assert activity.user_id == "user123"
        assert activity.type == "transportation"
        assert activity.value == 100
        assert activity.unit == "km"
        assert activity.date == JAN_1
        assert activity.carbon_emission is None

    def test_create_normalizes_enum_type(self) -> None:
        activity = make_activity(type=ActivityCategory.ENERGY, unit="kwh")

        assert activity.type == "energy"
        assert type(activity.type) is str

    def test_with_id_returns_new_instance(self) -> None:
        activity = make_activity()

        saved = activity.with_id("abc")

        assert saved.id == "abc"
        assert activity.id is None
        assert saved is not activity
        assert saved.value == activity.value

    def test_create_takes_naive_date_as_utc(self) -> None:
        activity = make_activity(date=datetime(2023, 1, 1, 9, 0))

        assert activity.date == datetime(2023, 1, 1, 9, 0, tzinfo=timezone.utc)
        assert activity.is_valid() is True

    def test_create_keeps_aware_date(self) -> None:
        local = timezone(timedelta(hours=2))
        activity = make_activity(date=datetime(2023, 1, 1, 9, 0, tzinfo=local))

        assert activity.date.tzinfo is local


class TestIsValid:
    """Test Activity.is_valid."""

    def test_valid_activity(self) -> None:
        assert make_activity().is_valid() is True

    @pytest.mark.parametrize("category", list(ActivityCategory))
    def test_every_category_is_valid(self, category: ActivityCategory) -> None:
        assert make_activity(type=category).is_valid() is True

    def test_invalid_type(self) -> None:
        assert make_activity(type="invalid-type").is_valid() is False

    @pytest.mark.parametrize("value", [-10, 0, "100", None, True, math.nan, math.inf])
    def test_invalid_value(self, value) -> None:
        assert make_activity(value=value).is_valid() is False

    def test_float_value_is_valid(self) -> None:
        assert make_activity(value=12.5).is_valid() is True

    @pytest.mark.parametrize("unit", ["", "   ", None])
    def test_invalid_unit(self, unit) -> None:
        assert make_activity(unit=unit).is_valid() is False

    @pytest.mark.parametrize("date", [None, "2023-01-01", 1672531200])
    def test_invalid_date(self, date) -> None:
        assert make_activity(date=date).is_valid() is False

    @pytest.mark.parametrize("user_id", ["", None])
    def test_missing_user(self, user_id) -> None:
        assert make_activity(user_id=user_id).is_valid() is False


class TestCalculateEmission:
    """Test Activity.calculate_emission."""

    def test_calculates_value_times_factor(self, emission_factors) -> None:
        """100 km * 0.2 kg CO2/km = 20 kg CO2."""
        activity = make_activity()

        emission = activity.calculate_emission(emission_factors)

        assert emission == pytest.approx(20.0)
        assert activity.carbon_emission == emission

    def test_other_unit_of_same_type(self, emission_factors) -> None:
        activity = make_activity(value=10, unit="mile")

        assert activity.calculate_emission(emission_factors) == pytest.approx(3.2)

    def test_unknown_type_raises_not_found(self, emission_factors) -> None:
        activity = make_activity(type="unknown-type")

        with pytest.raises(NotFoundError, match="Emission factor for unknown-type not found"):
            activity.calculate_emission(emission_factors)

    def test_unregistered_category_raises_not_found(self, emission_factors) -> None:
        activity = make_activity(type="consumption", unit="usd")

        with pytest.raises(NotFoundError, match="consumption"):
            activity.calculate_emission(emission_factors)

    def test_unknown_unit_names_type_and_unit(self, emission_factors) -> None:
        activity = make_activity(unit="parsec")

        with pytest.raises(NotFoundError) as exc_info:
            activity.calculate_emission(emission_factors)

        assert str(exc_info.value) == "Emission factor for transportation/parsec not found"
        assert activity.carbon_emission is None

    def test_missing_factor_table(self) -> None:
        with pytest.raises(NotFoundError):
            make_activity().calculate_emission(None)

    def test_zero_factor_is_valid(self) -> None:
        activity = make_activity()

        assert activity.calculate_emission({"transportation": {"km": 0.0}}) == 0.0
        assert activity.carbon_emission == 0.0

    def test_recalculation_is_idempotent(self, emission_factors) -> None:
        activity = make_activity()

        first = activity.calculate_emission(emission_factors)
        second = activity.calculate_emission(emission_factors)

        assert first == second

    def test_last_factor_table_wins(self, emission_factors) -> None:
        activity = make_activity()
        activity.calculate_emission(emission_factors)

        activity.calculate_emission({"transportation": {"km": 0.5}})

        assert activity.carbon_emission == pytest.approx(50.0)


class TestCompareToAverage:
    """Test Activity.compare_to_average."""

    def test_compare_to_average(self, emission_factors) -> None:
        """20 kg against 25 kg average: -5 kg, -20%, better."""
        activity = make_activity()
        activity.calculate_emission(emission_factors)

        comparison = activity.compare_to_average(
            AverageEmissions.from_mapping({"transportation": 25})
        )

        assert comparison.difference == pytest.approx(-5.0)
        assert comparison.percentage_diff == pytest.approx(-20.0)
        assert comparison.is_better_than_average is True

    def test_worse_than_average(self, emission_factors) -> None:
        activity = make_activity(value=200)
        activity.calculate_emission(emission_factors)

        comparison = activity.compare_to_average(
            AverageEmissions.from_mapping({"transportation": 25})
        )

        assert comparison.difference == pytest.approx(15.0)
        assert comparison.percentage_diff == pytest.approx(60.0)
        assert comparison.is_better_than_average is False

    def test_equal_to_average_is_not_better(self) -> None:
        activity = make_activity()
        activity.carbon_emission = 25.0

        comparison = activity.compare_to_average(
            AverageEmissions.from_mapping({"transportation": 25})
        )

        assert comparison.difference == 0
        assert comparison.is_better_than_average is False

    def test_repeated_comparison_is_identical(self, emission_factors, average_emissions) -> None:
        activity = make_activity()
        activity.calculate_emission(emission_factors)

        assert activity.compare_to_average(average_emissions) == activity.compare_to_average(
            average_emissions
        )

    def test_requires_calculated_emission(self, average_emissions) -> None:
        with pytest.raises(PreconditionError, match="emission not calculated"):
            make_activity().compare_to_average(average_emissions)

    def test_zero_emission_can_be_compared(self, average_emissions) -> None:
        activity = make_activity()
        activity.carbon_emission = 0.0

        assert activity.compare_to_average(average_emissions).percentage_diff == -100.0

    def test_requires_average_for_type(self, emission_factors) -> None:
        activity = make_activity()
        activity.calculate_emission(emission_factors)

        with pytest.raises(PreconditionError, match="no average emission for transportation"):
            activity.compare_to_average(AverageEmissions.from_mapping({"food": 30}))

    def test_requires_averages(self, emission_factors) -> None:
        activity = make_activity()
        activity.calculate_emission(emission_factors)

        with pytest.raises(PreconditionError):
            activity.compare_to_average(None)

    def test_zero_average_raises(self, emission_factors) -> None:
        activity = make_activity()
        activity.calculate_emission(emission_factors)

        with pytest.raises(PreconditionError, match="zero"):
            activity.compare_to_average(AverageEmissions.from_mapping({"transportation": 0}))
