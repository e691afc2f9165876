"""Tests for the cross-field date range validator."""

import time
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

import pytest
from pydantic import BaseModel, ConfigDict, Field

from neo_validators.application.validators import (
    DateRangeOptions,
    DateRangeValidator,
    field_display_name,
)
from neo_validators.core.exceptions import ConfigurationError


@dataclass
class Window:
    date_a: Any = field(default=None, metadata={"alias": "dateA"})
    date_b: Any = field(default=None, metadata={"alias": "dateB"})


class Period(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_date: Optional[date] = Field(default=None, alias="startDate")
    end_date: Optional[datetime] = Field(default=None, serialization_alias="endDate")


class Untyped:
    def __init__(self, begin, finish):
        self.begin = begin
        self.finish = finish


class Derived:
    date_b = date(2024, 1, 1)

    @property
    def date_a(self):
        return self.source.date_a


@pytest.fixture
def validator(resolver, settings):
    validator = DateRangeValidator(resolver, settings)
    validator.initialize(DateRangeOptions(field_a="date_a", field_b="date_b"))
    return validator


class TestFieldDisplayName:
    def test_dataclass_alias(self):
        assert field_display_name(Window, "date_a") == "dateA"

    def test_pydantic_aliases(self):
        assert field_display_name(Period, "start_date") == "startDate"
        assert field_display_name(Period, "end_date") == "endDate"

    def test_plain_attribute(self):
        assert field_display_name(Untyped, "begin") == "begin"


class TestDateRangeValidator:
    """Test DateRangeValidator."""

    def test_both_absent_is_valid(self, validator, collector):
        assert validator.is_valid(Window(), collector)
        assert not collector.has_violations

    def test_ordered_dates(self, validator, collector):
        assert validator.is_valid(Window(date(2024, 1, 1), date(2024, 1, 2)), collector)

    def test_equal_instants_are_valid(self, validator, collector):
        assert validator.is_valid(Window(date(2024, 1, 1), datetime(2024, 1, 1, 0, 0)), collector)

    def test_reversed_dates(self, validator, collector):
        assert not validator.is_valid(Window(date(2024, 1, 2), date(2024, 1, 1)), collector)
        assert collector.messages == ["dateA must be before or equal to dateB."]
        assert collector.first.field_path == "date_a"

    def test_one_absent(self, validator, collector):
        assert not validator.is_valid(Window(date(2024, 1, 1), None), collector)
        assert collector.messages == ["dateA and dateB must both be filled or both be empty."]
        assert collector.first.field_path == "date_b"

    def test_other_absent(self, validator, collector):
        assert not validator.is_valid(Window(None, date(2024, 1, 1)), collector)
        assert collector.first.field_path == "date_a"

    def test_mixed_temporal_types(self, validator, collector):
        target = Window(date(2024, 1, 1), datetime(2024, 1, 1, 10, 30))
        assert validator.is_valid(target, collector)

    def test_zoned_datetime_compared_as_instant(self, validator, collector):
        # 2024-01-01T01:00+03:00 is 2023-12-31T22:00Z, before midnight UTC
        zoned = datetime(2024, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=3)))
        assert validator.is_valid(Window(zoned, date(2024, 1, 1)), collector)

    def test_struct_time_values(self, validator, collector):
        assert validator.is_valid(Window(time.gmtime(0), time.gmtime(60)), collector)
        assert not validator.is_valid(Window(time.gmtime(60), time.gmtime(0)), collector)

    def test_unsupported_type(self, validator, collector):
        assert not validator.is_valid(Window("2024-01-01", date(2024, 1, 1)), collector)
        assert collector.messages == ["Unsupported date type (str) in field dateA."]

    def test_missing_field(self, resolver, settings, collector):
        validator = DateRangeValidator(resolver, settings)
        validator.initialize(DateRangeOptions(field_a="start", field_b="date_b"))
        assert not validator.is_valid(Window(), collector)
        assert collector.messages == ["The field start could not be read from Window."]

    def test_failing_property_is_not_reported_as_missing(self, validator, collector):
        assert not validator.is_valid(Derived(), collector)
        assert collector.messages == ["The date range could not be validated."]

    def test_pydantic_model(self, resolver, settings, collector):
        validator = DateRangeValidator(resolver, settings)
        validator.initialize(DateRangeOptions(field_a="start_date", field_b="end_date"))
        period = Period(start_date=date(2024, 2, 1), end_date=datetime(2024, 1, 31, 23, 0))
        assert not validator.is_valid(period, collector)
        assert collector.messages == ["startDate must be before or equal to endDate."]
        assert collector.first.field_path == "start_date"

    def test_reference_zone_applies_to_local_values(self, resolver, settings, collector):
        validator = DateRangeValidator(resolver, settings)
        validator.initialize(
            DateRangeOptions(field_a="begin", field_b="finish", reference_time_zone="America/Sao_Paulo")
        )
        # midnight in Sao Paulo is 03:00Z, after 02:00Z
        target = Untyped(date(2024, 1, 1), datetime(2024, 1, 1, 2, 0, tzinfo=timezone.utc))
        assert not validator.is_valid(target, collector)
        assert collector.messages == ["begin must be before or equal to finish."]

    def test_none_target_is_valid(self, validator, collector):
        assert validator.is_valid(None, collector)

    def test_unknown_zone_is_rejected(self, resolver, settings):
        validator = DateRangeValidator(resolver, settings)
        with pytest.raises(ConfigurationError):
            validator.initialize(
                DateRangeOptions(field_a="a", field_b="b", reference_time_zone="Nowhere/Land")
            )

    def test_use_before_initialize(self, resolver):
        with pytest.raises(ConfigurationError):
            DateRangeValidator(resolver).is_valid(Window())
