"""Date range validator.

ONLY cross-field date ordering - reads two date/time fields from an
object, normalizes them to instants in the reference time zone and checks
that the first is not after the second.

Both fields empty is a valid (open) range; exactly one empty is not.
Field names shown in messages use the serialization alias of the field
when one is declared (pydantic ``Field(alias=...)`` or
``serialization_alias``, dataclass ``field(metadata={"alias": ...})``).

Following maximum separation architecture - one file = one purpose.
"""

import dataclasses
import inspect
import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ...config.constants import MessageKeys
from ...config.settings import ValidatorSettings, get_settings
from ...core.exceptions import ConfigurationError, FieldAccessError, UnsupportedTemporalTypeError
from ...core.protocols import MessageResolver, ViolationSink
from ...core.value_objects import TemporalValue
from ..helpers.violation_helper import ViolationReporter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateRangeOptions:
    """Names of the start (A) and end (B) fields of a range."""

    field_a: str
    field_b: str
    reference_time_zone: Optional[str] = None


def field_display_name(target_type: type, field_name: str) -> str:
    """Serialization alias of a field, or the field name itself."""
    model_fields = getattr(target_type, "model_fields", None)
    if isinstance(model_fields, dict) and field_name in model_fields:
        info = model_fields[field_name]
        alias = info.serialization_alias or info.alias
        if alias and alias.strip():
            return alias.strip()

    if dataclasses.is_dataclass(target_type):
        for declared in dataclasses.fields(target_type):
            if declared.name == field_name:
                alias = declared.metadata.get("alias")
                if isinstance(alias, str) and alias.strip():
                    return alias.strip()

    return field_name


def read_field(target: Any, field_name: str) -> Any:
    """Read a field value from an object.

    Errors raised by the field itself (e.g. a property getter) propagate
    unchanged.

    Raises:
        FieldAccessError: If the object has no such field
    """
    try:
        inspect.getattr_static(target, field_name)
    except AttributeError as e:
        raise FieldAccessError(field_name, type(target).__name__) from e
    return getattr(target, field_name)


class DateRangeValidator:
    """Validator asserting ``field_a <= field_b`` on an object."""

    def __init__(
        self,
        resolver: Optional[MessageResolver] = None,
        settings: Optional[ValidatorSettings] = None,
    ):
        self._reporter = ViolationReporter(resolver)
        self._settings = settings
        self._options: Optional[DateRangeOptions] = None
        self._zone: Optional[tzinfo] = None

    def initialize(self, options: DateRangeOptions) -> None:
        if not options.field_a or not options.field_b:
            raise ConfigurationError(
                "Date range fields must be named",
                details={"field_a": options.field_a, "field_b": options.field_b},
            )
        settings = self._settings or get_settings()
        zone_name = options.reference_time_zone or settings.reference_time_zone
        try:
            self._zone = ZoneInfo(zone_name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigurationError(f"Unknown time zone: {zone_name}") from e
        self._options = options

    @property
    def options(self) -> DateRangeOptions:
        if self._options is None:
            raise ConfigurationError(f"{type(self).__name__} used before initialize()")
        return self._options

    def is_valid(self, target: Any, sink: Optional[ViolationSink] = None) -> bool:
        options = self.options
        if target is None:
            return True

        try:
            return self._validate(target, options, sink)
        except FieldAccessError as e:
            logger.warning(f"Error validating date range: {e.message}")
            self._reporter.report(sink, MessageKeys.DATE_RANGE_FIELD_ACCESS, e.field_name, e.target_type)
            return False
        except Exception as e:
            logger.warning(f"Error validating date range: {e}", exc_info=True)
            self._reporter.report(sink, MessageKeys.DATE_RANGE_ERROR)
            return False

    def _validate(self, target: Any, options: DateRangeOptions, sink: Optional[ViolationSink]) -> bool:
        target_type = type(target)
        name_a = field_display_name(target_type, options.field_a)
        name_b = field_display_name(target_type, options.field_b)

        value_a = read_field(target, options.field_a)
        value_b = read_field(target, options.field_b)

        if value_a is None and value_b is None:
            return True

        if value_a is None or value_b is None:
            missing = options.field_a if value_a is None else options.field_b
            self._reporter.report(sink, MessageKeys.DATE_RANGE_EMPTY, name_a, name_b, field_path=missing)
            return False

        instant_a = self._to_instant(value_a, name_a, sink)
        if instant_a is None:
            return False
        instant_b = self._to_instant(value_b, name_b, sink)
        if instant_b is None:
            return False

        if instant_a > instant_b:
            self._reporter.report(
                sink, MessageKeys.DATE_RANGE_INVALID, name_a, name_b, field_path=options.field_a
            )
            return False
        return True

    def _to_instant(self, value: Any, display_name: str, sink: Optional[ViolationSink]) -> Optional[datetime]:
        try:
            return TemporalValue.of(value).to_instant(self._zone)
        except UnsupportedTemporalTypeError as e:
            logger.warning(f"Unsupported date type {e.type_name} in field {display_name}")
            self._reporter.report(sink, MessageKeys.DATE_RANGE_UNSUPPORTED_TYPE, e.type_name, display_name)
            return None


def create_date_range_validator(
    options: DateRangeOptions,
    resolver: Optional[MessageResolver] = None,
) -> DateRangeValidator:
    """Create and initialize date range validator."""
    validator = DateRangeValidator(resolver)
    validator.initialize(options)
    return validator
