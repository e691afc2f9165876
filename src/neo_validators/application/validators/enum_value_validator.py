"""Enum value validator.

ONLY string enum validation - a submitted string must match, ignoring
case, either a member name or the member's ``value`` accessor. The
built-in ``Enum.value`` only counts when every member value is a string;
otherwise member names are the valid values.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from enum import Enum
from typing import Any, Optional

from ...config.constants import MessageKeys
from ...core.exceptions import AccessorError, ConfigurationError
from ...core.protocols import MessageResolver, ViolationSink
from ..helpers.violation_helper import ViolationReporter
from .enum_accessor import EnumAccessorSupport, EnumValidationOptions

logger = logging.getLogger(__name__)

DEFAULT_VALUE_ACCESSOR = "value"


def _matches_text(expected: Any, submitted: Any) -> bool:
    if isinstance(expected, str) and isinstance(submitted, str):
        return expected.casefold() == submitted.casefold()
    return expected == submitted


class EnumValueValidator:
    """Validator matching strings against enum member names and values."""

    def __init__(self, resolver: Optional[MessageResolver] = None):
        self._reporter = ViolationReporter(resolver)
        self._support: Optional[EnumAccessorSupport] = None

    def initialize(self, options: EnumValidationOptions) -> None:
        support = EnumAccessorSupport(options, DEFAULT_VALUE_ACCESSOR, self._reporter)
        accessor = support.accessor
        if accessor.inherited and not all(isinstance(member.value, str) for member in support.members()):
            # plain enums only expose their member names to string submissions
            logger.debug(f"Enum {support.enum_name} has non-string values; member names will be used instead.")
            support.accessor = accessor.without_getter()
        self._support = support

    @property
    def support(self) -> EnumAccessorSupport:
        if self._support is None:
            raise ConfigurationError(f"{type(self).__name__} used before initialize()")
        return self._support

    def _matches(self, member: Enum, value: Any) -> bool:
        if _matches_text(member.name, value):
            return True
        accessor = self.support.accessor
        return accessor.is_present and _matches_text(accessor.read(member), value)

    def is_valid(self, value: Any, sink: Optional[ViolationSink] = None) -> bool:
        support = self.support
        if value is None:
            return True

        try:
            matched = any(self._matches(member, value) for member in support.members())
            if not matched:
                support.report_mismatch(
                    sink, value, MessageKeys.ENUM_INVALID_VALUE, MessageKeys.ENUM_INVALID_VALUE_HIDDEN
                )
            return matched
        except AccessorError as e:
            support.report_invocation_failure(sink, e)
            return False


def create_enum_value_validator(
    options: EnumValidationOptions,
    resolver: Optional[MessageResolver] = None,
) -> EnumValueValidator:
    """Create and initialize enum value validator."""
    validator = EnumValueValidator(resolver)
    validator.initialize(options)
    return validator
