"""Enum code validator.

ONLY numeric enum code validation - a submitted number must equal the
``code`` accessor of one member of the configured enum. An enum without
the accessor is a constraint misuse: every call fails with a violation.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Any, Optional

from ...config.constants import MessageKeys
from ...core.exceptions import AccessorError, ConfigurationError
from ...core.protocols import MessageResolver, ViolationSink
from ..helpers.violation_helper import ViolationReporter
from .enum_accessor import EnumAccessorSupport, EnumValidationOptions, is_number

logger = logging.getLogger(__name__)

DEFAULT_CODE_ACCESSOR = "code"


class EnumCodeValidator:
    """Validator matching numeric codes against an enum's ``code`` accessor."""

    def __init__(self, resolver: Optional[MessageResolver] = None):
        self._reporter = ViolationReporter(resolver)
        self._support: Optional[EnumAccessorSupport] = None

    def initialize(self, options: EnumValidationOptions) -> None:
        self._support = EnumAccessorSupport(options, DEFAULT_CODE_ACCESSOR, self._reporter)

    @property
    def support(self) -> EnumAccessorSupport:
        if self._support is None:
            raise ConfigurationError(f"{type(self).__name__} used before initialize()")
        return self._support

    def is_valid(self, value: Any, sink: Optional[ViolationSink] = None) -> bool:
        support = self.support

        if not support.accessor.is_present:
            self._reporter.report(
                sink,
                MessageKeys.ENUM_CODE_ACCESSOR_MISSING,
                support.enum_name,
                support.accessor.name,
            )
            return False

        if value is None:
            return True

        try:
            matched = is_number(value) and any(
                is_number(code) and code == value for code in support.values()
            )
            if not matched:
                support.report_mismatch(
                    sink, value, MessageKeys.ENUM_INVALID_CODE, MessageKeys.ENUM_INVALID_CODE_HIDDEN
                )
            return matched
        except AccessorError as e:
            support.report_invocation_failure(sink, e)
            return False


def create_enum_code_validator(
    options: EnumValidationOptions,
    resolver: Optional[MessageResolver] = None,
) -> EnumCodeValidator:
    """Create and initialize enum code validator."""
    validator = EnumCodeValidator(resolver)
    validator.initialize(options)
    return validator
