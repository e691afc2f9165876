"""Enum accessor support.

ONLY enum membership plumbing shared by the code and value validators -
holds the accessor bound once at initialization, lists the valid values
and reports mismatches. Used by composition, not inheritance.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from numbers import Number
from typing import Any, List, Optional, Type

from ...config.constants import MessageKeys, ValidationDefaults
from ...core.exceptions import AccessorError
from ...core.protocols import ViolationSink
from ...core.value_objects import BoundAccessor
from ..helpers.violation_helper import ViolationReporter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnumValidationOptions:
    """Static configuration of an enum constraint."""

    enum_type: Type[Enum]
    accessor_name: Optional[str] = None
    hide_valid_options: bool = False


def is_number(value: Any) -> bool:
    """Numbers, excluding booleans."""
    return isinstance(value, Number) and not isinstance(value, bool)


def _sort_key(value: Any):
    if is_number(value):
        return (0, value, "")
    return (1, 0, str(value))


def sort_valid_values(values: List[Any]) -> List[Any]:
    """Numbers ascending first, then everything else alphabetically."""
    return sorted(values, key=_sort_key)


class EnumAccessorSupport:
    """Enum binding and messages shared by the enum validators."""

    def __init__(self, options: EnumValidationOptions, default_accessor: str, reporter: ViolationReporter):
        self.enum_type = options.enum_type
        self.hide_valid_options = options.hide_valid_options
        self.accessor = BoundAccessor.resolve(options.enum_type, options.accessor_name or default_accessor)
        self._reporter = reporter

    @property
    def enum_name(self) -> str:
        return self.enum_type.__name__

    def members(self) -> List[Enum]:
        return list(self.enum_type)

    def values(self) -> List[Any]:
        """Accessor values of every member, in declaration order.

        Raises:
            AccessorError: If the accessor fails for any member
        """
        return [self.accessor.read(member) for member in self.enum_type]

    def valid_values_text(self) -> str:
        values = sort_valid_values(self.values())
        return ValidationDefaults.VALID_VALUES_SEPARATOR.join(str(value) for value in values)

    def report_mismatch(
        self,
        sink: Optional[ViolationSink],
        submitted: Any,
        key: str,
        hidden_key: str,
    ) -> None:
        """Report an unmatched submission, listing valid values unless hidden."""
        if self.hide_valid_options:
            self._reporter.report(sink, hidden_key, str(submitted))
        else:
            self._reporter.report(sink, key, str(submitted), self.valid_values_text())

    def report_invocation_failure(self, sink: Optional[ViolationSink], error: AccessorError) -> None:
        logger.error(f"{error.message}: {error.details.get('cause')}")
        self._reporter.report(sink, MessageKeys.ENUM_ACCESSOR_INVOCATION, error.accessor_name, error.enum_name)
