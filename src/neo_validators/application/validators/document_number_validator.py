"""Document number validator.

ONLY Brazilian tax ID validation - checks CPF (individuals, 11 digits) and
CNPJ (companies, 14 digits) numbers through their two weighted-sum check
digits.

Following maximum separation architecture - one file = one purpose.
"""

import logging
import re
from typing import Optional, Sequence

from ...config.constants import MessageKeys
from ...core.protocols import MessageResolver, ViolationSink
from ..helpers.violation_helper import ViolationReporter

logger = logging.getLogger(__name__)

CPF_LENGTH = 11
CNPJ_LENGTH = 14

CPF_FIRST_WEIGHTS = (10, 9, 8, 7, 6, 5, 4, 3, 2)
CPF_SECOND_WEIGHTS = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_FIRST_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_SECOND_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

NUMERIC_PATTERN = re.compile(r"\d+", re.ASCII)
NON_DIGIT_PATTERN = re.compile(r"\D", re.ASCII)


def calculate_check_digit(digits: Sequence[int], weights: Sequence[int]) -> int:
    """Compute one check digit from the digits preceding it.

    The weighted sum is taken modulo 11; a remainder below 2 yields 0,
    anything else yields 11 minus the remainder.
    """
    remainder = sum(digit * weight for digit, weight in zip(digits, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def _has_valid_check_digits(
    number: str,
    length: int,
    first_weights: Sequence[int],
    second_weights: Sequence[int],
) -> bool:
    if len(number) != length or not NUMERIC_PATTERN.fullmatch(number):
        return False
    if len(set(number)) == 1:
        return False

    digits = [int(char) for char in number]
    base = digits[:length - 2]

    first = calculate_check_digit(base, first_weights)
    second = calculate_check_digit(base + [first], second_weights)
    return digits[-2] == first and digits[-1] == second


def is_valid_cpf(number: str) -> bool:
    """Check an 11 digit CPF number."""
    return _has_valid_check_digits(number, CPF_LENGTH, CPF_FIRST_WEIGHTS, CPF_SECOND_WEIGHTS)


def is_valid_cnpj(number: str) -> bool:
    """Check a 14 digit CNPJ number."""
    return _has_valid_check_digits(number, CNPJ_LENGTH, CNPJ_FIRST_WEIGHTS, CNPJ_SECOND_WEIGHTS)


class DocumentNumberValidator:
    """CPF / CNPJ validator.

    Absent or empty values are valid; presence is a separate concern.
    Formatting characters (dots, dashes, slashes) are not accepted.
    """

    def __init__(self, resolver: Optional[MessageResolver] = None):
        self._reporter = ViolationReporter(resolver)

    def initialize(self, options: None = None) -> None:
        """Document numbers have no configuration."""

    def is_valid(self, value: Optional[str], sink: Optional[ViolationSink] = None) -> bool:
        """Validate a CPF or CNPJ number."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return True

        if not isinstance(value, str) or not NUMERIC_PATTERN.fullmatch(value):
            self._reporter.report(sink, MessageKeys.CPF_CNPJ_INVALID)
            return False

        number = NON_DIGIT_PATTERN.sub("", value)

        if len(number) == CPF_LENGTH:
            if not is_valid_cpf(number):
                self._reporter.report(sink, MessageKeys.CPF_INVALID_CHECK_DIGIT)
                return False
            return True

        if len(number) == CNPJ_LENGTH:
            if not is_valid_cnpj(number):
                self._reporter.report(sink, MessageKeys.CNPJ_INVALID_CHECK_DIGIT)
                return False
            return True

        self._reporter.report(sink, MessageKeys.CPF_CNPJ_INVALID_LENGTH)
        return False


# Factory function for dependency injection
def create_document_number_validator(resolver: Optional[MessageResolver] = None) -> DocumentNumberValidator:
    """Create document number validator."""
    validator = DocumentNumberValidator(resolver)
    validator.initialize()
    return validator
