"""Base exceptions for neo-validators.

All exceptions inherit from NeoValidatorsError and carry an error code and
structured details. Validators convert them into violations at their
public boundary; they only reach callers of the lower-level building blocks
(decoder, accessors, temporal values).
"""

from typing import Any, Dict, Optional


class NeoValidatorsError(Exception):
    """Base exception for all neo-validators errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

