"""Bound accessor value object.

ONLY accessor binding - the result of looking up a named accessor on an
enum type once, at initialization. Either present (a getter that reads the
value from a member) or absent (comparisons fall back to member names).

Following maximum separation architecture - one file = one purpose.
"""

import inspect
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Type

from ..exceptions import AccessorError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundAccessor:
    """Named accessor resolved against an enum type."""

    enum_type: Type[Enum]
    name: Optional[str]
    getter: Optional[Callable[[Enum], Any]] = None
    inherited: bool = False

    @classmethod
    def resolve(cls, enum_type: Type[Enum], name: Optional[str]) -> "BoundAccessor":
        """Look up an attribute, property or zero-argument method on the enum.

        The lookup is static: nothing is invoked at resolution time.
        """
        if not name:
            return cls(enum_type=enum_type, name=name)

        members = list(enum_type)
        sample = members[0] if members else enum_type
        try:
            attribute = inspect.getattr_static(sample, name)
        except AttributeError:
            logger.warning(
                f"The Enum {enum_type.__name__} does not contain the '{name}' accessor; "
                f"member names will be used instead."
            )
            return cls(enum_type=enum_type, name=name)

        # declared by Enum itself, not by the enum type (e.g. the built-in ``value``)
        owner = next((klass for klass in enum_type.__mro__ if name in vars(klass)), None)
        inherited = owner is Enum

        if inspect.isfunction(attribute) or isinstance(attribute, (staticmethod, classmethod)):
            getter = lambda member: getattr(member, name)()
        else:
            getter = lambda member: getattr(member, name)
        return cls(enum_type=enum_type, name=name, getter=getter, inherited=inherited)

    def without_getter(self) -> "BoundAccessor":
        """Same binding with the accessor treated as absent."""
        return BoundAccessor(enum_type=self.enum_type, name=self.name)

    @property
    def is_present(self) -> bool:
        return self.getter is not None

    def read(self, member: Enum) -> Any:
        """Read a member's accessor value, or its name when the accessor is absent.

        Raises:
            AccessorError: If the accessor raises while being invoked
        """
        if self.getter is None:
            return member.name
        try:
            return self.getter(member)
        except Exception as e:
            raise AccessorError(self.name, self.enum_type.__name__, e) from e
