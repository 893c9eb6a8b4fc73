"""Direction tags selecting the variant of mirror, rotate and repeat."""
from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar, Union

from .errors import InvalidParameterError


class MirrorDirection(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class RotateDirection(Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter-clockwise"


class RepeatDirection(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


_ALIASES = {
    "cw": "clockwise",
    "ccw": "counter-clockwise",
    "counterclockwise": "counter-clockwise",
}

E = TypeVar("E", MirrorDirection, RotateDirection, RepeatDirection)


def parse_direction(enum_cls: Type[E], value: Union[E, str]) -> E:
    """Coerce ``value`` to a member of ``enum_cls``.

    Members pass through unchanged. Strings are matched case-insensitively
    against the member values (``"vertical"``) or names (``"VERTICAL"``),
    with ``cw``/``ccw`` accepted for rotation.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        key = _ALIASES.get(key, key)
        for member in enum_cls:
            if key in (member.value, member.name.lower()):
                return member
    choices = ", ".join(m.value for m in enum_cls)
    raise InvalidParameterError(
        f"Unknown {enum_cls.__name__}: {value!r} (expected one of: {choices})"
    )


__all__ = ["MirrorDirection", "RotateDirection", "RepeatDirection", "parse_direction"]
