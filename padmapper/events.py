"""Physical input events as seen by the mapping engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

MAX_CONTROL_ID = 0xFFFF
"""Largest button or axis identifier a device can report (16 bits)."""


def _check_control_id(value: int, what: str) -> int:
    if not 0 <= value <= MAX_CONTROL_ID:
        raise ValueError(f"{what} must be between 0 and {MAX_CONTROL_ID}, got {value}")
    return value


class InputType(enum.IntEnum):
    """Kind of physical control that produced an event."""

    UNKNOWN = 0
    BUTTON = 1
    AXIS = 2
    TRIGGER = 3
    HAT_SWITCH = 4


@dataclass(frozen=True)
class ButtonInput:
    """State of one physical button."""

    id: int
    is_pressed: bool

    def __post_init__(self) -> None:
        _check_control_id(self.id, "button id")


@dataclass(frozen=True)
class AxisInput:
    """Raw value of one physical axis."""

    id: int
    value: int

    def __post_init__(self) -> None:
        _check_control_id(self.id, "axis id")


InputData = Union[ButtonInput, AxisInput]


@dataclass(frozen=True)
class InputEvent:
    """A standardised input event coming from a physical device."""

    device_id: object
    type: InputType
    data: InputData
    timestamp: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", InputType(self.type))
        if not isinstance(self.data, (ButtonInput, AxisInput)):
            raise TypeError(f"unsupported input data: {self.data!r}")