"""Virtual output actions a mapping rule can trigger."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class VirtualButtonType(enum.IntEnum):
    """Virtual buttons, keys and mouse buttons that can be targeted."""

    XBOX_DPAD_UP = 0
    XBOX_DPAD_DOWN = 1
    XBOX_DPAD_LEFT = 2
    XBOX_DPAD_RIGHT = 3
    XBOX_START = 4
    XBOX_BACK = 5
    XBOX_LEFT_THUMB = 6
    XBOX_RIGHT_THUMB = 7
    XBOX_LEFT_SHOULDER = 8
    XBOX_RIGHT_SHOULDER = 9
    XBOX_GUIDE = 10
    XBOX_A = 11
    XBOX_B = 12
    XBOX_X = 13
    XBOX_Y = 14
    KEY_SPACE = 15
    KEY_W = 16
    KEY_A = 17
    KEY_S = 18
    KEY_D = 19
    MOUSE_LEFT_BUTTON = 20
    MOUSE_RIGHT_BUTTON = 21


class VirtualAxisType(enum.IntEnum):
    """Virtual axes that can be targeted."""

    XBOX_LEFT_STICK_X = 0
    XBOX_LEFT_STICK_Y = 1
    XBOX_RIGHT_STICK_X = 2
    XBOX_RIGHT_STICK_Y = 3
    XBOX_LEFT_TRIGGER = 4
    XBOX_RIGHT_TRIGGER = 5
    MOUSE_X = 6
    MOUSE_Y = 7
    MOUSE_SCROLL_WHEEL = 8


@dataclass(frozen=True)
class VirtualButtonAction:
    """Press (or release) a virtual button."""

    button: VirtualButtonType
    press: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "button", VirtualButtonType(self.button))


@dataclass(frozen=True)
class VirtualAxisAction:
    """Set a virtual axis; a value of -1 means "use the source axis value"."""

    axis: VirtualAxisType
    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "axis", VirtualAxisType(self.axis))


@dataclass(frozen=True)
class MacroAction:
    """Run a predefined macro identified by name."""

    macro_name: str


OutputAction = Union[VirtualButtonAction, VirtualAxisAction, MacroAction]