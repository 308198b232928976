"""Turn raw HID reports into standardised input events."""

from __future__ import annotations

import logging

from padmapper.engine import MappingEngine
from padmapper.events import ButtonInput, InputEvent, InputType

logger = logging.getLogger(__name__)

GENERIC_DESKTOP_PAGE = 0x01
"""HID usage page of the devices listened to."""
USAGE_JOYSTICK = 0x04
USAGE_GAMEPAD = 0x05
REGISTERED_USAGES = ((GENERIC_DESKTOP_PAGE, USAGE_GAMEPAD), (GENERIC_DESKTOP_PAGE, USAGE_JOYSTICK))
"""Usage page and usage of every device class the handler accepts input from."""

_BUTTON_0_MASK = 0x01


class RawInputHandler:
    """Decodes HID reports and hands the resulting events to a mapping engine.

    The report layout is assumed, not parsed from a descriptor: button 0 is
    the lowest bit of the first byte.
    """

    def __init__(self, engine: MappingEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> MappingEngine:
        return self._engine

    def process_report(self, device_id: object, report: bytes) -> InputEvent | None:
        """Decode one report, feed it to the engine and return the event.

        An empty report yields no event and returns None.
        """
        data = bytes(report)
        if not data:
            return None
        pressed = bool(data[0] & _BUTTON_0_MASK)
        event = InputEvent(device_id, InputType.BUTTON, ButtonInput(0, pressed))
        self._engine.process_input(event)
        return event