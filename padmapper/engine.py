"""Translate physical input events into virtual controller output."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from padmapper.actions import (
    MacroAction,
    OutputAction,
    VirtualAxisAction,
    VirtualAxisType,
    VirtualButtonAction,
    VirtualButtonType,
)
from padmapper.controller import VirtualController
from padmapper.events import AxisInput, ButtonInput, InputEvent
from padmapper.rules import MappingRule

logger = logging.getLogger(__name__)

USE_SOURCE_VALUE = -1
"""Axis action value meaning "pass the source axis value through"."""


class MappingEngine:
    """Matches events against the active rules and drives the virtual controller."""

    def __init__(self, controller: VirtualController) -> None:
        self._controller = controller
        self._mappings: list[MappingRule] = []
        self._axis_values: dict[VirtualAxisType, int] = {}

    @property
    def controller(self) -> VirtualController:
        return self._controller

    @property
    def mappings(self) -> tuple[MappingRule, ...]:
        """The currently active rules, in matching order."""
        return tuple(self._mappings)

    @property
    def axis_values(self) -> dict[VirtualAxisType, int]:
        """Last value applied to each virtual axis."""
        return dict(self._axis_values)

    def load_mappings(self, rules: Iterable[MappingRule]) -> None:
        """Replace the active rules with the given ones."""
        self._mappings = list(rules)
        logger.info("MappingEngine: Loaded %d mapping rules.", len(self._mappings))

    def process_input(self, event: InputEvent) -> MappingRule | None:
        """Run the actions of the first rule the event triggers and return that rule."""
        rule = next((r for r in self._mappings if r.is_triggered_by(event)), None)
        if rule is None:
            return None
        logger.info("MappingEngine: Rule triggered by input.")
        for action in rule.actions:
            self._execute(action, event)
        return rule

    def _execute(self, action: OutputAction, source: InputEvent) -> None:
        logger.debug("MappingEngine: Executing action.")
        if isinstance(action, VirtualButtonAction):
            self._execute_button(action, source)
        elif isinstance(action, VirtualAxisAction):
            self._execute_axis(action, source)
        elif isinstance(action, MacroAction):
            logger.info("  Action Type: Macro, Name: %s", action.macro_name)
        else:
            logger.info("  Action Type: Unknown or not yet implemented.")

    def _execute_button(self, action: VirtualButtonAction, source: InputEvent) -> None:
        if not isinstance(source.data, ButtonInput):
            logger.warning("VirtualButtonAction triggered by a non-button input event.")
            return
        pressed = source.data.is_pressed
        logger.info(
            "  Action Type: VirtualButton, Button: %d, Should Press: %s",
            int(action.button),
            pressed,
        )
        if action.button is VirtualButtonType.XBOX_A:
            if pressed:
                self._controller.press_button_a()
            else:
                self._controller.release_button_a()

    def _execute_axis(self, action: VirtualAxisAction, source: InputEvent) -> None:
        logger.info(
            "  Action Type: VirtualAxis, Axis: %d, Value: %d", int(action.axis), action.value
        )
        value = action.value
        if isinstance(source.data, AxisInput) and action.value == USE_SOURCE_VALUE:
            value = source.data.value
            logger.info("  Using source axis value: %d", value)
        self._axis_values[action.axis] = value