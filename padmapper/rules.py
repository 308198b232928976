"""Mapping rules: a condition on physical input and the actions it triggers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from padmapper.actions import OutputAction
from padmapper.events import MAX_CONTROL_ID, AxisInput, ButtonInput, InputEvent, InputType


class IdKind(enum.IntEnum):
    """Whether a condition's identifier names a button or an axis."""

    BUTTON = 0
    AXIS = 1


@dataclass(frozen=True)
class InputCondition:
    """Matches events of a given type coming from one button or axis."""

    type: InputType = InputType.UNKNOWN
    id_kind: IdKind = IdKind.BUTTON
    id: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", InputType(self.type))
        object.__setattr__(self, "id_kind", IdKind(self.id_kind))
        if not 0 <= self.id <= MAX_CONTROL_ID:
            raise ValueError(f"id must be between 0 and {MAX_CONTROL_ID}, got {self.id}")

    @classmethod
    def on_button_press(cls, button_id: int) -> InputCondition:
        """Condition triggered by the given physical button."""
        return cls(InputType.BUTTON, IdKind.BUTTON, button_id)

    @classmethod
    def on_axis_move(cls, axis_id: int) -> InputCondition:
        """Condition triggered by the given physical axis."""
        return cls(InputType.AXIS, IdKind.AXIS, axis_id)


@dataclass
class MappingRule:
    """One condition that triggers one or more output actions."""

    condition: InputCondition = field(default_factory=InputCondition)
    actions: list[OutputAction] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.actions = list(self.actions)

    def is_triggered_by(self, event: InputEvent) -> bool:
        """Whether the event matches this rule's condition."""
        if event.type != self.condition.type:
            return False
        if self.condition.id_kind is IdKind.BUTTON and isinstance(event.data, ButtonInput):
            return event.data.id == self.condition.id
        if self.condition.id_kind is IdKind.AXIS and isinstance(event.data, AxisInput):
            return event.data.id == self.condition.id
        return False