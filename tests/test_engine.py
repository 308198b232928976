import pytest

from padmapper.actions import (
    MacroAction,
    VirtualAxisAction,
    VirtualAxisType,
    VirtualButtonAction,
    VirtualButtonType,
)
from padmapper.controller import XUSB_GAMEPAD_A, ControllerError, VirtualController
from padmapper.engine import USE_SOURCE_VALUE, MappingEngine
from padmapper.events import AxisInput, ButtonInput, InputEvent, InputType
from padmapper.rules import InputCondition, MappingRule


@pytest.fixture
def controller():
    with VirtualController() as pad:
        yield pad


@pytest.fixture
def engine(controller):
    return MappingEngine(controller)


def button_event(button_id, pressed):
    return InputEvent(None, InputType.BUTTON, ButtonInput(button_id, pressed))


def axis_event(axis_id, value):
    return InputEvent(None, InputType.AXIS, AxisInput(axis_id, value))


def a_rule(button_id=0):
    return MappingRule(
        InputCondition.on_button_press(button_id),
        [VirtualButtonAction(VirtualButtonType.XBOX_A, True)],
    )


def test_load_mappings_replaces_rules(engine):
    first, second = a_rule(0), a_rule(1)
    engine.load_mappings([first])
    engine.load_mappings([second])
    assert engine.mappings == (second,)


def test_press_and_release_button_a(engine, controller):
    engine.load_mappings([a_rule(0)])
    engine.process_input(button_event(0, True))
    assert controller.buttons & XUSB_GAMEPAD_A == XUSB_GAMEPAD_A
    engine.process_input(button_event(0, False))
    assert controller.buttons & XUSB_GAMEPAD_A == 0


def test_unmatched_event_does_nothing(engine, controller):
    engine.load_mappings([a_rule(0)])
    assert engine.process_input(button_event(3, True)) is None
    assert controller.buttons == 0


def test_first_matching_rule_wins(engine):
    first = a_rule(0)
    second = MappingRule(InputCondition.on_button_press(0), [MacroAction("combo")])
    engine.load_mappings([first, second])
    assert engine.process_input(button_event(0, True)) is first


def test_other_buttons_do_not_touch_button_a(engine, controller):
    rule = MappingRule(
        InputCondition.on_button_press(0),
        [VirtualButtonAction(VirtualButtonType.XBOX_B, True)],
    )
    engine.load_mappings([rule])
    assert engine.process_input(button_event(0, True)) is rule
    assert controller.buttons == 0


def test_button_action_from_axis_event_is_ignored(engine, controller):
    rule = MappingRule(
        InputCondition.on_axis_move(2),
        [VirtualButtonAction(VirtualButtonType.XBOX_A, True)],
    )
    engine.load_mappings([rule])
    assert engine.process_input(axis_event(2, 500)) is rule
    assert controller.buttons == 0


def test_axis_sentinel_uses_source_value(engine):
    rule = MappingRule(
        InputCondition.on_axis_move(1),
        [VirtualAxisAction(VirtualAxisType.XBOX_LEFT_STICK_X, USE_SOURCE_VALUE)],
    )
    engine.load_mappings([rule])
    engine.process_input(axis_event(1, 1234))
    assert engine.axis_values == {VirtualAxisType.XBOX_LEFT_STICK_X: 1234}


def test_axis_fixed_value_is_kept(engine):
    rule = MappingRule(
        InputCondition.on_axis_move(1),
        [VirtualAxisAction(VirtualAxisType.XBOX_LEFT_TRIGGER, 255)],
    )
    engine.load_mappings([rule])
    engine.process_input(axis_event(1, 17))
    assert engine.axis_values[VirtualAxisType.XBOX_LEFT_TRIGGER] == 255


def test_uninitialized_controller_raises():
    engine = MappingEngine(VirtualController())
    engine.load_mappings([a_rule(0)])
    with pytest.raises(ControllerError):
        engine.process_input(button_event(0, True))