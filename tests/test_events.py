import pytest

from padmapper.events import (
    MAX_CONTROL_ID,
    AxisInput,
    ButtonInput,
    InputEvent,
    InputType,
)


def test_input_type_order_matches_declaration():
    names = [InputType(value).name for value in range(5)]
    assert names == [
        "UNKNOWN",
        "BUTTON",
        "AXIS",
        "TRIGGER",
        "HAT_SWITCH",
    ]
    with pytest.raises(ValueError):
        InputType(5)


def test_event_timestamp_defaults_to_zero():
    event = InputEvent("pad", InputType.BUTTON, ButtonInput(0, True))
    assert event.timestamp == 0
    assert event.data.is_pressed is True


def test_event_type_accepts_plain_int():
    event = InputEvent("pad", int(InputType.AXIS), AxisInput(2, -5))
    assert event.type is InputType.AXIS


def test_event_rejects_unknown_type_value():
    with pytest.raises(ValueError):
        InputEvent("pad", 99, ButtonInput(0, False))


def test_event_rejects_foreign_data():
    with pytest.raises(TypeError):
        InputEvent("pad", InputType.BUTTON, {"id": 0})


@pytest.mark.parametrize("bad", [-1, MAX_CONTROL_ID + 1])
def test_button_id_out_of_range(bad):
    with pytest.raises(ValueError):
        ButtonInput(bad, True)


@pytest.mark.parametrize("bad", [-1, MAX_CONTROL_ID + 1])
def test_axis_id_out_of_range(bad):
    with pytest.raises(ValueError):
        AxisInput(bad, 0)


def test_max_id_is_accepted_and_equal_events_compare_equal():
    first = InputEvent(1, InputType.AXIS, AxisInput(MAX_CONTROL_ID, 7))
    second = InputEvent(1, InputType.AXIS, AxisInput(MAX_CONTROL_ID, 7))
    assert first == second
    assert first.data.id == MAX_CONTROL_ID


def test_events_are_immutable():
    event = InputEvent("pad", InputType.BUTTON, ButtonInput(3, False))
    with pytest.raises(AttributeError):
        event.timestamp = 10
    assert event.timestamp == 0
    assert event.data.id == 3