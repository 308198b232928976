# padmapper

padmapper maps input from a physical gamepad onto a virtual Xbox 360 style
controller. Mapping rules decide which physical button or axis drives which
virtual button or axis. Profiles are named sets of rules and are stored as
JSON files.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Running the service

```
padmapper
padmapper --profile racing.json
```

The `padmapper` command (`padmapper.service:main`) starts a virtual
controller. It then loads either the built-in test mapping, in which physical
button 0 drives the virtual `A` button, or the rules of the profile given
with `--profile`. After that it reads HID reports from standard input, one
hex-encoded report per line, for example:

```
printf '01\n00\n' | padmapper
```

Each report goes through `RawInputHandler.process_report`. Blank lines are
skipped. A line that is not valid hex is reported on standard error and then
skipped. The service stops at end of input or on Ctrl+C. Progress is logged
at INFO level. If the profile cannot be loaded, the command exits with
status 1.

## Using the library

```python
from padmapper.actions import VirtualButtonAction, VirtualButtonType
from padmapper.controller import VirtualController
from padmapper.engine import MappingEngine
from padmapper.events import ButtonInput, InputEvent, InputType
from padmapper.rules import InputCondition, MappingRule

with VirtualController() as controller:
    engine = MappingEngine(controller)
    rule = MappingRule(
        InputCondition.on_button_press(0),
        [VirtualButtonAction(VirtualButtonType.XBOX_A, True)],
    )
    engine.load_mappings([rule])
    engine.process_input(InputEvent(None, InputType.BUTTON, ButtonInput(0, True)))
    print(hex(controller.buttons))  # 0x1000: A is held
```

- `padmapper.events` holds `InputType`, `ButtonInput`, `AxisInput` and
  `InputEvent`. Button and axis ids must fit in 16 bits, or `ValueError` is
  raised.
- `padmapper.actions` holds `VirtualButtonType`, `VirtualAxisType`,
  `VirtualButtonAction`, `VirtualAxisAction` and `MacroAction`.
- `padmapper.rules` holds `InputCondition`, which has the constructors
  `on_button_press` and `on_axis_move`, and `MappingRule`, which has
  `is_triggered_by`.
- `MappingEngine.process_input` finds the first active rule that the event
  triggers, runs its actions and returns that rule. It returns `None` if no
  rule matches. A button action presses or releases the virtual button to
  match the state of the source button. A button action triggered by an axis
  event is ignored and a warning is logged. For an axis action with value
  `-1`, the value of the source axis is passed through. The last value applied
  to each virtual axis can be read from `MappingEngine.axis_values`.
- `VirtualController` keeps the pad's button state as a bitmask in `buttons`.
  It can be used as a context manager, which calls `initialize` and
  `shutdown`. Calling `press_button_a` or `release_button_a` before
  `initialize` raises `ControllerError`.

### Profiles

```python
from padmapper.profiles import Profile, ProfileManager

profile = Profile("racing")
profile.add_mapping(rule)

manager = ProfileManager(engine)
manager.save_profile(profile, "racing.json")
loaded = manager.load_profile("racing.json")  # also activates it
```

A profile file looks like this:

```json
{
    "profile_name": "racing",
    "mappings": [
        {
            "condition": {"type": 1, "id_type": 0, "button_id": 0},
            "actions": [{"type": "VirtualButtonAction", "button": 11, "press": true}]
        }
    ]
}
```

Besides `VirtualButtonAction`, an action can be of type `VirtualAxisAction`,
with the keys `axis` and `value`, or `MacroAction`, with the key
`macro_name`. The functions `condition_to_dict`, `condition_from_dict`,
`action_to_dict`, `action_from_dict`, `rule_to_dict` and `rule_from_dict`
convert between these dictionaries and the rule objects. `ProfileError` is
raised when a file cannot be opened, parsed or written, or when an entry is
missing a key or holds a value of the wrong type.

### Devices and raw input

`padmapper.devices.parse_hardware_ids` takes a hardware ID string such as
`HID\VID_1234&PID_ABCD` and returns the pair `("1234", "ABCD")`. An ID that
is missing comes back as an empty string. `make_device` builds an
`InputDevice` from a description, a friendly name and a hardware ID string.

`RawInputHandler.process_report` reads bit 0 of the first byte of a report as
the state of button 0. It sends the resulting event to the engine and
returns the event. An empty report produces no event.

## What padmapper does not do

- The virtual controller is simulated in memory. No virtual device is
  created on the system.
- Only the virtual `A` button reaches the controller. Other button actions
  are logged, axis actions are only recorded in `axis_values`, and macro
  actions are only logged.
- Devices are not enumerated and input is not captured from the operating
  system. Reports have to be supplied by the caller, or on standard input
  to the command. HID report descriptors are not parsed.

## Running the tests

```
pytest
```