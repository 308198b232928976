"""Command that runs the mapping service on HID reports read from standard input."""

from __future__ import annotations

import argparse
import logging
import sys

from padmapper.actions import VirtualButtonAction, VirtualButtonType
from padmapper.controller import ControllerError, VirtualController
from padmapper.engine import MappingEngine
from padmapper.profiles import ProfileError, ProfileManager
from padmapper.rawinput import RawInputHandler
from padmapper.rules import InputCondition, MappingRule

_DEVICE_ID = "stdin"


def setup_test_mappings(engine: MappingEngine) -> MappingRule:
    """Load the built-in rule mapping physical button 0 to the virtual A button."""
    print("\nSetting up test mappings...")
    rule = MappingRule(
        InputCondition.on_button_press(0),
        [VirtualButtonAction(VirtualButtonType.XBOX_A, press=True)],
    )
    engine.load_mappings([rule])
    return rule


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="padmapper",
        description="Map HID reports (one hex-encoded report per line on stdin) "
        "onto a virtual Xbox 360 controller.",
    )
    parser.add_argument(
        "--profile", help="JSON profile to activate instead of the built-in test mapping"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    print("Core Service Starting...")
    controller = VirtualController()
    try:
        controller.initialize()
    except ControllerError as exc:
        print(f"Failed to initialize virtual controller. Exiting. ({exc})", file=sys.stderr)
        return 1
    print("Virtual controller initialized successfully.")

    with controller:
        engine = MappingEngine(controller)
        if args.profile:
            try:
                profile = ProfileManager(engine).load_profile(args.profile)
            except ProfileError as exc:
                print(f"Failed to load profile: {exc}. Exiting.", file=sys.stderr)
                return 1
            print(f"Loaded profile: {profile.name}")
        else:
            setup_test_mappings(engine)

        handler = RawInputHandler(engine)
        print("\nCore service is running. Pressing physical button 0 should now "
              "trigger virtual Xbox 'A' button.")
        print("Waiting for raw input... (one hex-encoded report per line, end of input to exit)")

        try:
            for number, line in enumerate(sys.stdin, start=1):
                text = line.strip()
                if not text:
                    continue
                try:
                    report = bytes.fromhex(text)
                except ValueError:
                    print(f"Line {number}: invalid hex report {text!r}", file=sys.stderr)
                    continue
                handler.process_report(_DEVICE_ID, report)
        except KeyboardInterrupt:
            pass

    print("Core Service Shutting Down...")
    return 0


if __name__ == "__main__":
    sys.exit(main())