"""Rule-based mapping of gamepad HID reports onto a simulated virtual controller."""

__version__ = "0.1.0"