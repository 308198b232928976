"""Descriptions of physical HID input devices."""

from __future__ import annotations

from dataclasses import dataclass

_ID_LENGTH = 4


@dataclass(frozen=True)
class InputDevice:
    """A physical input device as reported by the system."""

    name: str = ""
    instance_id: str = ""
    vendor_id: str = ""
    product_id: str = ""


def _find_id(text: str, tag: str) -> str:
    pos = text.find(tag)
    if pos < 0:
        return ""
    start = pos + len(tag)
    return text[start : start + _ID_LENGTH]


def parse_hardware_ids(hardware_ids: str) -> tuple[str, str]:
    """Extract the vendor and product ids from a hardware id string.

    Hardware ids look like ``HID\\VID_xxxx&PID_yyyy&REV_zzzz``. A multi-string
    value is read up to its first NUL. Missing ids come back as empty strings.
    """
    first = hardware_ids.split("\0", 1)[0]
    return _find_id(first, "VID_"), _find_id(first, "PID_")


def make_device(description: str, friendly_name: str, hardware_ids: str) -> InputDevice:
    """Build a device record from its registry properties.

    The description serves as instance id, and as name when there is no
    friendly name.
    """
    vendor_id, product_id = parse_hardware_ids(hardware_ids)
    return InputDevice(
        name=friendly_name or description,
        instance_id=description,
        vendor_id=vendor_id,
        product_id=product_id,
    )