"""A simulated virtual Xbox 360 controller attached to a virtual bus."""

from __future__ import annotations

import enum
import logging

logger = logging.getLogger(__name__)

XUSB_GAMEPAD_A = 0x1000
"""Button bit for the A button in an Xbox 360 report."""


class TargetType(enum.IntEnum):
    """Kinds of virtual device that can be plugged into the bus."""

    XBOX360_WIRED = 0


class ControllerError(RuntimeError):
    """Raised when the virtual controller cannot do what was asked."""


class VirtualController:
    """A virtual Xbox 360 pad whose button state is kept in a report bitmask."""

    def __init__(self) -> None:
        self._client_connected = False
        self._target: TargetType | None = None
        self._initialized = False
        self._buttons = 0

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def target(self) -> TargetType | None:
        return self._target

    @property
    def buttons(self) -> int:
        """Current button bitmask of the virtual pad."""
        return self._buttons

    def initialize(self) -> None:
        """Connect to the bus and plug in the virtual pad; does nothing if already done."""
        if self._initialized:
            return
        logger.info("Initializing virtual bus client...")
        self._client_connected = True
        logger.info("Virtual bus client connected.")
        logger.info("Allocating Xbox 360 virtual controller...")
        self._target = TargetType.XBOX360_WIRED
        self._buttons = 0
        logger.info("Virtual Xbox 360 controller added and ready.")
        self._initialized = True

    def shutdown(self) -> None:
        """Unplug the virtual pad and disconnect; does nothing if not initialized."""
        if not self._initialized:
            return
        logger.info("Shutting down virtual controller...")
        self._target = None
        self._buttons = 0
        self._client_connected = False
        self._initialized = False
        logger.info("Virtual controller shut down.")

    def _require_ready(self, what: str) -> None:
        if not self._initialized or self._target is None:
            raise ControllerError(f"Virtual controller not initialized. Cannot {what}.")

    def press_button_a(self) -> None:
        """Press the A button on the virtual pad."""
        self._require_ready("press button A")
        self._buttons |= XUSB_GAMEPAD_A
        logger.info("Simulating Button A Press on virtual Xbox 360 controller.")

    def release_button_a(self) -> None:
        """Release the A button on the virtual pad."""
        self._require_ready("release button A")
        self._buttons &= ~XUSB_GAMEPAD_A
        logger.info("Simulating Button A Release on virtual Xbox 360 controller.")

    def __enter__(self) -> VirtualController:
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()