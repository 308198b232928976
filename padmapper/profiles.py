"""Named profiles of mapping rules, stored as JSON files."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from padmapper.actions import (
    MacroAction,
    OutputAction,
    VirtualAxisAction,
    VirtualAxisType,
    VirtualButtonAction,
    VirtualButtonType,
)
from padmapper.engine import MappingEngine
from padmapper.events import InputType
from padmapper.rules import IdKind, InputCondition, MappingRule

logger = logging.getLogger(__name__)


class ProfileError(Exception):
    """Raised when a profile cannot be read, parsed or written."""


@dataclass
class Profile:
    """A named set of mapping rules."""

    name: str
    mappings: list[MappingRule] = field(default_factory=list)

    def add_mapping(self, rule: MappingRule) -> None:
        self.mappings.append(rule)


def _get(data: Mapping[str, Any], key: str) -> Any:
    if not isinstance(data, Mapping):
        raise ProfileError(f"expected a JSON object, got {data!r}")
    try:
        return data[key]
    except KeyError:
        raise ProfileError(f"missing key {key!r}") from None


def _get_int(data: Mapping[str, Any], key: str) -> int:
    value = _get(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ProfileError(f"{key!r} must be an integer, got {value!r}")
    return value


def _get_bool(data: Mapping[str, Any], key: str) -> bool:
    value = _get(data, key)
    if not isinstance(value, bool):
        raise ProfileError(f"{key!r} must be a boolean, got {value!r}")
    return value


def _get_str(data: Mapping[str, Any], key: str) -> str:
    value = _get(data, key)
    if not isinstance(value, str):
        raise ProfileError(f"{key!r} must be a string, got {value!r}")
    return value


def condition_to_dict(condition: InputCondition) -> dict[str, Any]:
    result: dict[str, Any] = {"type": int(condition.type), "id_type": int(condition.id_kind)}
    key = "button_id" if condition.id_kind is IdKind.BUTTON else "axis_id"
    result[key] = condition.id
    return result


def condition_from_dict(data: Mapping[str, Any]) -> InputCondition:
    try:
        input_type = InputType(_get_int(data, "type"))
        id_kind = IdKind(_get_int(data, "id_type"))
        key = "button_id" if id_kind is IdKind.BUTTON else "axis_id"
        return InputCondition(input_type, id_kind, _get_int(data, key))
    except ValueError as exc:
        raise ProfileError(f"invalid condition: {exc}") from exc


def action_to_dict(action: OutputAction) -> dict[str, Any]:
    if isinstance(action, VirtualButtonAction):
        return {"type": "VirtualButtonAction", "button": int(action.button), "press": action.press}
    if isinstance(action, VirtualAxisAction):
        return {"type": "VirtualAxisAction", "axis": int(action.axis), "value": action.value}
    if isinstance(action, MacroAction):
        return {"type": "MacroAction", "macro_name": action.macro_name}
    raise ProfileError(f"cannot serialise action {action!r}")


def action_from_dict(data: Mapping[str, Any]) -> OutputAction:
    kind = _get_str(data, "type")
    try:
        if kind == "VirtualButtonAction":
            return VirtualButtonAction(
                VirtualButtonType(_get_int(data, "button")), _get_bool(data, "press")
            )
        if kind == "VirtualAxisAction":
            return VirtualAxisAction(
                VirtualAxisType(_get_int(data, "axis")), _get_int(data, "value")
            )
        if kind == "MacroAction":
            return MacroAction(_get_str(data, "macro_name"))
    except ValueError as exc:
        raise ProfileError(f"invalid action: {exc}") from exc
    raise ProfileError(f"unknown action type {kind!r}")


def rule_to_dict(rule: MappingRule) -> dict[str, Any]:
    return {
        "condition": condition_to_dict(rule.condition),
        "actions": [action_to_dict(action) for action in rule.actions],
    }


def rule_from_dict(data: Mapping[str, Any]) -> MappingRule:
    condition = condition_from_dict(_get(data, "condition"))
    actions = _get(data, "actions")
    if not isinstance(actions, list):
        raise ProfileError(f"'actions' must be a list, got {actions!r}")
    return MappingRule(condition, [action_from_dict(item) for item in actions])


class ProfileManager:
    """Loads, saves and activates profiles for a mapping engine."""

    def __init__(self, engine: MappingEngine) -> None:
        self._engine = engine

    def load_profile(self, filepath: str | os.PathLike[str]) -> Profile:
        """Read a profile file, activate it and return it."""
        try:
            with open(filepath, encoding="utf-8") as handle:
                document = json.load(handle)
        except OSError as exc:
            raise ProfileError(f"Could not open profile file: {filepath}") from exc
        except json.JSONDecodeError as exc:
            raise ProfileError(f"Could not parse profile file {filepath}: {exc}") from exc

        profile = Profile(_get_str(document, "profile_name"))
        mappings = document.get("mappings")
        if isinstance(mappings, list):
            for item in mappings:
                profile.add_mapping(rule_from_dict(item))

        self.activate_profile(profile)
        logger.info("Profile loaded: %s", profile.name)
        return profile

    def save_profile(self, profile: Profile, filepath: str | os.PathLike[str]) -> None:
        """Write a profile as indented JSON."""
        document = {
            "profile_name": profile.name,
            "mappings": [rule_to_dict(rule) for rule in profile.mappings],
        }
        text = json.dumps(document, indent=4)
        try:
            with open(filepath, "w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError as exc:
            raise ProfileError(f"Could not open profile file for saving: {filepath}") from exc
        logger.info("Profile saved: %s to %s", profile.name, filepath)

    def activate_profile(self, profile: Profile) -> None:
        """Make the profile's rules the engine's active rules."""
        self._engine.load_mappings(profile.mappings)
        logger.info("Profile activated: %s", profile.name)