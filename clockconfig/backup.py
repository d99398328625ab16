# clockconfig/backup.py
"""
Validation of pasted backup documents.

Every rule is checked and all failures are reported together; a backup with
any failure must not reach the store.

Type checks are strict: booleans must be JSON booleans and numeric fields
must be JSON numbers (a boolean is not a number). The older browser editor
tested the wrapper type instead of the value and therefore accepted anything
in these positions; that permissiveness is intentionally not carried over.
"""
from __future__ import annotations
from numbers import Real
from typing import Any, Iterable, List, Mapping, Optional

from .models import ACTIVATION_OPTIONS, DISPLAY_SLOTS, PATTERN_OPTIONS

MAX_NAME_LEN = 20
MAX_TIMEZONE_LEN = 20
MINUTES_PER_DAY = 1440
RADIO_MIN_MHZ = 88.0
RADIO_MAX_MHZ = 107.9


def is_number(v: Any) -> bool:
    return isinstance(v, Real) and not isinstance(v, bool)


def in_range(v: Any, lo: float, hi: float) -> bool:
    return is_number(v) and lo <= v <= hi


def _text_ok(v: Any, max_len: int) -> bool:
    return isinstance(v, str) and v.strip() != "" and len(v) <= max_len


def is_rainbow(pattern: Any) -> bool:
    return isinstance(pattern, str) and "RAINBOW" in pattern


class BackupValidator:
    """
    Checks a decoded backup against the configuration schema.
    Option lists default to what the device firmware understands.
    """

    def __init__(
        self,
        activation_options: Optional[Iterable[str]] = None,
        pattern_options: Optional[Iterable[str]] = None,
    ) -> None:
        self.activation_options = list(
            activation_options if activation_options is not None else ACTIVATION_OPTIONS
        )
        self.pattern_options = list(
            pattern_options if pattern_options is not None else PATTERN_OPTIONS
        )

    def validate(self, doc: Any) -> List[str]:
        if not isinstance(doc, Mapping):
            return ["Backup must be a JSON object"]
        errors: List[str] = []

        if not _text_ok(doc.get("deviceName"), MAX_NAME_LEN):
            errors.append("Invalid deviceName")
        alarm_time = doc.get("alarmTime")
        if not (is_number(alarm_time) and 0 <= alarm_time < MINUTES_PER_DAY):
            errors.append("Bad alarm time")
        activation = doc.get("alarmActivation")
        if not (isinstance(activation, str) and activation.strip() in self.activation_options):
            errors.append("Missing alarm activation")

        installed = doc.get("isRadioInstalled")
        if not isinstance(installed, bool):
            errors.append("Missing radio installed")
        elif installed:
            if not in_range(doc.get("radioFrequency"), RADIO_MIN_MHZ, RADIO_MAX_MHZ):
                errors.append("Invalid radio frequency")
            if not isinstance(doc.get("isUseRadio"), bool):
                errors.append("Invalid use radio flag")

        if not in_range(doc.get("brightness"), 1, 15):
            errors.append("Invalid brightness")
        if not isinstance(doc.get("is24Hour"), bool):
            errors.append("Invalid 24 hour flag")
        if not in_range(doc.get("latitude"), -90.0, 90.0):
            errors.append("Invalid latitude")
        if not in_range(doc.get("longitude"), -180.0, 180.0):
            errors.append("Invalid longitude")
        if not _text_ok(doc.get("timezone"), MAX_TIMEZONE_LEN):
            errors.append("Invalid timezone")
        if not in_range(doc.get("offset"), -12, 12):
            errors.append("Invalid offset")

        for slot in DISPLAY_SLOTS:
            errors.extend(
                self.validate_display(
                    slot, doc.get(f"{slot}Pattern"), doc.get(f"{slot}Colour")
                )
            )
        return errors

    def validate_display(self, slot: str, pattern: Any, colour: Any) -> List[str]:
        errors: List[str] = []
        if not (isinstance(pattern, str) and pattern.strip() in self.pattern_options):
            errors.append(f"Invalid {slot} pattern")
        if not is_rainbow(pattern) and not is_colour_triple(colour):
            errors.append(f"Invalid {slot} colour")
        return errors


def is_colour_triple(colour: Any) -> bool:
    return (
        isinstance(colour, list)
        and len(colour) == 3
        and all(in_range(c, 0, 255) for c in colour)
    )


def validate(doc: Any) -> List[str]:
    return BackupValidator().validate(doc)


def format_errors(errors: Iterable[str]) -> str:
    """Notification markup for a rejected backup."""
    items = "".join(f"<li>{e}</li>" for e in errors)
    return f"Invalid backup data:<br><ul>{items}</ul>"
