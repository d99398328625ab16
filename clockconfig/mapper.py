# clockconfig/mapper.py
"""
Configuration <-> form fields <-> JSON.

The form is modelled as a FieldSet: input values keyed by element id, the
set of hidden sections and the set of disabled inputs. Whatever renders the
page reads and writes the FieldSet; nothing here knows about a DOM.
"""
from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from .colour import html_to_triple, triple_to_html, zero_pad
from .models import (
    ACTIVATION_OPTIONS,
    DEFAULT_BRIGHTNESS,
    DEFAULT_PATTERN,
    DEFAULT_RADIO_FREQUENCY,
    DISPLAY_SLOTS,
    PATTERN_OPTIONS,
    UNKNOWN_VERSION,
    Configuration,
    _f,
    _i,
)

RADIO_SECTION = "radioSettings"
ALARM_SECTIONS = ("alarm", "alarmDisplay")

# pattern input -> colour input it controls
PATTERN_COLOUR_PAIRS: Dict[str, str] = {
    f"{slot}Pattern": f"{slot}Colour" for slot in DISPLAY_SLOTS
}


def derive_colour_enabled(pattern: Any) -> bool:
    """Rainbow patterns pick their own colours, so the colour input is disabled."""
    return not (isinstance(pattern, str) and "RAINBOW" in pattern)


# ── alarm time ────────────────────────────────────────────────────────────────
def minutes_to_hhmm(minutes: int) -> str:
    minutes = int(minutes or 0)
    return zero_pad((minutes // 60) % 24, 2) + ":" + zero_pad(minutes % 60, 2)


def hhmm_to_minutes(value: Any) -> int:
    s = value if isinstance(value, str) else ""
    if len(s) < 5:
        s = "00:00"
    hour = _i(s[:2], 0) % 24
    minute = _i(s[3:5], 0) % 60
    return hour * 60 + minute


# ── field set ─────────────────────────────────────────────────────────────────
@dataclass
class FieldSet:
    values: Dict[str, Any] = field(default_factory=dict)
    hidden: Set[str] = field(default_factory=set)
    disabled: Set[str] = field(default_factory=set)
    options: Dict[str, List[str]] = field(
        default_factory=lambda: {
            "alarmActivation": list(ACTIVATION_OPTIONS),
            **{name: list(PATTERN_OPTIONS) for name in PATTERN_COLOUR_PAIRS},
        }
    )
    version: str = UNKNOWN_VERSION

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def set(self, name: str, value: Any) -> None:
        self.values[name] = value
        if name in PATTERN_COLOUR_PAIRS:
            self._recheck(name)

    def is_visible(self, section: str) -> bool:
        return section not in self.hidden

    def show(self, section: str) -> None:
        self.hidden.discard(section)

    def hide(self, section: str) -> None:
        self.hidden.add(section)

    def is_enabled(self, name: str) -> bool:
        return name not in self.disabled

    def _recheck(self, pattern_name: str) -> None:
        colour_name = PATTERN_COLOUR_PAIRS[pattern_name]
        if derive_colour_enabled(self.values.get(pattern_name)):
            self.disabled.discard(colour_name)
        else:
            self.disabled.add(colour_name)

    def recheck_patterns(self) -> None:
        for pattern_name in PATTERN_COLOUR_PAIRS:
            self._recheck(pattern_name)


# ── mapping ───────────────────────────────────────────────────────────────────
def to_fields(cfg: Configuration, fields: Optional[FieldSet] = None) -> FieldSet:
    """
    Render a Configuration into form fields.
    An existing FieldSet keeps its select options; values and visibility are replaced.
    """
    fs = fields if fields is not None else FieldSet()
    fs.values = {}
    fs.hidden = set()
    fs.disabled = set()

    fs.set("deviceName", cfg.device_name)
    fs.set("alarmTime", minutes_to_hhmm(cfg.alarm_time))
    fs.set("alarmActivation", cfg.alarm_activation or "")

    # Only the alarm sections; radio visibility stays the installed flag
    if cfg.is_alarm_disabled:
        for section in ALARM_SECTIONS:
            fs.hide(section)
    if not cfg.is_radio_installed:
        fs.hide(RADIO_SECTION)
    else:
        freq = cfg.radio_frequency
        fs.set("radioFrequency", str(freq if freq is not None else DEFAULT_RADIO_FREQUENCY))
        use_radio = bool(cfg.is_use_radio)
        fs.set("useRadio", use_radio)
        fs.set("useBuzzer", not use_radio)

    fs.set("brightness", str(cfg.brightness if cfg.brightness is not None else DEFAULT_BRIGHTNESS))
    fs.set("twelveHour", not cfg.is_24_hour)
    fs.set("twentyFourHour", cfg.is_24_hour)
    fs.set("latitude", str(cfg.latitude or 0))
    fs.set("longitude", str(cfg.longitude or 0))
    fs.set("timezone", cfg.timezone or "")
    fs.set("offset", str(cfg.offset or 0))

    for slot in DISPLAY_SLOTS:
        fs.set(f"{slot}Pattern", cfg.pattern(slot) or DEFAULT_PATTERN)
        fs.set(f"{slot}Colour", triple_to_html(cfg.colour(slot)))

    fs.version = cfg.version or UNKNOWN_VERSION
    fs.recheck_patterns()
    return fs


def from_fields(fields: FieldSet) -> Configuration:
    installed = fields.is_visible(RADIO_SECTION)
    return Configuration(
        device_name=str(fields.get("deviceName") or ""),
        alarm_time=hhmm_to_minutes(fields.get("alarmTime") or ""),
        alarm_activation=str(fields.get("alarmActivation") or ""),
        is_radio_installed=installed,
        radio_frequency=(
            _f(fields.get("radioFrequency"), DEFAULT_RADIO_FREQUENCY)
            if installed
            else None
        ),
        is_use_radio=bool(fields.get("useRadio")) if installed else None,
        brightness=_i(fields.get("brightness"), DEFAULT_BRIGHTNESS),
        is_24_hour=bool(fields.get("twentyFourHour")),
        latitude=_f(fields.get("latitude"), 0.0),
        longitude=_f(fields.get("longitude"), 0.0),
        timezone=str(fields.get("timezone") or ""),
        offset=_i(fields.get("offset"), 0),
        day_pattern=str(fields.get("dayPattern") or DEFAULT_PATTERN),
        day_colour=html_to_triple(fields.get("dayColour")),
        night_pattern=str(fields.get("nightPattern") or DEFAULT_PATTERN),
        night_colour=html_to_triple(fields.get("nightColour")),
        alarm_pattern=str(fields.get("alarmPattern") or DEFAULT_PATTERN),
        alarm_colour=html_to_triple(fields.get("alarmColour")),
        is_alarm_disabled=not all(fields.is_visible(s) for s in ALARM_SECTIONS),
        version=fields.version,
    )


def to_json(cfg: Configuration, *, editable_only: bool = True) -> str:
    return json.dumps(cfg.to_dict(editable_only=editable_only), indent=2)


def from_json(text: str) -> Configuration:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("configuration must be a JSON object")
    return Configuration.from_dict(data)


def form_to_json(fields: FieldSet) -> str:
    """The document the editor posts on save."""
    return to_json(from_fields(fields))
