from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Dict, Any, List

ACTIVATION_OPTIONS: List[str] = ["ALARM_DISABLED", "ONE_TIME", "WEEKDAYS", "ALL_DAYS"]
PATTERN_OPTIONS: List[str] = [
    "SOLID_COLOUR",
    "RAINBOW_DIGITS",
    "RAINBOW_SEGMENTS",
    "FLASHING",
    "PULSING",
]
DISPLAY_SLOTS = ("day", "night", "alarm")

# Keys a client may change; everything else (version, isAlarmDisabled) is device-owned.
EDITABLE_FIELDS = (
    "deviceName",
    "alarmTime",
    "alarmActivation",
    "isRadioInstalled",
    "radioFrequency",
    "isUseRadio",
    "brightness",
    "is24Hour",
    "latitude",
    "longitude",
    "timezone",
    "offset",
    "dayPattern",
    "dayColour",
    "nightPattern",
    "nightColour",
    "alarmPattern",
    "alarmColour",
)

# Literal document written the first time the store is read.
STORE_DEFAULTS: Dict[str, Any] = {
    "deviceName": "Test Clock",
    "alarmTime": 360,
    "alarmActivation": "ALARM_DISABLED",
    "isRadioInstalled": True,
    "radioFrequency": 99.3,
    "isUseRadio": False,
    "brightness": 15,
    "is24Hour": True,
    "latitude": -31.9514,
    "longitude": 115.8617,
    "timezone": "UTC",
    "offset": 0,
    "dayPattern": "RAINBOW_DIGITS",
    "dayColour": [255, 255, 255],
    "nightPattern": "SOLID_COLOUR",
    "nightColour": [255, 0, 0],
    "alarmPattern": "RAINBOW_DIGITS",
    "alarmColour": [0, 0, 255],
    "isAlarmDisabled": False,
    "version": "1.0",
}

# Fallbacks used when a loaded document lacks a value.
DEFAULT_BRIGHTNESS = 15
DEFAULT_PATTERN = "SOLID_COLOUR"
DEFAULT_RADIO_FREQUENCY = 88.0
UNKNOWN_VERSION = "unknown"


def _i(v, d=None):
    if v in (None, "") or isinstance(v, bool):
        return d
    try:
        return int(v)
    except (TypeError, ValueError):
        return d


def _f(v, d=None):
    if v in (None, "") or isinstance(v, bool):
        return d
    try:
        return float(v)
    except (TypeError, ValueError):
        return d


def _b(v, d: bool) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "y", "on"):
            return True
        if s in ("0", "false", "no", "n", "off"):
            return False
    return d


def _s(v, d: str = "") -> str:
    return v if isinstance(v, str) else d


@dataclass
class Configuration:
    device_name: str = ""
    # Minutes after midnight
    alarm_time: int = 0
    alarm_activation: str = ""

    # Radio values only carry meaning when is_radio_installed is set
    is_radio_installed: bool = False
    radio_frequency: Optional[float] = None
    is_use_radio: Optional[bool] = None

    brightness: int = DEFAULT_BRIGHTNESS
    is_24_hour: bool = True

    latitude: float = 0.0
    longitude: float = 0.0
    timezone: str = ""
    offset: int = 0

    # Colours are [r, g, b]; anything else renders as white
    day_pattern: str = DEFAULT_PATTERN
    day_colour: Optional[List[int]] = None
    night_pattern: str = DEFAULT_PATTERN
    night_colour: Optional[List[int]] = None
    alarm_pattern: str = DEFAULT_PATTERN
    alarm_colour: Optional[List[int]] = None

    # Device-reported, never written by the editor
    is_alarm_disabled: bool = False
    version: str = UNKNOWN_VERSION

    def pattern(self, slot: str) -> str:
        return getattr(self, f"{slot}_pattern")

    def colour(self, slot: str) -> Optional[List[int]]:
        return getattr(self, f"{slot}_colour")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Configuration":
        """
        Build a Configuration from a decoded JSON document.
        Missing or mistyped values fall back to the load defaults.
        """
        data = data or {}
        installed = _b(data.get("isRadioInstalled"), False)
        return cls(
            device_name=_s(data.get("deviceName")),
            alarm_time=_i(data.get("alarmTime"), 0),
            alarm_activation=_s(data.get("alarmActivation")),
            is_radio_installed=installed,
            radio_frequency=(
                _f(data.get("radioFrequency"), DEFAULT_RADIO_FREQUENCY)
                if installed
                else None
            ),
            is_use_radio=_b(data.get("isUseRadio"), False) if installed else None,
            brightness=_i(data.get("brightness"), DEFAULT_BRIGHTNESS),
            is_24_hour=_b(data.get("is24Hour"), True),
            latitude=_f(data.get("latitude"), 0.0),
            longitude=_f(data.get("longitude"), 0.0),
            timezone=_s(data.get("timezone")),
            offset=_i(data.get("offset"), 0),
            day_pattern=_s(data.get("dayPattern")) or DEFAULT_PATTERN,
            day_colour=data.get("dayColour"),
            night_pattern=_s(data.get("nightPattern")) or DEFAULT_PATTERN,
            night_colour=data.get("nightColour"),
            alarm_pattern=_s(data.get("alarmPattern")) or DEFAULT_PATTERN,
            alarm_colour=data.get("alarmColour"),
            is_alarm_disabled=_b(data.get("isAlarmDisabled"), False),
            version=_s(data.get("version")) or UNKNOWN_VERSION,
        )

    def to_dict(self, *, editable_only: bool = False) -> Dict[str, Any]:
        base: Dict[str, Any] = {
            "deviceName": self.device_name,
            "alarmTime": self.alarm_time,
            "alarmActivation": self.alarm_activation,
            "isRadioInstalled": self.is_radio_installed,
        }
        if self.is_radio_installed:
            base["radioFrequency"] = self.radio_frequency
            base["isUseRadio"] = self.is_use_radio
        base.update(
            {
                "brightness": self.brightness,
                "is24Hour": self.is_24_hour,
                "latitude": self.latitude,
                "longitude": self.longitude,
                "timezone": self.timezone,
                "offset": self.offset,
                "dayPattern": self.day_pattern,
                "dayColour": self.day_colour,
                "nightPattern": self.night_pattern,
                "nightColour": self.night_colour,
                "alarmPattern": self.alarm_pattern,
                "alarmColour": self.alarm_colour,
            }
        )
        if editable_only:
            return base
        base["isAlarmDisabled"] = self.is_alarm_disabled
        base["version"] = self.version
        return base
