import sys
from pathlib import Path

import pytest

# Make "clockconfig" importable without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from clockconfig import create_app
from clockconfig.storage import ConfigStore


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "data" / "config.json"


@pytest.fixture
def store(config_path):
    return ConfigStore(config_path)


@pytest.fixture
def app(config_path):
    app = create_app(config_path)
    app.testing = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def valid_backup():
    return {
        "deviceName": "Kitchen",
        "alarmTime": 390,
        "alarmActivation": "WEEKDAYS",
        "isRadioInstalled": True,
        "radioFrequency": 99.3,
        "isUseRadio": False,
        "brightness": 10,
        "is24Hour": True,
        "latitude": -31.9514,
        "longitude": 115.8617,
        "timezone": "AWST-8",
        "offset": 8,
        "dayPattern": "SOLID_COLOUR",
        "dayColour": [255, 0, 128],
        "nightPattern": "PULSING",
        "nightColour": [10, 20, 30],
        "alarmPattern": "RAINBOW_DIGITS",
        "alarmColour": [0, 0, 255],
    }


class FakeTimer:
    """Stands in for threading.Timer; tests call fire() instead of waiting."""

    def __init__(self, delay, fn):
        self.delay = delay
        self.fn = fn
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.fn()


class Timers:
    def __init__(self):
        self.made = []

    def __call__(self, delay, fn):
        t = FakeTimer(delay, fn)
        self.made.append(t)
        return t


@pytest.fixture
def timers():
    return Timers()


@pytest.fixture
def notifier(timers):
    from clockconfig.notify import NotificationPresenter

    return NotificationPresenter(timer_factory=timers, clock=lambda: 100.0)
