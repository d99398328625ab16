# clockconfig/notify.py
"""
Transient popup notifications with a single outstanding timer.
A new notification cancels whatever timer the previous one left running.
"""
from __future__ import annotations
import threading
import time
from typing import Callable, Optional

from .settings import NOTIFICATION_DISMISS_S, NOTIFICATION_HIDE_S

__all__ = ["NotificationPresenter", "SUCCESS", "ERROR"]

SUCCESS = "success"
ERROR = "error"

TimerFactory = Callable[[float, Callable[[], None]], threading.Timer]


class NotificationPresenter:
    def __init__(
        self,
        *,
        dismiss_after: float = NOTIFICATION_DISMISS_S,
        hide_after: float = NOTIFICATION_HIDE_S,
        timer_factory: TimerFactory = threading.Timer,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.dismiss_after = dismiss_after
        self.hide_after = hide_after
        self._timer_factory = timer_factory
        self._clock = clock
        self._lock = threading.Lock()
        self.active_timer: Optional[threading.Timer] = None
        self.dismiss_deadline: Optional[float] = None
        self.text = ""
        self.kind: Optional[str] = None
        self.visible = False
        self.hiding = False

    def _cancel(self) -> None:
        if self.active_timer is not None:
            self.active_timer.cancel()
        self.active_timer = None
        self.dismiss_deadline = None

    def _start(self, delay: float, callback: Callable[[], None]) -> None:
        def fire() -> None:
            with self._lock:
                # A timer that lost the race with cancel() must not touch newer state
                if self.active_timer is not timer:
                    return
                self.active_timer = None
                self.dismiss_deadline = None
                callback()

        timer = self._timer_factory(delay, fire)
        timer.daemon = True
        self.active_timer = timer
        self.dismiss_deadline = self._clock() + delay
        timer.start()

    def show(self, text: str, kind: Optional[str] = None) -> None:
        with self._lock:
            self._cancel()
            self.hiding = False
            self.text = text
            # Unknown kinds keep the previous styling
            if kind in (SUCCESS, ERROR):
                self.kind = kind
            self.visible = True
            self._start(self.dismiss_after, self._auto_dismiss)

    def hide(self) -> None:
        with self._lock:
            self.visible = False
            self.hiding = True
            self._cancel()
            self._start(self.hide_after, self._finish_hide)

    def _auto_dismiss(self) -> None:
        self.visible = False

    def _finish_hide(self) -> None:
        self.hiding = False
