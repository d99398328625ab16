# clockconfig/editor.py
"""
Editor page logic: load, save and backup import/export against the device.

The controller owns the form state (a FieldSet) and a notification
presenter. Failures are reported through the presenter and end the action;
nothing is retried.
"""
from __future__ import annotations
import json
import logging
from typing import Callable, Optional

import httpx

from .backup import BackupValidator, format_errors
from .mapper import FieldSet, form_to_json, from_json, to_fields
from .notify import ERROR, SUCCESS, NotificationPresenter

log = logging.getLogger(__name__)

CONFIRM_REPLACE = "This will replace the configuration on the device. Are you sure?"


class EditorController:
    def __init__(
        self,
        base_url: str = "",
        *,
        http: Optional[httpx.Client] = None,
        notifier: Optional[NotificationPresenter] = None,
        confirm: Optional[Callable[[str], bool]] = None,
        fields: Optional[FieldSet] = None,
    ) -> None:
        self._http = http if http is not None else httpx.Client(base_url=base_url)
        self.notifier = notifier if notifier is not None else NotificationPresenter()
        # Without a way to ask, replacing the device configuration is refused
        self._confirm = confirm if confirm is not None else (lambda _msg: False)
        self.fields = fields if fields is not None else FieldSet()
        self.backup_visible = False
        self.backup_text = ""

    def close(self) -> None:
        self._http.close()

    # ── load / save ───────────────────────────────────────────────────────────
    def load(self) -> bool:
        try:
            resp = self._http.get("/config", headers={"Cache-Control": "no-cache"})
        except httpx.HTTPError as e:
            log.error("Load configuration failed: %s", e)
            self.notifier.show("Unable to retrieve configuration", ERROR)
            return False
        if resp.status_code != 200:
            self.notifier.show(
                f"Unable to retrieve configuration, status = {resp.status_code}", ERROR
            )
            return False
        try:
            cfg = from_json(resp.text)
        except ValueError as e:
            log.error("Device returned an unreadable configuration: %s", e)
            self.notifier.show("Unable to retrieve configuration", ERROR)
            return False
        to_fields(cfg, self.fields)
        return True

    def save(
        self, payload: Optional[str] = None, on_success: Optional[Callable[[], None]] = None
    ) -> bool:
        body = payload
        if body is None or body.strip() == "":
            body = form_to_json(self.fields)
        try:
            resp = self._http.post(
                "/writeConfig",
                content=body.encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            log.error("Save configuration failed: %s", e)
            self.notifier.show("Unable to save configuration", ERROR)
            return False
        if resp.status_code != 200:
            log.error("Save configuration failed with status %s", resp.status_code)
            self.notifier.show(
                f"Unable to save configuration, status = {resp.status_code}", ERROR
            )
            return False
        if on_success is not None:
            on_success()
        else:
            self.notifier.show("Configuration saved successfully", SUCCESS)
        return True

    # ── backup ────────────────────────────────────────────────────────────────
    def export_backup(self) -> str:
        """Refresh the form from the device and return it as backup text."""
        self.load()
        self.backup_text = form_to_json(self.fields)
        self.backup_visible = True
        return self.backup_text

    def hide_backup(self) -> None:
        self.backup_visible = False

    def _validator(self) -> BackupValidator:
        opts = self.fields.options
        return BackupValidator(
            activation_options=opts.get("alarmActivation"),
            pattern_options=opts.get("dayPattern"),
        )

    def upload_backup(self, text: Optional[str] = None) -> bool:
        """
        Validate pasted backup text and, after confirmation, send it to the device.
        Returns True only when the device accepted the backup.
        """
        backup_text = (text if text is not None else self.backup_text).strip()
        if backup_text == "":
            self.notifier.show("Please paste in some backup text", ERROR)
            return False
        try:
            backup = json.loads(backup_text)
        except ValueError as e:
            self.notifier.show(f"Invalid backup text: {type(e).__name__}<br>{e}", ERROR)
            return False

        errors = self._validator().validate(backup)
        if errors:
            self.notifier.show(format_errors(errors), ERROR)
            return False

        if not self._confirm(CONFIRM_REPLACE):
            return False

        def done() -> None:
            self.hide_backup()
            self.load()
            self.notifier.show("Backup uploaded successfully", SUCCESS)

        return self.save(json.dumps(backup, indent=2), on_success=done)
