# File: clockconfig/storage.py
# Purpose: One JSON document on disk. Defaults on first read, merge on write.
from __future__ import annotations
import json
import logging
import os
import tempfile
from collections import OrderedDict
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .models import STORE_DEFAULTS
from .settings import CONFIG_PATH

log = logging.getLogger(__name__)


class StorageError(Exception):
    """The stored document could not be read or persisted."""


# ── utils ─────────────────────────────────────────────────────────────────────
def get_defaults() -> Dict[str, Any]:
    return json.loads(json.dumps(STORE_DEFAULTS))  # deep copy


def _order_like_defaults(
    defaults: Mapping[str, Any], data: Mapping[str, Any]
) -> "OrderedDict[str, Any]":
    """
    Key order follows `defaults`; keys unknown to defaults go last in their
    current order.
    """
    ordered: "OrderedDict[str, Any]" = OrderedDict()
    for key in defaults.keys():
        if key in data:
            ordered[key] = data[key]
    for key, value in data.items():
        if key not in ordered:
            ordered[key] = value
    return ordered


def _atomic_write(path: str, data: Mapping[str, Any]) -> None:
    """
    Write to a temp file in the same directory, then rename over `path`.
    Readers see either the old or the new document, never a partial one.
    """
    dirpath = os.path.dirname(path) or "."
    os.makedirs(dirpath, exist_ok=True)
    serializable = _order_like_defaults(STORE_DEFAULTS, data)
    fd, tmp = tempfile.mkstemp(prefix=".config.", dir=dirpath)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(serializable, f, indent=2, ensure_ascii=False)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    finally:
        if os.path.exists(tmp):
            os.unlink(tmp)


# ── store ─────────────────────────────────────────────────────────────────────
class ConfigStore:
    """The single configuration document of the device."""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = str(path or CONFIG_PATH)

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def _load(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                cfg = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Unable to read configuration: {e}") from e
        if not isinstance(cfg, dict):
            raise StorageError("Unable to read configuration: not a JSON object")
        return cfg

    def _persist(self, cfg: Dict[str, Any]) -> None:
        try:
            _atomic_write(self.path, cfg)
        except OSError as e:
            raise StorageError(f"Unable to write configuration: {e}") from e

    def read(self) -> Dict[str, Any]:
        if not self.exists():
            log.info("No configuration at %s, writing defaults", self.path)
            cfg = get_defaults()
            self._persist(cfg)
            return cfg
        return self._load()

    def write(self, patch: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Merge `patch` onto the stored document and persist the result.
        Keys missing from `patch` keep their stored values.
        """
        current = self._load() if self.exists() else get_defaults()
        merged = {**current, **dict(patch or {})}
        self._persist(merged)
        log.info("Configuration written to %s", self.path)
        return merged
