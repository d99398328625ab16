# File: clockconfig/routes/api.py
from __future__ import annotations
from flask import Blueprint, request, jsonify, Response, current_app

from ..models import EDITABLE_FIELDS
from ..storage import ConfigStore, StorageError

bp = Blueprint("api", __name__)


# ── utils ──────────────────────────────────────────────────────────────────────
def _store() -> ConfigStore:
    return current_app.extensions["config_store"]


def _text(message: str, status: int) -> Response:
    return Response(message, status=status, mimetype="text/plain")


# ── config ─────────────────────────────────────────────────────────────────────
@bp.get("/config")
def get_config() -> Response:
    current_app.logger.info("Loading configuration")
    try:
        cfg = _store().read()
    except StorageError:
        current_app.logger.exception("GET /config failed")
        return _text("Unable to read configuration", 500)
    return jsonify(cfg)


@bp.post("/writeConfig")
def write_config() -> Response:
    """
    Merge the editable fields of the posted document into the stored one.
    Device-owned keys (version, isAlarmDisabled) are ignored if present.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _text("Invalid top-level data", 400)
    patch = {k: data[k] for k in EDITABLE_FIELDS if k in data}
    try:
        _store().write(patch)
    except StorageError:
        current_app.logger.exception("POST /writeConfig failed")
        return _text("Unable to write configuration", 500)
    current_app.logger.info("Configuration written")
    return Response(status=200)


# ── meta ───────────────────────────────────────────────────────────────────────
@bp.get("/health")
def health() -> Response:
    return jsonify(ok=True)
