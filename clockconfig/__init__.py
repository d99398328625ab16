# clockconfig/__init__.py
from __future__ import annotations
from pathlib import Path
from typing import Optional, Union
from flask import Flask, request, Response

from .storage import ConfigStore


def create_app(config_path: Optional[Union[str, Path]] = None) -> Flask:
    app = Flask(__name__)
    app.extensions["config_store"] = ConfigStore(config_path)

    from .routes import api_bp
    app.register_blueprint(api_bp)

    @app.after_request
    def apply_common_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        # The editor always wants the device's current state
        path = (request.path or "").lower()
        if path in ("/config", "/writeconfig", "/health"):
            resp.headers["Cache-Control"] = "no-store"
        return resp

    return app
