# path: wsgi.py
"""
wsgi.py
"""
from __future__ import annotations
import logging

from clockconfig import create_app
from clockconfig.settings import HOST, PORT

app = create_app()

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    # Local: waitress if installed, otherwise the Flask dev server.
    try:
        from waitress import serve  # type: ignore[reportMissingImports]
    except ImportError:
        app.run(host=HOST, port=PORT, debug=True)
    else:
        serve(app, listen=f"{HOST}:{PORT}")
