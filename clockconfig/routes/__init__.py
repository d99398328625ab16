# clockconfig/routes/__init__.py
from __future__ import annotations
from .api import bp as api_bp
__all__ = ["api_bp"]
