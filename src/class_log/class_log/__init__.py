"""Class log package.

Tracks class sessions (open -> closed), reconciles their durations and
exports them as an xlsx report. Organized by feature modules (users,
sessions, reports) with a thin Flask controller layer over service and
repository layers.
"""
from __future__ import annotations

from .main import create_app

__all__ = ["create_app"]
