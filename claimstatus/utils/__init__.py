from __future__ import annotations

from .logger import setup_logging

__all__ = ["setup_logging"]
