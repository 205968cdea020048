"""
gridkit configuration — all environment variables in one place.

Read from environment at import time.
"""

from __future__ import annotations

import os


class Settings:
    """Library settings from environment variables."""

    # Row source
    API_URL: str = os.environ.get("GRIDKIT_API_URL", "")
    API_TIMEOUT: float = float(os.environ.get("GRIDKIT_API_TIMEOUT", "30"))

    # Tables
    ITEMS_PER_PAGE: int = int(os.environ.get("GRIDKIT_ITEMS_PER_PAGE", "10"))


# Singleton instance
settings = Settings()

if settings.ITEMS_PER_PAGE < 1:
    raise RuntimeError("GRIDKIT_ITEMS_PER_PAGE must be a positive integer")
