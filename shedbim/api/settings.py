"""Server settings loaded from environment variables."""

from __future__ import annotations
import os


class Settings:
    """Application configuration loaded from environment variables"""

    HOST = os.environ.get("SHEDBIM_HOST", "0.0.0.0")
    PORT = int(os.environ.get("SHEDBIM_PORT", "8000"))
    RELOAD = os.environ.get("SHEDBIM_RELOAD", "true").lower() == "true"
    LOG_LEVEL = os.environ.get("SHEDBIM_LOG_LEVEL", "INFO").upper()

    # CORS — the viewer dev server by default
    CORS_ORIGINS = os.environ.get("SHEDBIM_CORS_ORIGINS", "*").split(",")
