"""Application configuration."""

from app.config.settings import CURRENCIES, Settings, settings

__all__ = ["CURRENCIES", "Settings", "settings"]
