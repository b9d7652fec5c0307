"""Localized messages."""

from .localization import DEFAULT_LOCALES_DIR, Localization, get_message

__all__ = ["DEFAULT_LOCALES_DIR", "Localization", "get_message"]
