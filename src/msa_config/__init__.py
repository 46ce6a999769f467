"""Shared configuration package for the MySvelteApp auth core."""

from .settings import (
    Settings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "Settings",
    "clear_settings_cache",
    "get_settings",
]
