"""
Configuration module for the composer service.
Exports the settings instance for use throughout the application.
"""

from config.settings import settings, get_settings

__all__ = ["settings", "get_settings"]
