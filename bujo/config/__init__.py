"""
Configuration package.

Exports the singleton settings instance for easy importing.

Usage:
    from bujo.config import settings

    print(settings.database_url)
"""

from bujo.config.settings import settings, Settings

__all__ = [
    "settings",
    "Settings",
]
