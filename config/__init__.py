# config/__init__.py
# ============================================================
# Configuration package for pagebinder.
# Provides centralized, validated settings loaded from .env file.
#
# Usage:
#   from config.settings import settings
#   print(settings.log_level)
# ============================================================

from config.settings import Settings, settings

__all__ = ["Settings", "settings"]
