"""
SAHARA Configuration Module

Provides centralized configuration management with:
- Environment-based settings loading
- Validation of request limits and safety options
"""

from sahara.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
