"""
GENIBI Configuration Module

Provides centralized configuration management with:
- Environment-based settings loading
- Validation of configured values
- Secure handling of the model API key
"""

from genibi.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
