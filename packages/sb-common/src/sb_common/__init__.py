"""
sb-common: Shared library for ServiceBay.

Provides common data models, configuration management, and structured
logging used by the ServiceBay NLU service.
"""

from sb_common.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
