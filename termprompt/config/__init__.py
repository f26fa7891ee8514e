"""
Configuration for termprompt.
"""

from .settings import UISettings, COLOR_MODE_NAMES

__all__ = [
    "UISettings",
    "COLOR_MODE_NAMES",
]
