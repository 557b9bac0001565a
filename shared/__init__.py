"""
CaesarLab Shared Module
=======================

Common utilities, models, and configuration management shared across
CaesarLab components.
"""

from shared.config import CaesarLabConfig, get_config

__all__ = ["CaesarLabConfig", "get_config"]
