"""
Configuration package
"""
from .settings import settings
from .database_config import database_config

__all__ = [
    "settings",
    "database_config",
]
