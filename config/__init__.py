"""Configuration package."""
from .settings import APIConfig, Settings, settings

__all__ = [
    'APIConfig',
    'Settings',
    'settings',
]
