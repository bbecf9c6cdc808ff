"""Infrastructure layer package."""

from .config import Settings, load_settings
from .log import setup_logger
from .random_source import SeededRandomSource, FixedRandomSource

__all__ = [
    'Settings',
    'load_settings',
    'setup_logger',
    'SeededRandomSource',
    'FixedRandomSource',
]
