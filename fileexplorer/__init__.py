"""
File Explorer - terminal file browser.
"""
from .constants import APP_NAME, APP_VERSION

__version__ = APP_VERSION

__all__ = ['APP_NAME', 'APP_VERSION', '__version__']
