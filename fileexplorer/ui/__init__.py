"""
Terminal presentation for File Explorer.
"""
from .browser import BrowserWindow

__all__ = ['BrowserWindow']
