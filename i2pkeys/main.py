"""Compatibility module for the engine entry points.

The implementation lives in `core.py`; this module keeps the
`from i2pkeys.main import i2pkeys` import path stable.
"""

from .core import DecodeError, InsufficientKeyLength, KeyFileError, cli, i2pkeys, main

__all__ = ["DecodeError", "InsufficientKeyLength", "KeyFileError", "cli", "i2pkeys", "main"]
