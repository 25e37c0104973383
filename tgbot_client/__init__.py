"""Telegram Bot API client package.

The package models the update stream of the Bot API and routes each update
to user-registered async callbacks. Modules are intentionally lightweight
and do not perform network I/O on import.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
