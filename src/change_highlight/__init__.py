"""Highlights the text undo-style commands are about to delete or just inserted."""

__all__ = [
    "adapters",
    "buffer",
    "config",
    "coordinator",
    "host",
    "runtime",
    "session",
]

__version__ = "0.1.0"
