"""Timestamps, complete writes, locale checks and pseudo-terminal helpers for terminal programs."""

__version__ = "0.1.0"
__all__ = ["timestamp", "swrite", "locale_utils", "pty_compat"]