"""
Unified Logging Utility for ZfNav

Provides a small logging helper that:
- Routes logs to stderr
- Filters DEBUG-level messages based on --debug flag

Usage:
    from debug_logging import log, set_debug_mode

Modules call:
    log("INVENTORY", "message")                    # INFO level (always logged)
    log("INVENTORY", "verbose details", "DEBUG")   # Only logged with --debug
    log("MAIN", "error occurred", "ERROR")

Only the startup phase logs. Once the Textual session owns the terminal,
nothing should be written to stderr.
"""

import sys

# Global state
_debug_enabled = False


def set_debug_mode(enabled: bool) -> None:
    """Enable or disable debug logging globally."""
    global _debug_enabled
    _debug_enabled = enabled


def log(prefix: str, message: str, level: str = "INFO") -> None:
    """
    Log a message with the specified level.

    Args:
        prefix: Module prefix (e.g., "INVENTORY", "CONFIG", "MAIN")
        message: The log message
        level: Log level - DEBUG, INFO, WARNING, ERROR, CRITICAL
               DEBUG messages are only shown when debug mode is enabled.
    """
    if level == "DEBUG" and not _debug_enabled:
        return

    txt = f"{prefix} [{level}]: {message}" if prefix else f"[{level}]: {message}"
    print(txt, file=sys.stderr)

