"""
Common utilities shared across elastic_tabs modules.
"""

from __future__ import annotations

import os
import sys


def vlog(msg: str, verbose: bool = False) -> None:
    """
    Log verbose message using structured logging.

    Args:
        msg: Message to log
        verbose: Whether verbose mode is enabled
    """
    if verbose or os.environ.get("ELASTIC_TABS_DEBUG", "0") == "1":
        try:
            from .logging_config import get_logger
            get_logger().info(msg)
        except Exception:
            # Fallback to stderr if logging fails
            try:
                print(f"[elastic_tabs] {msg}", file=sys.stderr)
            except Exception:
                pass
