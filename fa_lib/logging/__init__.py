"""
Logging module for the function approximation library.

This module provides JSON-formatted logging functionality.
"""

from fa_lib.logging.logger import (
    JsonFormatter,
    setup_logger,
    get_logger,
    reset_logger,
    log_correction,
    log_selection,
    log_weights_summary,
    log_convergence
)

__all__ = [
    "JsonFormatter",
    "setup_logger",
    "get_logger",
    "reset_logger",
    "log_correction",
    "log_selection",
    "log_weights_summary",
    "log_convergence"
]
