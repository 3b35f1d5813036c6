"""
Logger implementation for the function approximation library.

This module provides JSON-formatted logging. When debugging is enabled, logs
are written to timestamped files in a 'logs' directory; otherwise records
are discarded.
"""

import os
import json
import logging
import datetime
from typing import Any, Optional, Sequence
import numpy as np

LOGGER_NAME = "fa_lib"

# Create a custom JSON formatter that can handle numpy arrays and other complex types
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for logging."""
    
    def _serialize(self, obj: Any) -> Any:
        """Serialize objects to JSON-compatible format."""
        if isinstance(obj, np.ndarray):
            # Only show a sample for large arrays
            if obj.size > 100:
                shape_str = 'x'.join(str(dim) for dim in obj.shape)
                sample = obj.flatten()[:5].tolist()
                return f"ndarray({shape_str}): sample={sample}..."
            return obj.tolist()
        elif isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, (list, tuple)):
            if len(obj) > 100:
                return [self._serialize(item) for item in list(obj)[:5]] + ["..."]
            return [self._serialize(item) for item in obj]
        elif isinstance(obj, dict):
            return {k: self._serialize(v) for k, v in obj.items()}
        elif isinstance(obj, (str, int, float, bool)) or obj is None:
            return obj
        elif hasattr(obj, '__dict__'):
            # For custom objects, convert to dict
            return {
                "__type": obj.__class__.__name__,
                **{k: self._serialize(v) for k, v in obj.__dict__.items()
                   if not k.startswith('_')}
            }
        return repr(obj)
    
    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_data = {
            'timestamp': datetime.datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }
        
        # Handle the case where the message is already a dict
        if isinstance(record.msg, dict):
            log_data['data'] = self._serialize(record.msg)
        else:
            log_data['message'] = record.getMessage()
            
            # Add any extra attributes
            if hasattr(record, 'data'):
                log_data['data'] = self._serialize(record.data)
        
        return json.dumps(log_data, default=repr)


# Global logger instance
_logger = None

def setup_logger(
    debug: bool = False,
    log_level: str = "info",
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None
) -> logging.Logger:
    """
    Set up the logger with the specified configuration.
    
    The logger is configured once; later calls return it unchanged until
    ``reset_logger`` is called.
    
    Args:
        debug: Whether to enable debugging (and writing to a log file)
        log_level: The log level (debug, info, warning, error)
        log_file: Optional custom log file path; relative paths are placed
            in the logs directory
        log_dir: Optional logs directory, defaults to ./logs
        
    Returns:
        Configured logger instance
    """
    global _logger
    
    if _logger is not None:
        return _logger
    
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    
    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR
    }
    
    if debug:
        logger.setLevel(level_map.get(log_level.lower(), logging.INFO))
    else:
        logger.setLevel(logging.WARNING)  # Minimal logging when debug is False
    
    if debug or log_file is not None:
        logs_dir = log_dir if log_dir is not None else os.path.join(os.getcwd(), "logs")
        
        # Create a timestamped log file if not specified
        if log_file is None:
            timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(logs_dir, f"{LOGGER_NAME}_{timestamp}.json")
        elif not os.path.isabs(log_file):
            log_file = os.path.join(logs_dir, log_file)
        
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        handler = logging.FileHandler(log_file)
        handler.setFormatter(JsonFormatter())
    else:
        handler = logging.NullHandler()
    
    logger.addHandler(handler)
    
    _logger = logger
    
    if debug:
        logger.info({
            "event": "logger_initialized",
            "log_level": log_level,
            "log_file": log_file
        })
    
    return logger


def get_logger() -> logging.Logger:
    """
    Get the configured logger instance.
    
    Returns:
        Logger instance
    """
    global _logger
    
    if _logger is None:
        # Set up with default configuration if not already configured
        _logger = setup_logger()
    
    return _logger


def reset_logger() -> None:
    """
    Remove the handlers of the configured logger so it can be set up again.
    """
    global _logger
    
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    _logger = None


# Helper functions for common logging patterns

def log_correction(
    state: Any,
    current: float,
    target: float,
    learning_rate: float,
    weights: Sequence[float]
) -> None:
    """
    Log a weight correction of an ensemble.
    
    Args:
        state: State the correction was made for
        current: Aggregate value before the correction
        target: Observed target value
        learning_rate: Step size used
        weights: Member weights after the correction
    """
    logger = get_logger()
    
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug({
            "event": "correction",
            "state": str(state),
            "current": current,
            "target": target,
            "error": current - target,
            "learning_rate": learning_rate,
            "weights": list(weights)
        })


def log_selection(explored: bool, num_candidates: int) -> None:
    """
    Log the outcome of a candidate selection.
    
    Args:
        explored: Whether the selection was random
        num_candidates: Number of candidates considered
    """
    logger = get_logger()
    
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug({
            "event": "selection",
            "explored": explored,
            "num_candidates": num_candidates
        })


def log_weights_summary(weights, name: str = "weights") -> None:
    """
    Log a summary of weights (mean, min, max, etc.).
    
    Args:
        weights: Weights to summarize (numpy array or sequence of floats)
        name: Name to identify these weights in the log
    """
    logger = get_logger()
    
    if not logger.isEnabledFor(logging.DEBUG):
        return
    
    w_array = np.asarray(weights, dtype=float)
    
    if w_array.size == 0:
        logger.debug({"event": f"{name}_summary", "size": 0})
        return
    
    logger.debug({
        "event": f"{name}_summary",
        "size": int(w_array.size),
        "mean": float(np.mean(w_array)),
        "std": float(np.std(w_array)),
        "min": float(np.min(w_array)),
        "max": float(np.max(w_array)),
        "sample": w_array.flatten()[:5].tolist()
    })


def log_convergence(
    iteration: int, 
    error: float, 
    tolerance: float,
    converged: bool
) -> None:
    """
    Log convergence information.
    
    Args:
        iteration: Current iteration
        error: Current error
        tolerance: Error tolerance for convergence
        converged: Whether convergence has been achieved
    """
    logger = get_logger()
    
    logger.info({
        "event": "convergence_check",
        "iteration": iteration,
        "error": error,
        "tolerance": tolerance,
        "converged": converged
    })
