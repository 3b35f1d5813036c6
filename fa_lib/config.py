"""
Configuration for function approximators.

Settings can be built directly or read from the environment (optionally
through a ``.env`` file). Environment keys:

    FA_LEARNING_RATE     step size of weight corrections (default 0.1)
    FA_EXPLORATION_RATE  probability of a random selection, in [0, 1] (default 0)
    FA_DEBUG             enable file logging ("1", "true", "yes", "on")
    FA_LOG_LEVEL         debug, info, warning or error (default info)
    FA_LOG_FILE          log file name or path
"""

import math
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from fa_lib.logging import setup_logger

DEFAULT_LEARNING_RATE = 0.1
DEFAULT_EXPLORATION_RATE = 0.0

_TRUE_VALUES = {"1", "true", "yes", "on"}


def validate_rates(learning_rate: float, exploration_rate: float) -> None:
    """
    Check that learning and exploration rates are usable.
    
    Args:
        learning_rate: Step size of weight corrections
        exploration_rate: Probability of a random selection
        
    Raises:
        ValueError: If the learning rate is not finite or the exploration
            rate lies outside [0, 1]
    """
    if not math.isfinite(learning_rate):
        raise ValueError(f"learning_rate must be finite, got {learning_rate}")
    if not 0.0 <= exploration_rate <= 1.0:
        raise ValueError(f"exploration_rate must be in [0, 1], got {exploration_rate}")


@dataclass(frozen=True)
class ApproximatorSettings:
    """
    Settings for building a function approximator and its logger.
    """
    
    learning_rate: float = DEFAULT_LEARNING_RATE
    """Step size of weight corrections"""
    
    exploration_rate: float = DEFAULT_EXPLORATION_RATE
    """Probability of choosing a candidate uniformly at random"""
    
    debug: bool = False
    """Whether to write log records to a file"""
    
    log_level: str = "info"
    """Log level used when debug is enabled"""
    
    log_file: Optional[str] = None
    """Optional log file path"""
    
    def __post_init__(self):
        self.validate()
    
    def validate(self) -> None:
        validate_rates(self.learning_rate, self.exploration_rate)
    
    @staticmethod
    def from_env(env_file: Optional[str] = None) -> 'ApproximatorSettings':
        """
        Read settings from environment variables.
        
        Args:
            env_file: Optional path of a .env file to load first; when
                omitted, a .env file is searched for upward from the
                working directory. Values already present in the
                environment take precedence
                
        Returns:
            Settings with missing keys left at their defaults
        """
        load_dotenv(env_file if env_file is not None else find_dotenv(usecwd=True))
        
        return ApproximatorSettings(
            learning_rate=float(os.getenv("FA_LEARNING_RATE", DEFAULT_LEARNING_RATE)),
            exploration_rate=float(os.getenv("FA_EXPLORATION_RATE", DEFAULT_EXPLORATION_RATE)),
            debug=os.getenv("FA_DEBUG", "").strip().lower() in _TRUE_VALUES,
            log_level=os.getenv("FA_LOG_LEVEL", "info"),
            log_file=os.getenv("FA_LOG_FILE") or None
        )
    
    def setup_logging(self):
        """
        Configure the library logger from these settings.
        
        Returns:
            Configured logger instance
        """
        return setup_logger(debug=self.debug, log_level=self.log_level, log_file=self.log_file)
