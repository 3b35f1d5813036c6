"""
Weight initialization strategies.

A weight initializer is a zero-argument callable returning the starting
weight of a value function. It is called exactly once per value function.
"""

from typing import Callable, Optional

import numpy as np

# Zero-argument callable returning an initial weight
WeightInit = Callable[[], float]

# Weight used when no initializer is supplied
DEFAULT_WEIGHT = 1.0


def constant(value: float = DEFAULT_WEIGHT) -> WeightInit:
    """
    Initializer returning the same weight every time.
    
    Args:
        value: The weight to return
        
    Returns:
        Weight initializer
    """
    def init() -> float:
        return value
    return init


def uniform(
    low: float = -1.0,
    high: float = 1.0,
    rng: Optional[np.random.Generator] = None
) -> WeightInit:
    """
    Initializer drawing weights uniformly from [low, high).
    
    Args:
        low: Lower bound
        high: Upper bound
        rng: Optional numpy random generator
        
    Returns:
        Weight initializer
    """
    gen = rng if rng is not None else np.random.default_rng()
    
    def init() -> float:
        return float(gen.uniform(low, high))
    return init


def gaussian(
    mean: float = 0.0,
    std: float = 1.0,
    rng: Optional[np.random.Generator] = None
) -> WeightInit:
    """
    Initializer drawing weights from a normal distribution.
    
    Args:
        mean: Mean of the distribution
        std: Standard deviation of the distribution
        rng: Optional numpy random generator
        
    Returns:
        Weight initializer
    """
    gen = rng if rng is not None else np.random.default_rng()
    
    def init() -> float:
        return float(gen.normal(mean, std))
    return init


def xavier(fan_in: int, rng: Optional[np.random.Generator] = None) -> WeightInit:
    """
    Xavier/Glorot-style initializer: standard normal scaled by 1/sqrt(fan_in).
    
    For a linear model, fan_in is the number of features in the ensemble.
    
    Args:
        fan_in: Number of inputs feeding the output
        rng: Optional numpy random generator
        
    Returns:
        Weight initializer
    """
    if fan_in <= 0:
        raise ValueError("fan_in must be positive")
    
    gen = rng if rng is not None else np.random.default_rng()
    scale = 1.0 / np.sqrt(fan_in)
    
    def init() -> float:
        return float(gen.standard_normal() * scale)
    return init
