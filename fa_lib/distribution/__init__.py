"""
Distribution module for the function approximation library.

This module provides the discrete distributions used to draw exploratory
choices, along with the default random source.
"""

from fa_lib.distribution.base import Distribution
from fa_lib.distribution.discrete import Choose, Constant, RandomSource, uniform_random

__all__ = [
    'Distribution',
    'Choose',
    'Constant',
    'RandomSource',
    'uniform_random'
]
