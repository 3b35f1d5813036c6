"""
Discrete probability distributions.
"""

import random
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TypeVar

from fa_lib.distribution.base import Distribution

# Type variable for distribution outcomes
T = TypeVar('T')

# Zero-argument callable returning a float in [0, 1)
RandomSource = Callable[[], float]


def uniform_random() -> float:
    """Default random source: a uniform draw from [0, 1)."""
    return random.random()


class Choose(Distribution[T]):
    """
    Uniform distribution over a finite set of options.
    
    Each option has equal probability of being selected. Sampling is driven
    by a random source returning floats in [0, 1), so callers can pin the
    outcome by injecting a fixed source.
    """
    
    def __init__(self, options: Iterable[T], random_source: Optional[RandomSource] = None):
        """
        Initialize a uniform choice distribution.
        
        Args:
            options: Collection of items to choose from with equal probability
            random_source: Optional source of uniform draws in [0, 1)
        """
        self.options = list(options)
        self.random_source = random_source if random_source is not None else uniform_random
        
        if not self.options:
            raise ValueError("Options list cannot be empty")
    
    def index(self) -> int:
        """
        Draw a uniformly random index into the options.
        
        Returns:
            Index in range(len(options))
        """
        n = len(self.options)
        # Clamp so a source returning exactly 1.0 still maps to the last option
        return min(int(self.random_source() * n), n - 1)
    
    def sample(self) -> T:
        """
        Return a random sample from this distribution.
        
        Returns:
            A randomly chosen option
        """
        return self.options[self.index()]
    
    def __repr__(self) -> str:
        if len(self.options) <= 5:
            options_str = str(self.options)
        else:
            options_str = f"[{', '.join(str(o) for o in self.options[:3])}, ..., {self.options[-1]}]"
        return f"Choose({options_str})"


@dataclass(frozen=True)
class Constant(Distribution[T]):
    """
    A distribution with a single outcome that has probability 1.
    
    The greedy branch of the selection policy returns its choice wrapped in
    a Constant, so both branches share the Distribution interface.
    """
    value: T
    
    def sample(self) -> T:
        return self.value
    
    def __repr__(self) -> str:
        return f"Constant({self.value})"
