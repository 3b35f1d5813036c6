"""
Base class for the distributions selections are drawn from.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

# Type variable for distribution outcomes
T = TypeVar('T')

class Distribution(ABC, Generic[T]):
    """
    A source of outcomes of type T.
    
    The selection policy decides between exploring and exploiting before any
    value is computed, and hands back a Distribution over candidates: a
    uniform Choose when exploring, a Constant holding the greedy choice
    otherwise. Sampling it yields the selected candidate.
    """
    
    @abstractmethod
    def sample(self) -> T:
        """
        Return one outcome.
        
        Returns:
            An outcome of the distribution
        """
        pass
