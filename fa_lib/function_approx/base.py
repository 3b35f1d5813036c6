"""
Base classes for function approximation.

This module provides the abstract interface shared by single value
functions and ensembles of them: a mapping from an opaque state to a real
number that can be corrected toward observed targets.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Iterable

import numpy as np

# Type variable for the (opaque) state type
X = TypeVar('X')

class FunctionApprox(ABC, Generic[X]):
    """
    Interface for function approximations.
    
    A function approximation maps states of type X to real numbers and
    exposes its weights so they can be scaled and inspected.
    """
    
    @abstractmethod
    def get_value(self, state: X = None) -> float:
        """
        Estimate the value of a state.
        
        Args:
            state: Input state
            
        Returns:
            Estimated value
        """
        pass
    
    @abstractmethod
    def scale(self, multiplier: float) -> None:
        """
        Multiply the weights in place by a scalar.
        
        Args:
            multiplier: A scalar value
        """
        pass
    
    def __call__(self, state: X = None) -> float:
        """
        Evaluate the function at a single state.
        """
        return self.get_value(state)
    
    def values(self, states: Iterable[X]) -> np.ndarray:
        """
        Estimate the value of each state in a sequence.
        
        Args:
            states: Sequence of states
            
        Returns:
            Array of estimated values
        """
        return np.array([self.get_value(s) for s in states], dtype=float)
