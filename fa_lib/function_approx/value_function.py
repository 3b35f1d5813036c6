"""
A single weighted feature.

A value function holds one feature function and one scalar weight. Its
value for a state is the feature value scaled by the weight, and it adjusts
the weight by gradient descent on the squared error of a linear model.
"""

from typing import Any, Callable, Optional, TypeVar

from fa_lib.function_approx.base import FunctionApprox
from fa_lib.function_approx.weights import DEFAULT_WEIGHT, WeightInit

# Type variable for the (opaque) state type
X = TypeVar('X')

# Mapping from a state to a scalar feature value
FeatureFunction = Callable[[Any], float]


def zero_feature(state: Any) -> float:
    """Feature used when none is supplied."""
    return 0


class ValueFunction(FunctionApprox[X]):
    """
    One weighted feature of a linear model.
    
    The weight is drawn once from the initializer at construction and is
    afterwards changed only by ``correct`` and ``scale``.
    """
    
    def __init__(
        self,
        feature_function: Optional[FeatureFunction] = None,
        weight_init_function: Optional[WeightInit] = None
    ):
        """
        Initialize a value function.
        
        Args:
            feature_function: Pure mapping from state to number; defaults to
                the constant 0
            weight_init_function: Zero-argument weight initializer; defaults
                to a weight of 1
        """
        self.feature_function = feature_function if feature_function is not None else zero_feature
        self._weight = weight_init_function() if weight_init_function is not None else DEFAULT_WEIGHT
    
    def get_weight(self) -> float:
        return self._weight
    
    def gradient(self, state: X = None) -> float:
        """
        Partial derivative of the value with respect to the weight.
        
        Args:
            state: Input state
            
        Returns:
            The feature value of the state
        """
        return self.feature_function(state)
    
    def get_value(self, state: X = None) -> float:
        return self._weight * self.feature_function(state)
    
    def correct(
        self,
        current_value: float,
        target_value: float,
        learning_rate: float,
        state: X = None
    ) -> None:
        """
        Take one gradient step on 0.5 * (current_value - target_value)^2.
        
        ``current_value`` is supplied rather than recomputed so that an
        ensemble can correct every member against its shared aggregate.
        
        Args:
            current_value: Value estimate the error is measured from
            target_value: Observed target
            learning_rate: Step size
            state: State the estimate was made for
        """
        self._weight -= learning_rate * (current_value - target_value) * self.gradient(state)
    
    def scale(self, multiplier: float) -> None:
        self._weight *= multiplier
    
    def __repr__(self) -> str:
        name = getattr(self.feature_function, '__name__', repr(self.feature_function))
        return f"ValueFunction(feature={name}, weight={self._weight})"
