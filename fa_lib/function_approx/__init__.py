"""
Function approximation module for the function approximation library.

This module provides single weighted features, linear ensembles of them,
and weight initialization strategies.
"""

from fa_lib.function_approx.base import FunctionApprox
from fa_lib.function_approx.value_function import ValueFunction, FeatureFunction
from fa_lib.function_approx.approximator import FunctionApproximator
from fa_lib.function_approx import weights

__all__ = [
    'FunctionApprox',
    'ValueFunction',
    'FeatureFunction',
    'FunctionApproximator',
    'weights'
]
