"""
Linear Function Approximation Library.

This library estimates a state's utility as a weighted sum of scalar
features, corrects the weights toward observed targets by gradient descent,
and selects among candidate (state, action) pairs with an epsilon-greedy
policy.
"""

__version__ = '0.1.0'

from fa_lib import distribution
from fa_lib import selection
from fa_lib import function_approx
from fa_lib import utils
from fa_lib.config import ApproximatorSettings
from fa_lib.function_approx import FunctionApproximator, ValueFunction
from fa_lib.selection import Candidate, NoCandidatesError

__all__ = [
    'distribution',
    'selection',
    'function_approx',
    'utils',
    'ApproximatorSettings',
    'FunctionApproximator',
    'ValueFunction',
    'Candidate',
    'NoCandidatesError'
]
