"""
Selection module for the function approximation library.

This module provides candidate records and the epsilon-greedy policy used
to choose among them.
"""

from fa_lib.selection.candidate import Candidate, NoCandidatesError, state_of
from fa_lib.selection.policy import EpsilonGreedy

__all__ = [
    'Candidate',
    'NoCandidatesError',
    'state_of',
    'EpsilonGreedy'
]
