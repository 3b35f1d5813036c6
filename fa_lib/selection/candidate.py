"""
Candidate records offered to the selection policy.

A candidate pairs an opaque state with the action that leads to it. The
action is returned unchanged to the caller and never inspected here.
"""

from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar

# Type variables for state and action
S = TypeVar('S')
A = TypeVar('A')


class NoCandidatesError(ValueError):
    """Raised when a selection is requested over an empty candidate sequence."""


@dataclass(frozen=True)
class Candidate(Generic[S, A]):
    """
    A (state, action) pairing considered for utility-based selection.
    """
    
    state: S
    """State whose utility is estimated"""
    
    action: A
    """Opaque action label associated with the state"""


def state_of(candidate: Any) -> Any:
    """
    Return the state carried by a candidate.
    
    Candidates may be Candidate instances, any object with a ``state``
    attribute, or mappings with a ``"state"`` key.
    
    Args:
        candidate: Candidate record
        
    Returns:
        The candidate's state
    """
    if isinstance(candidate, Mapping):
        return candidate["state"]
    return candidate.state
