"""
Epsilon-greedy selection over candidate (state, action) pairs.

With probability ``exploration_rate`` a candidate is drawn uniformly at
random and no value is computed. Otherwise the candidate with the greatest
estimated value is chosen, ties going to the earliest candidate.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Sequence, TypeVar

from fa_lib.distribution.base import Distribution
from fa_lib.distribution.discrete import Choose, Constant, RandomSource, uniform_random
from fa_lib.selection.candidate import NoCandidatesError, state_of

C = TypeVar('C')


@dataclass(frozen=True)
class EpsilonGreedy:
    """
    Epsilon-greedy selection policy.
    
    The random source must return floats in [0, 1). A draw ``u`` explores
    when ``u < exploration_rate``, so a rate of 0 never explores and a rate
    of 1 always does.
    """
    
    exploration_rate: float = 0.0
    """Probability of choosing uniformly at random"""
    
    random_source: RandomSource = field(default=uniform_random)
    """Source of uniform draws in [0, 1)"""
    
    def explores(self) -> bool:
        """
        Draw once from the random source and decide whether to explore.
        
        Returns:
            True if this selection should explore
        """
        return self.random_source() < self.exploration_rate
    
    def greedy(self, candidates: Sequence[C], value_of: Callable[[Any], float]) -> C:
        """
        Return the first candidate reaching the maximum value.
        
        Args:
            candidates: Non-empty sequence of candidates
            value_of: Function estimating the value of a state
            
        Returns:
            The best candidate
        """
        best = None
        best_value = None
        for candidate in candidates:
            value = value_of(state_of(candidate))
            # Strict comparison keeps the earliest candidate on ties
            if best_value is None or value > best_value:
                best = candidate
                best_value = value
        return best
    
    def act(self, candidates: Sequence[C], value_of: Callable[[Any], float]) -> Distribution[C]:
        """
        Return the distribution the selection is drawn from.
        
        Exploring yields a uniform Choose over the candidates; otherwise a
        Constant holding the greedy choice.
        
        Args:
            candidates: Sequence of candidates
            value_of: Function estimating the value of a state
            
        Returns:
            Distribution over candidates
            
        Raises:
            NoCandidatesError: If candidates is empty
        """
        candidates = list(candidates)
        if not candidates:
            raise NoCandidatesError("no candidates to evaluate")
        
        if self.explores():
            return Choose(candidates, self.random_source)
        return Constant(self.greedy(candidates, value_of))
    
    def select(self, candidates: Sequence[C], value_of: Callable[[Any], float]) -> C:
        """
        Select a candidate.
        
        Args:
            candidates: Sequence of candidates
            value_of: Function estimating the value of a state
            
        Returns:
            The selected candidate, unchanged
        """
        return self.act(candidates, value_of).sample()
