"""
Linear function approximation over an ensemble of weighted features.

The approximator's estimate of a state's utility is the sum of the values of
its value functions. Corrections compute that sum once and step every
member's weight against it, which is gradient descent on the squared error
of the whole linear model.
"""

import itertools
import threading
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from fa_lib.config import (
    ApproximatorSettings,
    DEFAULT_EXPLORATION_RATE,
    DEFAULT_LEARNING_RATE,
    validate_rates
)
from fa_lib.distribution.discrete import Constant, RandomSource, uniform_random
from fa_lib.function_approx.base import FunctionApprox
from fa_lib.function_approx.value_function import FeatureFunction, ValueFunction
from fa_lib.function_approx.weights import DEFAULT_WEIGHT, WeightInit, constant
from fa_lib.logging import log_convergence, log_correction, log_selection, log_weights_summary
from fa_lib.selection.policy import EpsilonGreedy
from fa_lib.utils.iterate import converge

# Type variables for state and candidate types
X = TypeVar('X')
C = TypeVar('C')


class FunctionApproximator(FunctionApprox[X]):
    """
    Ensemble of value functions forming a linear model.

    Value functions are kept in insertion order. The learning and exploration
    rates are fixed at construction.
    """

    def __init__(
        self,
        weight_init_strategy: Optional[WeightInit] = None,
        learning_rate: Optional[float] = None,
        exploration_rate: Optional[float] = None,
        random_source: Optional[RandomSource] = None
    ):
        """
        Initialize an empty approximator.

        Passing None for any argument selects its default.

        Args:
            weight_init_strategy: Default initializer for value functions
                created by this approximator (weight 1)
            learning_rate: Step size of corrections (0.1)
            exploration_rate: Probability in [0, 1] of a random selection (0)
            random_source: Source of uniform draws in [0, 1) (random.random)
        """
        self.weight_init_strategy = (
            weight_init_strategy if weight_init_strategy is not None else constant(DEFAULT_WEIGHT)
        )
        self.learning_rate = learning_rate if learning_rate is not None else DEFAULT_LEARNING_RATE
        self.exploration_rate = (
            exploration_rate if exploration_rate is not None else DEFAULT_EXPLORATION_RATE
        )
        self.random_source = random_source if random_source is not None else uniform_random
        validate_rates(self.learning_rate, self.exploration_rate)

        self.policy = EpsilonGreedy(self.exploration_rate, self.random_source)
        self._value_functions: List[ValueFunction[X]] = []
        self._lock = threading.RLock()

    @staticmethod
    def from_settings(
        settings: ApproximatorSettings,
        weight_init_strategy: Optional[WeightInit] = None,
        random_source: Optional[RandomSource] = None
    ) -> 'FunctionApproximator':
        """
        Create an approximator from settings.

        The library logger is configured from the settings' logging fields
        unless it has already been set up.

        Args:
            settings: Learning and exploration rates, logging options
            weight_init_strategy: Optional default weight initializer
            random_source: Optional source of uniform draws

        Returns:
            New FunctionApproximator instance
        """
        settings.setup_logging()
        return FunctionApproximator(
            weight_init_strategy=weight_init_strategy,
            learning_rate=settings.learning_rate,
            exploration_rate=settings.exploration_rate,
            random_source=random_source
        )

    def get_value_functions(self) -> Tuple[ValueFunction[X], ...]:
        return tuple(self._value_functions)

    def add_value_function(self, value_function: ValueFunction[X]) -> None:
        """
        Append a value function to the ensemble.

        No validation is done; adding the same instance twice makes it
        contribute and be corrected twice.
        """
        with self._lock:
            self._value_functions.append(value_function)

    def create_value_function(
        self,
        feature_function: Optional[FeatureFunction] = None,
        weight_init_function: Optional[WeightInit] = None
    ) -> ValueFunction[X]:
        """
        Create a value function without adding it to the ensemble.

        Args:
            feature_function: Pure mapping from state to number
            weight_init_function: Optional initializer, defaults to this
                approximator's weight_init_strategy

        Returns:
            New ValueFunction instance
        """
        init = weight_init_function if weight_init_function is not None else self.weight_init_strategy
        return ValueFunction(feature_function, init)

    def get_learning_rate(self) -> float:
        return self.learning_rate

    def get_exploration_rate(self) -> float:
        return self.exploration_rate

    def get_value(self, state: X = None) -> float:
        """
        Sum of the values of all value functions; 0 for an empty ensemble.

        Args:
            state: Input state

        Returns:
            Estimated utility of the state
        """
        with self._lock:
            total = 0
            for vf in self._value_functions:
                total += vf.get_value(state)
            return total

    def weights(self) -> np.ndarray:
        """
        Weights of the value functions in insertion order.

        Returns:
            Array of weights
        """
        with self._lock:
            return np.array([vf.get_weight() for vf in self._value_functions], dtype=float)

    def correct(self, state: X, target: float) -> None:
        """
        Step every value function toward the target.

        The aggregate value is computed once and every member is corrected
        against it, so each step is driven by the ensemble's combined error.

        Args:
            state: State the target was observed for
            target: Observed target value
        """
        with self._lock:
            current = self.get_value(state)
            for vf in self._value_functions:
                vf.correct(current, target, self.learning_rate, state)

            log_correction(
                state, current, target, self.learning_rate,
                [vf.get_weight() for vf in self._value_functions]
            )

    def scale(self, multiplier: float) -> None:
        """
        Multiply every weight by a scalar, e.g. for weight decay.
        """
        with self._lock:
            for vf in self._value_functions:
                vf.scale(multiplier)

    def evaluate(self, candidates: Sequence[C]) -> C:
        """
        Select a candidate with an epsilon-greedy policy.

        With probability exploration_rate a candidate is chosen uniformly at
        random without computing any value. Otherwise the candidate whose
        state has the greatest value is returned; on ties the earliest one.

        Args:
            candidates: Sequence of records exposing a state and an action

        Returns:
            The selected candidate, unchanged

        Raises:
            NoCandidatesError: If candidates is empty
        """
        candidates = list(candidates)
        distribution = self.policy.act(candidates, self.get_value)
        chosen = distribution.sample()

        log_selection(not isinstance(distribution, Constant), len(candidates))

        return chosen

    def update(self, xy_vals_seq: Iterable[Tuple[X, float]]) -> 'FunctionApproximator[X]':
        """
        Correct the weights for each (state, target) pair in order.

        Args:
            xy_vals_seq: Sequence of (state, target) pairs

        Returns:
            This approximator
        """
        with self._lock:
            for state, target in xy_vals_seq:
                self.correct(state, target)
        return self

    def iterate_updates(
        self,
        xy_seq_stream: Iterable[Iterable[Tuple[X, float]]]
    ) -> Iterator[np.ndarray]:
        """
        Apply a series of updates with different data batches.

        Args:
            xy_seq_stream: Iterator of (state, target) pair sequences

        Returns:
            Iterator of weight snapshots, starting with the current weights
        """
        yield self.weights()
        for xy_vals_seq in xy_seq_stream:
            self.update(xy_vals_seq)
            yield self.weights()

    def solve(
        self,
        xy_vals_seq: Iterable[Tuple[X, float]],
        error_tolerance: Optional[float] = None,
        max_iterations: Optional[int] = None
    ) -> 'FunctionApproximator[X]':
        """
        Fit the weights to a fixed data set.

        The data is replayed until two consecutive weight snapshots differ by
        at most error_tolerance, or max_iterations passes have been made.

        Args:
            xy_vals_seq: Sequence of (state, target) pairs
            error_tolerance: Optional convergence tolerance (default 1e-6)
            max_iterations: Optional bound on the number of passes

        Returns:
            This approximator

        Raises:
            ValueError: If a weight becomes infinite or NaN
        """
        tol = 1e-6 if error_tolerance is None else error_tolerance

        def done(a: np.ndarray, b: np.ndarray) -> bool:
            return _max_abs_diff(a, b) <= tol

        xy_vals_list = list(xy_vals_seq)
        if max_iterations is None:
            batches = itertools.repeat(xy_vals_list)
        else:
            batches = itertools.repeat(xy_vals_list, max_iterations)

        iteration = 0
        previous = current = None
        for iteration, snapshot in enumerate(converge(self.iterate_updates(batches), done)):
            if not np.all(np.isfinite(snapshot)):
                log_convergence(iteration, float("nan"), tol, False)
                raise ValueError(
                    f"weights diverged after {iteration} passes; "
                    f"learning_rate={self.learning_rate} is too large for this data"
                )
            previous, current = current, snapshot

        error = _max_abs_diff(previous, current) if previous is not None else 0.0
        log_convergence(iteration, error, tol, error <= tol)
        log_weights_summary(current, "solved_weights")

        return self

    def within(self, other: 'FunctionApproximator[X]', tolerance: float) -> bool:
        """
        Check if this approximator's weights are within tolerance of another's.

        Args:
            other: Another approximator
            tolerance: Tolerance for comparison

        Returns:
            True if both have as many value functions and all weights are
            within tolerance, False otherwise
        """
        if not isinstance(other, FunctionApproximator):
            return False

        mine, theirs = self.weights(), other.weights()
        if mine.shape != theirs.shape:
            return False
        return _max_abs_diff(mine, theirs) <= tolerance

    def __repr__(self) -> str:
        return (f"FunctionApproximator(value_functions={len(self._value_functions)}, "
                f"learning_rate={self.learning_rate}, "
                f"exploration_rate={self.exploration_rate})")


def _max_abs_diff(a: np.ndarray, b: np.ndarray) -> float:
    if a.size == 0:
        return 0.0
    return float(np.max(np.abs(a - b)))

