"""
Iteration utilities.

This module provides convergence detection over streams of values, used
when repeatedly fitting an approximator to a fixed data set.
"""

from typing import TypeVar, Callable, Iterator

# Type variable for values
T = TypeVar('T')

def converge(values_iterator: Iterator[T], done_func: Callable[[T, T], bool]) -> Iterator[T]:
    """
    Read from an iterator until two consecutive values satisfy the done function.
    
    This function yields values from the input iterator until the done function
    returns True for two consecutive values, or the input iterator is exhausted.
    
    Args:
        values_iterator: Iterator of values
        done_func: Function that takes two consecutive values and returns True if converged
        
    Returns:
        Iterator that stops when convergence is detected
    """
    values_iterator = iter(values_iterator)
    try:
        a = next(values_iterator)
    except StopIteration:
        return
    
    yield a
    
    for b in values_iterator:
        yield b
        
        if done_func(a, b):
            return
        
        a = b
