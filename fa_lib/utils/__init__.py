"""
Utility functions for the function approximation library.
"""

from fa_lib.utils.iterate import converge

__all__ = [
    'converge'
]
