"""Physics layer - ball flight intercepts."""

from .intercept import Intercept, find_intercept, solve_segment

__all__ = [
    "Intercept",
    "find_intercept",
    "solve_segment",
]
