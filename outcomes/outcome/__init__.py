"""
Outcome type
============

Success(value) | Failure(error) - a computation that may fail.
"""

from .variants import Failure, Outcome, Success

__all__ = (
    "Failure",
    "Outcome",
    "Success",
)
