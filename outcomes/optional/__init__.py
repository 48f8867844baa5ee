"""
Optional type
=============

Present(value) | Absent() - a value that may not be there.
"""

from .variants import Absent, Optional, Present

__all__ = (
    "Absent",
    "Optional",
    "Present",
)
