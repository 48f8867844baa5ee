from .partition import collect_present, partition
from .sequence import sequence, traverse

__all__ = (
    "collect_present",
    "partition",
    "sequence",
    "traverse",
)
