"""
Lift helpers with semantic namespaces.

Supports two import styles:
    from outcomes import lift as L   # Recommended
    from outcomes import lift        # Explicit

Architecture:
- L.up.*    - into Optional / Outcome (nullable, exceptions, kungfu types)
- L.down.*  - out of Optional / Outcome (nullable, kungfu types)

Examples:
    from outcomes import lift as L

    port = L.up.from_nullable(env.get("PORT"))
    outcome = L.up.from_result(kungfu_result)
    result = L.down.to_result(outcome)
"""

from __future__ import annotations

from . import down, up

# Convenience: most common functions in root for easy access
from .down import to_lazy, to_nullable, to_option, to_result
from .up import catching, from_lazy, from_nullable, from_option, from_result

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "catching",
    "from_lazy",
    "from_nullable",
    "from_option",
    "from_result",
    # Down
    "to_lazy",
    "to_nullable",
    "to_option",
    "to_result",
)
