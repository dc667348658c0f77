"""tonescale package initialization.

Exposes the scale engine so callers can simply ``from tonescale import Scale``.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .theory.errors import InvalidPattern, InvalidPitch, InvalidTonic, ScaleError  # noqa: E402
from .theory.scale import Scale  # noqa: E402
from .theory.scales import SCALE_PATTERNS, lookup_pattern  # noqa: E402

__all__ = [
    "__version__",
    "Scale",
    "SCALE_PATTERNS",
    "lookup_pattern",
    "ScaleError",
    "InvalidTonic",
    "InvalidPattern",
    "InvalidPitch",
]
