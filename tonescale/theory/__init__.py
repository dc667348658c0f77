"""Theory layer: pitch classes, interval patterns and the Scale engine."""

from .scale import Scale  # noqa: F401
from .scales import SCALE_PATTERNS, lookup_pattern  # noqa: F401
