from __future__ import annotations

"""Scale patterns for 12-TET.

Each pattern is the ordered list of semitone steps between consecutive scale
degrees. Patterns are cyclic: the step after the last entry is the first one
again, one octave higher.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from .errors import InvalidPattern


def validate_pattern(name: str, steps: Sequence[int]) -> Tuple[int, ...]:
    """Check that a pattern is a non-empty sequence of positive integers.

    Args:
        name: Pattern name, used in the error message.
        steps: Semitone steps between consecutive degrees.

    Returns:
        The steps as a tuple.
    """
    if not steps:
        raise ValueError(f"Scale pattern {name!r} has no steps")
    for s in steps:
        if isinstance(s, bool) or not isinstance(s, int) or s <= 0:
            raise ValueError(f"Scale pattern {name!r} has a non-positive step: {s!r}")
    return tuple(steps)


_RAW_PATTERNS: Dict[str, List[int]] = {
    "major": [2, 2, 1, 2, 2, 2, 1],  # W W H W W W H
    "minor": [2, 1, 2, 2, 1, 2, 2],  # W H W W H W W
    "harmonicMinor": [2, 1, 2, 2, 1, 3, 1],
    "majorPentatonic": [2, 2, 3, 2, 3],
    "minorPentatonic": [3, 2, 2, 3, 2],
    "melodicMinor": [2, 1, 2, 2, 2, 2, 1],
    "dorian": [2, 1, 2, 2, 2, 1, 2],
    "phrygian": [1, 2, 2, 2, 1, 2, 2],
    "lydian": [2, 2, 2, 1, 2, 2, 1],
    "mixolydian": [2, 2, 1, 2, 2, 1, 2],
    "locrian": [1, 2, 2, 1, 2, 2, 2],
    "wholeTone": [2, 2, 2, 2, 2, 2],
    "minorBlues": [3, 2, 1, 1, 3, 2],
    "chromatic": [1] * 12,
}

SCALE_PATTERNS: Mapping[str, Tuple[int, ...]] = MappingProxyType(
    {name: validate_pattern(name, steps) for name, steps in _RAW_PATTERNS.items()}
)

_ALIASES: Dict[str, str] = {
    "maj": "major",
    "ionian": "major",
    "min": "minor",
    "natural_minor": "minor",
    "nat_minor": "minor",
    "naturalminor": "minor",
    "aeolian": "minor",
    "harmonic_minor": "harmonicMinor",
    "harmonic": "harmonicMinor",
    "melodic_minor": "melodicMinor",
    "melodic": "melodicMinor",
    "major_pentatonic": "majorPentatonic",
    "minor_pentatonic": "minorPentatonic",
    "whole_tone": "wholeTone",
    "minor_blues": "minorBlues",
    "blues": "minorBlues",
}


def lookup_pattern(name: str) -> Tuple[int, ...]:
    """Return the step tuple registered under ``name``."""
    steps = SCALE_PATTERNS.get(name)
    if steps is None:
        raise InvalidPattern(name)
    return steps


def pattern_names() -> List[str]:
    return list(SCALE_PATTERNS)


def normalize_pattern_name(value: str | None) -> str:
    """Map loose spellings ("natural_minor", "Harmonic-Minor") to registry names.

    Registry names are returned as-is and anything unrecognised passes through
    unchanged, so the caller still gets InvalidPattern for it later.
    """
    if not value:
        return "major"
    if value in SCALE_PATTERNS:
        return value
    t = value.strip().replace("-", "_")
    if t in SCALE_PATTERNS:
        return t
    lowered = t.lower()
    if lowered in _ALIASES:
        return _ALIASES[lowered]
    for name in SCALE_PATTERNS:
        if name.lower() == lowered.replace("_", ""):
            return name
    return value
