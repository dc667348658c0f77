from __future__ import annotations

"""Random sources for degree and tonic selection, and seeding."""

import os
import random
from typing import Callable, List, Optional

import numpy as np

from ..theory.note_utils import PITCH_CLASS_NAMES
from ..theory.scale import RandomSource, Scale

BACKENDS = ("python", "numpy")


def seed_if_needed() -> Optional[int]:
    """Seed RNGs if SEED env var is set. Returns the seed used, if any."""
    seed = os.environ.get("SEED")
    if seed is None:
        return None
    try:
        s = int(seed)
    except ValueError:
        return None
    random.seed(s)
    np.random.seed(s)
    return s


def make_source(seed: Optional[int] = None, backend: str = "python") -> RandomSource:
    """Build a zero-arg source of floats in [0, 1).

    Args:
        seed: Optional seed; the same seed always replays the same sequence.
        backend: "python" (random.Random) or "numpy" (numpy Generator).

    Returns:
        A callable suitable for ``Scale.random_note(rng=...)``.
    """
    if backend == "python":
        return random.Random(seed).random
    if backend == "numpy":
        gen = np.random.default_rng(seed)
        return lambda: float(gen.random())
    raise ValueError(f"Unsupported random backend: {backend}")


def choose_random_tonic(rng: Optional[Callable[[], float]] = None) -> str:
    """Choose one of the 12 sharp-spelled tonics."""
    source = rng if rng is not None else random.random
    return PITCH_CLASS_NAMES[int(source() * len(PITCH_CLASS_NAMES))]


def random_notes(scale: Scale, count: int, octave: int = 4, rng: Optional[RandomSource] = None) -> List[str]:
    source = rng if rng is not None else random.random
    return [scale.random_note(octave, source) for _ in range(count)]
