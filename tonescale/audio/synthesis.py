from __future__ import annotations

"""Abstract-ish sound engine interface.

Rendering, instruments and scheduling live outside this package. Concrete
engines subclass Synth and accept the pitch strings the theory layer produces.
"""

from typing import Any, Callable, Dict, Iterable, Optional, Union

from ..theory.note_utils import parse_pitch
from ..theory.scale import RandomSource, Scale

Duration = Union[str, float]


class Synth:
    """Abstract-like playable sound source."""

    def play_pitch(
        self,
        pitch: str,
        duration: Duration = "8n",
        time: Optional[float] = None,
        velocity: float = 0.8,
    ) -> None:
        """Trigger ``pitch`` (e.g. "C#4") for ``duration`` at optional ``time``."""
        raise NotImplementedError

    def close(self) -> None:
        """Release resources."""
        pass


SoundSourceFactory = Callable[[str, Dict[str, Any]], Synth]
"""(kind, option overrides) -> Synth, provided by the sound engine."""


_SOURCE_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "mono": {
        "oscillator": {"type": "square"},
        "envelope": {"attack": 0.01, "decay": 0.1, "sustain": 0.2, "release": 0.3},
    },
    "fm": {
        "harmonicity": 2.5,
        "modulationIndex": 3,
        "envelope": {"attack": 0.05, "decay": 0.3, "sustain": 0.2, "release": 0.3},
        "modulation": {"type": "sine"},
        "modulationEnvelope": {"attack": 0.2, "decay": 0.2, "sustain": 0.2, "release": 0.5},
    },
    "am": {
        "harmonicity": 1.5,
        "envelope": {"attack": 0.02, "decay": 0.3, "sustain": 0.2, "release": 0.3},
        "modulation": {"type": "triangle"},
    },
    "poly": {
        "oscillator": {"type": "triangle"},
        "envelope": {"attack": 0.1, "decay": 0.2, "sustain": 0.4, "release": 0.5},
    },
    "noise": {
        "noise": {"type": "white"},
        "envelope": {"attack": 0.005, "decay": 0.2, "sustain": 0, "release": 0.1},
    },
    "sampler": {},
}

SOURCE_KINDS = tuple(_SOURCE_DEFAULTS)


def source_defaults(kind: str) -> Dict[str, Any]:
    """Default option overrides for a sound source kind ({} if unknown)."""
    # nested dicts are copied so callers can edit the result freely
    return {k: (dict(v) if isinstance(v, dict) else v) for k, v in _SOURCE_DEFAULTS.get(kind, {}).items()}


def merge_source_options(kind: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    settings = source_defaults(kind)
    settings.update(overrides or {})
    return settings


class Player:
    """Feeds pitch strings from the theory layer into a Synth."""

    def __init__(self, synth: Synth) -> None:
        self.synth = synth

    def play(
        self,
        pitch: str,
        duration: Duration = "8n",
        time: Optional[float] = None,
        velocity: float = 0.8,
    ) -> None:
        parse_pitch(pitch)
        self.synth.play_pitch(pitch, duration, time, velocity)

    def play_notes(self, pitches: Iterable[str], duration: Duration = "8n", velocity: float = 0.8) -> None:
        for p in pitches:
            self.play(p, duration, None, velocity)

    def random_note(self, scale: Scale, octave: int = 4, rng: Optional[RandomSource] = None) -> str:
        return scale.random_note(octave, rng)
