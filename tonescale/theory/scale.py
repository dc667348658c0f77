from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple
import logging
import random

from .errors import InvalidTonic
from .note_utils import PITCH_CLASS_NAMES, format_pitch
from .scales import lookup_pattern

logger = logging.getLogger(__name__)

RandomSource = Callable[[], float]


@dataclass(frozen=True)
class Scale:
    """A concrete tonic + interval pattern (e.g. A minorPentatonic).

    Maps signed scale degrees to pitch strings such as "C#4". Degree 0 is the
    tonic; negative degrees walk down the pattern. Instances are immutable and
    safe to share.
    """

    tonic: str
    pattern_name: str = "major"
    pattern: Tuple[int, ...] = field(init=False, repr=False, compare=False)
    tonic_offset: int = field(init=False, repr=False, compare=False)
    # _prefix[k] = semitones from the tonic up to degree k within one cycle
    _prefix: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        pattern = lookup_pattern(self.pattern_name)
        if self.tonic not in PITCH_CLASS_NAMES:
            raise InvalidTonic(self.tonic)
        prefix = [0]
        for step in pattern:
            prefix.append(prefix[-1] + step)
        object.__setattr__(self, "pattern", pattern)
        object.__setattr__(self, "tonic_offset", PITCH_CLASS_NAMES.index(self.tonic))
        object.__setattr__(self, "_prefix", tuple(prefix))
        logger.debug("Built scale %s %s (%d degrees)", self.tonic, self.pattern_name, len(pattern))

    def __len__(self) -> int:
        return len(self.pattern)

    def _semitones_from_tonic(self, degree: int) -> int:
        # Walking up d steps or down |d| steps over a cyclic pattern is
        # (whole cycles * span) + the partial prefix; divmod floors for d < 0.
        cycles, rest = divmod(degree, len(self.pattern))
        return cycles * self._prefix[-1] + self._prefix[rest]

    def note(self, degree: int, octave: int = 4) -> str:
        """Pitch at a signed scale degree, relative to ``octave``.

        Args:
            degree: 0 = tonic, positive = up the pattern, negative = down.
            octave: Octave of the tonic (4 = middle C octave).

        Returns:
            Pitch string like "E4" or "B3".
        """
        if degree == 0:
            return format_pitch(self.tonic, octave)
        total = self.tonic_offset + self._semitones_from_tonic(degree)
        octave_adjustment, note_index = divmod(total, 12)
        return format_pitch(PITCH_CLASS_NAMES[note_index], octave + octave_adjustment)

    def notes(self, octave: int = 4, count: Optional[int] = None) -> List[str]:
        """Consecutive degrees from the tonic.

        A negative ``count`` walks downwards. Defaults to one full cycle up.
        """
        if count is None:
            count = len(self.pattern)
        if count < 0:
            return [self.note(-i, octave) for i in range(-count)]
        return [self.note(i, octave) for i in range(count)]

    def notes_in_range(self, start_octave: int, end_octave: int) -> List[str]:
        """One ascending cycle per octave, start to end inclusive."""
        result: List[str] = []
        for oct_ in range(start_octave, end_octave + 1):
            result.extend(self.notes(oct_))
        return result

    def random_note(self, octave: int = 4, rng: Optional[RandomSource] = None) -> str:
        """Pick a degree in [0, len) from ``rng`` (defaults to random.random)."""
        source = rng if rng is not None else random.random
        degree = int(source() * len(self.pattern))
        return self.note(degree, octave)

    def note_name(self, degree: int) -> str:
        """Pitch class (no octave) labelled by the raw pattern step at ``degree``.

        This is a lookup of the single step stored at ``degree mod len``, not
        the accumulated position that ``note`` computes, so the two only
        agree by coincidence.
        """
        scale_degree = degree % len(self.pattern)
        semitones = self.pattern[scale_degree]
        return PITCH_CLASS_NAMES[(self.tonic_offset + semitones) % 12]

    def transpose(self, new_tonic: str) -> "Scale":
        return Scale(new_tonic, self.pattern_name)

    def __str__(self) -> str:
        return f"{self.tonic} {self.pattern_name}: {' '.join(self.notes())}"
