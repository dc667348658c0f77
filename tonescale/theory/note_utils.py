# tonescale/theory/note_utils.py
from __future__ import annotations
import re
from typing import Dict, Tuple

from .errors import InvalidPitch

PITCH_CLASS_NAMES: Tuple[str, ...] = ("C","C#","D","D#","E","F","F#","G","G#","A","A#","B")
NAME_TO_PC: Dict[str, int] = {
    "C":0,"B#":0, "C#":1,"Db":1, "D":2,"D#":3,"Eb":3, "E":4,"Fb":4,
    "F":5,"E#":5, "F#":6,"Gb":6, "G":7,"G#":8,"Ab":8, "A":9,"A#":10,"Bb":10, "B":11,"Cb":11
}
# spellings whose letter sits in the neighbouring octave
_OCTAVE_WRAP: Dict[str, int] = {"B#": 1, "Cb": -1}
_OCTAVE_RE = re.compile(r"-?[0-9]+")


def normalize_name(name: str) -> str:
    """Spell a pitch class with sharps ("Db" -> "C#"). Unknown names pass through."""
    pc = NAME_TO_PC.get(name)
    if pc is None:
        return name
    return PITCH_CLASS_NAMES[pc]


def format_pitch(name: str, octave: int) -> str:
    return f"{name}{octave}"


def parse_pitch(pitch: str) -> Tuple[str, int]:
    """Split a pitch string like 'C#4', 'Db3' or 'C-1' into (sharp name, octave).

    Spellings that cross the B/C boundary keep their sounding pitch: 'Cb4'
    is ('B', 3) and 'B#4' is ('C', 5).
    """
    if not pitch or len(pitch) < 2:
        raise InvalidPitch(pitch, "too short")
    name = pitch[0].upper()
    if name not in "ABCDEFG":
        raise InvalidPitch(pitch, "bad letter")
    idx = 1
    if pitch[idx] in ("#", "b"):
        name += pitch[idx]
        idx += 1
    if not _OCTAVE_RE.fullmatch(pitch[idx:]):
        raise InvalidPitch(pitch, "bad octave")
    octave = int(pitch[idx:]) + _OCTAVE_WRAP.get(name, 0)
    return normalize_name(name), octave


def pitch_class(pitch: str) -> str:
    return parse_pitch(pitch)[0]


def pitch_to_midi(pitch: str) -> int:
    """Middle C (C4) -> 60."""
    name, octave = parse_pitch(pitch)
    midi = 12 * (octave + 1) + NAME_TO_PC[name]  # C4=60
    if midi < 0 or midi > 127:
        raise InvalidPitch(pitch, "MIDI out of range")
    return midi
