import unittest

from tonescale import InvalidPitch
from tonescale.theory.note_utils import (
    format_pitch,
    normalize_name,
    parse_pitch,
    pitch_class,
    pitch_to_midi,
)


class NoteUtilsTests(unittest.TestCase):
    def test_normalize_name(self) -> None:
        self.assertEqual(normalize_name("Db"), "C#")
        self.assertEqual(normalize_name("Bb"), "A#")
        self.assertEqual(normalize_name("Cb"), "B")
        self.assertEqual(normalize_name("F#"), "F#")
        self.assertEqual(normalize_name("H"), "H")

    def test_format_and_parse(self) -> None:
        self.assertEqual(format_pitch("C#", 4), "C#4")
        self.assertEqual(format_pitch("C", -1), "C-1")
        self.assertEqual(parse_pitch("C#4"), ("C#", 4))
        self.assertEqual(parse_pitch("Eb3"), ("D#", 3))
        self.assertEqual(parse_pitch("a10"), ("A", 10))
        self.assertEqual(parse_pitch("B-2"), ("B", -2))
        self.assertEqual(pitch_class("G#5"), "G#")

    def test_enharmonics_across_octave_boundary(self) -> None:
        self.assertEqual(parse_pitch("Cb4"), ("B", 3))
        self.assertEqual(parse_pitch("B#4"), ("C", 5))
        self.assertEqual(pitch_to_midi("Cb4"), 59)
        self.assertEqual(pitch_to_midi("B#4"), 72)
        self.assertEqual(pitch_to_midi("Fb4"), 64)
        self.assertEqual(pitch_to_midi("E#4"), 65)

    def test_octave_must_be_plain_integer(self) -> None:
        for bad in ("C 4", "C+4", "C4_0", "C4 ", "C--1", "C-"):
            with self.assertRaises(InvalidPitch, msg=bad):
                parse_pitch(bad)

    def test_parse_rejects_garbage(self) -> None:
        for bad in ("", "C", "H4", "C#", "Cx4", "C4.5"):
            with self.assertRaises(InvalidPitch, msg=bad):
                parse_pitch(bad)

    def test_pitch_to_midi(self) -> None:
        self.assertEqual(pitch_to_midi("C4"), 60)
        self.assertEqual(pitch_to_midi("A4"), 69)
        self.assertEqual(pitch_to_midi("C-1"), 0)
        self.assertEqual(pitch_to_midi("G9"), 127)
        with self.assertRaises(InvalidPitch):
            pitch_to_midi("G#9")
        with self.assertRaises(InvalidPitch):
            pitch_to_midi("B-2")


if __name__ == "__main__":
    unittest.main()
