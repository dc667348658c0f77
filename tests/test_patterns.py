import unittest

from tonescale import InvalidPattern
from tonescale.theory.note_utils import PITCH_CLASS_NAMES
from tonescale.theory.scales import (
    SCALE_PATTERNS,
    lookup_pattern,
    normalize_pattern_name,
    pattern_names,
    validate_pattern,
)


class PatternTableTests(unittest.TestCase):
    def test_required_patterns(self) -> None:
        self.assertEqual(lookup_pattern("major"), (2, 2, 1, 2, 2, 2, 1))
        self.assertEqual(lookup_pattern("minor"), (2, 1, 2, 2, 1, 2, 2))
        self.assertEqual(lookup_pattern("harmonicMinor"), (2, 1, 2, 2, 1, 3, 1))
        self.assertEqual(lookup_pattern("majorPentatonic"), (2, 2, 3, 2, 3))
        self.assertEqual(lookup_pattern("minorPentatonic"), (3, 2, 2, 3, 2))

    def test_all_patterns_well_formed(self) -> None:
        for name, steps in SCALE_PATTERNS.items():
            self.assertIsInstance(steps, tuple)
            self.assertTrue(steps, name)
            self.assertTrue(all(s > 0 for s in steps), name)
            self.assertEqual(sum(steps), 12, name)

    def test_unknown(self) -> None:
        with self.assertRaises(InvalidPattern):
            lookup_pattern("bogus")

    def test_read_only(self) -> None:
        with self.assertRaises(TypeError):
            SCALE_PATTERNS["mine"] = (12,)  # type: ignore[index]

    def test_names_in_definition_order(self) -> None:
        names = pattern_names()
        self.assertEqual(names[:5], ["major", "minor", "harmonicMinor", "majorPentatonic", "minorPentatonic"])
        names.append("x")
        self.assertNotIn("x", pattern_names())

    def test_validate_pattern(self) -> None:
        self.assertEqual(validate_pattern("ok", [5, 7]), (5, 7))
        for bad in ([], [2, 0, 10], [2, -1], [2.0, 10], [True, 11]):
            with self.assertRaises(ValueError):
                validate_pattern("bad", bad)

    def test_alphabet(self) -> None:
        self.assertEqual(len(PITCH_CLASS_NAMES), 12)
        self.assertEqual(len(set(PITCH_CLASS_NAMES)), 12)
        self.assertEqual(PITCH_CLASS_NAMES[0], "C")
        self.assertNotIn("Bb", PITCH_CLASS_NAMES)


class NormalizePatternNameTests(unittest.TestCase):
    def test_aliases(self) -> None:
        self.assertEqual(normalize_pattern_name("natural_minor"), "minor")
        self.assertEqual(normalize_pattern_name("aeolian"), "minor")
        self.assertEqual(normalize_pattern_name("Harmonic-Minor"), "harmonicMinor")
        self.assertEqual(normalize_pattern_name("minor_pentatonic"), "minorPentatonic")
        self.assertEqual(normalize_pattern_name("MAJORPENTATONIC"), "majorPentatonic")
        self.assertEqual(normalize_pattern_name("ionian"), "major")

    def test_passthrough(self) -> None:
        self.assertEqual(normalize_pattern_name("dorian"), "dorian")
        self.assertEqual(normalize_pattern_name("bogus"), "bogus")
        self.assertEqual(normalize_pattern_name(None), "major")
        self.assertEqual(normalize_pattern_name(""), "major")


if __name__ == "__main__":
    unittest.main()
