import unittest
from pathlib import Path
import sys

DIR = Path(__file__).parent if "__file__" in locals() else Path.cwd()
sys.path.append(str(DIR / "../src"))

import intervallic as iv  # noqa: E402


class TestNote(unittest.TestCase):
    def test_slots(self):
        self.assertNotIn("__dict__", dir(iv.Note))
        with self.assertRaises(AttributeError):
            iv.Note("C").x = 1  # type: ignore

    def test_parse(self):
        # notation, letter, accidentals, octave
        testData = (
            ("C", "C", 0, None),
            ("D#4", "D", 1, 4),
            ("Ebb-1", "E", -2, -1),
            ("b0", "B", 0, 0),
            ("f###9", "F", 3, 9),
        )
        for src, letter, acci, octave in testData:
            with self.subTest(src=src):
                n = iv.Note(src)
                self.assertEqual(n.letter, letter)
                self.assertEqual(n.acci, acci)
                self.assertEqual(n.octave, octave)
        self.assertEqual(iv.note("c#4"), iv.Note("C#4"))

    def test_parse_invalid(self):
        for src in ("", "H", "C#b", "C-", "Cx", "C10", "#C"):
            with self.subTest(src=src):
                with self.assertRaises(iv.InvalidNotation):
                    iv.Note(src)
        with self.assertRaises(TypeError):
            iv.Note(60)  # type: ignore

    def test_construct(self):
        self.assertEqual(str(iv.Note("E", "#", 4)), "E#4")
        self.assertEqual(str(iv.Note("e", -2)), "Ebb")
        self.assertEqual(str(iv.Note("G", 0, 0)), "G0")
        self.assertIs(iv.Note("E", "#", 4), iv.Note("E#4"))
        # a NaN octave marks a pitch class, as `None` does
        self.assertTrue(iv.Note("C", "", float("nan")).isPitchClass())
        with self.assertRaises(iv.InvalidLetter):
            iv.Note("H", "#")
        with self.assertRaises(iv.InvalidAccidentals):
            iv.Note("C", "#b")
        with self.assertRaises(iv.InvalidOctave):
            iv.Note("C", 0, 1.5)
        with self.assertRaises(iv.InvalidOctave):
            iv.Note("C", "#").toPitch(None)  # type: ignore

    def test_offsets(self):
        testData = (
            ("C", 0, 0),
            ("B####", 6, 15),
            ("Cb", 0, -1),
            ("A", 5, 9),
            ("Fbb4", 3, 3),
        )
        for src, diatonic, chromatic in testData:
            with self.subTest(src=src):
                n = iv.Note(src)
                self.assertEqual(n.diatonicOffset, diatonic)
                self.assertEqual(n.chromaticOffset, chromatic)
        self.assertEqual(iv.Note("Dbbb").accidentals, "bbb")

    def test_transpose(self):
        testData = (
            ("C", "P5", "G"),
            ("Db", "m3", "Fb"),
            ("C", "P8", "C"),
            ("Db", "A5", "A"),
            ("E#4", "M3", "G##4"),
            ("D", "-P8", "D"),
            ("Bbb", "-d5", "Eb"),
            ("A#5", "-m7", "B#4"),
            ("E", "P15", "E"),
            ("Fbb", "-d14", "Gb"),
            ("G#4", "M14", "F##6"),
            ("B###4", "m2", "C###5"),
            ("Dbbbbbb", "A6", "Bbbbbb"),
            ("Cbb5", "-d3", "Ab4"),
            ("B#############2", "A3", "D###############3"),
            # semitone counts transpose by the simplest interval
            ("C", 2, "D"),
            ("D#4", -5, "A#3"),
        )
        for src, interval, ans in testData:
            with self.subTest(src=src, interval=interval):
                self.assertEqual(str(iv.Note(src).transpose(interval)), ans)
        self.assertEqual(
            iv.Note("C").transpose(iv.Interval("P5")), iv.Note("C").transpose("P5")
        )

    def test_transpose_inverse(self):
        # an interval and its inversion add up to whole octaves
        for src in ("C", "F#", "Bbb", "E#4", "Ab-1"):
            for interval in ("M3", "A6", "d5", "P4", "m2", "M10"):
                with self.subTest(src=src, interval=interval):
                    n = iv.Note(src)
                    i = iv.Interval(interval)
                    back = n.transpose(i).transpose(i.invert())
                    self.assertTrue(back.toPitchClass().isEqual(n.toPitchClass()))

    def test_distance(self):
        testData = (
            ("C4", "F4", 5),
            ("Abb", "D#", 8),
            ("B3", "C6", 25),
            ("C4", "C4", 0),
            ("E5", "C4", -16),
            ("G", "C", 5),
        )
        for a, b, ans in testData:
            with self.subTest(a=a, b=b):
                self.assertEqual(iv.Note(a).distance(b), ans)
                # distance and interval agree
                self.assertEqual(iv.Note(a).intervalTo(b).chromaticSteps, ans)

    def test_octaveDiff(self):
        self.assertEqual(iv.Note.octaveDiff("C4", "C6"), 2)
        self.assertEqual(iv.Note.octaveDiff("C6", "B4"), -2)
        self.assertEqual(iv.Note.octaveDiff("G", "C"), 1)
        self.assertEqual(iv.Note.octaveDiff("C", "G"), 0)
        with self.assertRaises(iv.MixedComparison):
            iv.Note.octaveDiff("C4", "C")

    def test_interval(self):
        self.assertEqual(str(iv.Note("C#").intervalTo("Ab")), "d6")
        self.assertEqual(str(iv.Note("C#3").intervalFrom("Ab2")), "A3")
        self.assertEqual(str(iv.Note("C").intervalFrom("G")), "P4")
        self.assertEqual(str(iv.Note("G").intervalTo("Cb")), "d4")
        self.assertEqual(str(iv.Note("D#").intervalTo("A")), "d5")
        self.assertEqual(str(iv.Note("C4").intervalTo("E5")), "M10")
        self.assertEqual(str(iv.Note("E5").intervalTo("C4")), "-M10")

    def test_mixed(self):
        with self.assertRaises(iv.MixedComparison):
            iv.Note("C4").distance("E")
        with self.assertRaises(iv.MixedComparison):
            iv.Note("C").intervalTo("E4")
        with self.assertRaises(iv.MixedComparison):
            iv.Note("C").midi()
        with self.assertRaises(iv.MixedComparison):
            iv.Note("A").frequency()

    def test_midi(self):
        testData = (
            ("C4", 60),
            ("F1", 29),
            ("G#8", 116),
            ("C-1", 0),
            ("G9", 127),
            ("C-2", None),
            ("B9", None),
        )
        for src, ans in testData:
            with self.subTest(src=src):
                self.assertEqual(iv.Note(src).midi(), ans)

    def test_fromMidi(self):
        testData = (
            (60, "C4"),
            (0, "C-1"),
            (127, "G9"),
            (61, "C#4"),
            (70, "A#4"),
        )
        for midi, ans in testData:
            with self.subTest(midi=midi):
                self.assertEqual(str(iv.Note.fromMidi(midi)), ans)
        for midi in (-1, 128, 60.0, "60"):
            with self.subTest(midi=midi):
                with self.assertRaises(iv.InvalidMidi):
                    iv.Note.fromMidi(midi)  # type: ignore

    def test_frequency(self):
        self.assertAlmostEqual(iv.Note("C4").frequency(), 261.6256, places=4)
        self.assertAlmostEqual(iv.Note("C#4").frequency(), 277.18263, places=4)
        self.assertEqual(iv.Note("A4").frequency(), 440)
        self.assertEqual(iv.Note("A5").frequency(), 880)
        self.assertEqual(iv.Note("A4").frequency(A4=432), 432)

    def test_fromFrequency(self):
        self.assertEqual(str(iv.Note.fromFrequency(261.63)), "C4")
        self.assertEqual(str(iv.Note.fromFrequency(440)), "A4")
        self.assertEqual(str(iv.Note.fromFrequency(466)), "A#4")
        self.assertEqual(str(iv.Note.fromFrequency(432, A4=432)), "A4")
        for hz in (0, -440, float("inf"), float("nan")):
            with self.subTest(hz=hz):
                with self.assertRaises(iv.InvalidFrequency):
                    iv.Note.fromFrequency(hz)

    def test_simplify(self):
        testData = (
            ("C##", "D"),
            ("F####", "A"),
            ("Dbbbb4", "A#3"),
            ("B#############2", "C4"),
            ("Cb4", "B3"),
            ("E#", "F"),
            ("G", "G"),
        )
        for src, ans in testData:
            with self.subTest(src=src):
                simplified = iv.Note(src).simplify()
                self.assertEqual(str(simplified), ans)
                self.assertTrue(simplified.isEnharmonic(src))

    def test_isEnharmonic(self):
        testData = (
            ("C##", "D", True),
            ("B#", "C", True),
            ("Cb", "B", True),
            ("B#3", "C4", True),
            ("B#4", "C4", False),
            ("C4", "C", False),
            ("E", "F", False),
        )
        for a, b, ans in testData:
            with self.subTest(a=a, b=b):
                self.assertEqual(iv.Note(a).isEnharmonic(b), ans)
                self.assertEqual(iv.Note(b).isEnharmonic(a), ans)

    def test_isEqual(self):
        self.assertTrue(iv.Note("C#4").isEqual("C#4"))
        self.assertFalse(iv.Note("C#4").isEqual("Db4"))
        self.assertFalse(iv.Note("C#4").isEqual("C#"))
        self.assertEqual(iv.Note("C#"), iv.Note("c#"))
        self.assertEqual(len({iv.Note("C#"), iv.Note("c#"), iv.Note("C#4")}), 2)

    def test_pitch_class(self):
        self.assertTrue(iv.Note("C4").isPitch())
        self.assertTrue(iv.Note("C").isPitchClass())
        self.assertEqual(str(iv.Note("C#").toPitch(3)), "C#3")
        self.assertEqual(str(iv.Note("C#5").toPitch(3)), "C#3")
        self.assertEqual(str(iv.Note("E4").toPitchClass()), "E")

    def test_compare(self):
        notes = [iv.Note(n) for n in ("E4", "C", "C4", "Cb4", "B3", "A")]
        self.assertEqual(
            [str(n) for n in sorted(notes)], ["C", "A", "B3", "Cb4", "C4", "E4"]
        )
        self.assertLess(iv.Note.compare(iv.Note("C"), iv.Note("C-1")), 0)
        self.assertGreater(iv.Note.compare(iv.Note("D4"), iv.Note("C##4")), 0)
        self.assertEqual(iv.Note.compare(iv.Note("D4"), iv.Note("D4")), 0)

    def test_repr(self):
        self.assertEqual(str(iv.Note("Ab0")), "Ab0")
        self.assertEqual(repr(iv.Note("Ab0")), 'Note("Ab0")')


if __name__ == "__main__":
    unittest.main()
