import unittest
from pathlib import Path
from concurrent.futures import ThreadPoolExecutor
import sys

DIR = Path(__file__).parent if "__file__" in locals() else Path.cwd()
sys.path.append(str(DIR / "../src"))

from intervallic._impl.utils import cachedGetter, cycGet, splitNotations  # noqa: E402
from intervallic._impl.tables import MAJOR_SCALE_TONES, STEP_NAMES  # noqa: E402


class _Counted:
    __slots__ = ("calls", "_hash", "_size")

    def __init__(self):
        self.calls = 0

    @cachedGetter
    def __hash__(self):
        self.calls += 1
        return 42

    @cachedGetter("_size")
    def size(self):
        self.calls += 1
        return 7


class TestUtils(unittest.TestCase):
    def test_cycGet(self):
        testData = (
            (0, 0),
            (4, 7),
            (7, 12),
            (8, 14),
            (13, 23),
            (-1, -1),
            (-7, -12),
        )
        for idx, ans in testData:
            with self.subTest(idx=idx):
                self.assertEqual(cycGet(MAJOR_SCALE_TONES, idx, 12), ans)
        self.assertEqual(cycGet("CDEFGAB", 9), "E")
        self.assertEqual(cycGet("CDEFGAB", -1), "B")

    def test_cachedGetter(self):
        obj = _Counted()
        self.assertEqual(hash(obj), 42)
        self.assertEqual(hash(obj), 42)
        self.assertEqual(obj.size(), 7)
        self.assertEqual(obj.size(), 7)
        self.assertEqual(obj.calls, 2)

    def test_cachedGetter_threads(self):
        obj = _Counted()
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: hash(obj), range(64)))
        self.assertEqual(set(results), {42})
        self.assertEqual(obj.calls, 1)

    def test_splitNotations(self):
        self.assertEqual(splitNotations("P1  M3 P5"), ("P1", "M3", "P5"))
        self.assertEqual(splitNotations(""), ())
        self.assertEqual(splitNotations(["C", "E"]), ("C", "E"))
        self.assertEqual(splitNotations(iter(("C",))), ("C",))

    def test_tables(self):
        self.assertEqual(list(MAJOR_SCALE_TONES), [0, 2, 4, 5, 7, 9, 11])
        self.assertEqual(STEP_NAMES["C"], 0)
        self.assertEqual(STEP_NAMES.inv[6], "B")
        with self.assertRaises(ValueError):
            MAJOR_SCALE_TONES[0] = 1  # type: ignore


if __name__ == "__main__":
    unittest.main()
