import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "telemetry"))

from ferrisfetch_renderer import BAR_SLOTS, bar_slots, usage_percent, zip_padded


class ZipPaddedTests(unittest.TestCase):
    def test_pads_shorter_right(self):
        self.assertEqual(zip_padded(["a", "b", "c"], ["1"], "_", ""), [("a", "1"), ("b", ""), ("c", "")])

    def test_pads_shorter_left(self):
        self.assertEqual(zip_padded(["a"], ["1", "2"], "   ", ""), [("a", "1"), ("   ", "2")])

    def test_empty_inputs(self):
        self.assertEqual(zip_padded([], [], "", ""), [])
        self.assertEqual(zip_padded([], ["x"], "", "-"), [("", "x")])


class UsageBarTests(unittest.TestCase):
    def test_zero_total_is_empty(self):
        self.assertEqual(bar_slots(0, 0), 0)
        self.assertEqual(usage_percent(0, 0), 0)
        self.assertEqual(bar_slots(5, 0), 0)

    def test_reference_memory_reading(self):
        gib = 1024**3
        used, total = int(12.3 * gib), 32 * gib
        self.assertEqual(bar_slots(used, total), 4)
        self.assertEqual(usage_percent(used, total), 38)

    def test_halves_round_away_from_zero(self):
        # 1/4 of 10 slots is 2.5, 1/8 is 12.5%; banker's rounding would give 2 and 12.
        self.assertEqual(bar_slots(1, 4), 3)
        self.assertEqual(usage_percent(1, 8), 13)
        self.assertEqual(usage_percent(1, 200), 1)
        self.assertEqual(bar_slots(3, 4), 8)

    def test_full_and_over_full_clamp(self):
        self.assertEqual(bar_slots(100, 100), BAR_SLOTS)
        self.assertEqual(bar_slots(150, 100), BAR_SLOTS)
        self.assertEqual(usage_percent(150, 100), 100)
        self.assertEqual(bar_slots(-3, 100), 0)

    def test_monotonic_in_used(self):
        total = 977
        previous = -1
        for used in range(total + 1):
            filled = bar_slots(used, total)
            self.assertGreaterEqual(filled, previous)
            self.assertTrue(0 <= filled <= BAR_SLOTS)
            previous = filled

    def test_custom_slot_count(self):
        self.assertEqual(bar_slots(1, 2, slots=5), 3)
        self.assertEqual(bar_slots(1, 3, slots=20), 7)


if __name__ == "__main__":
    unittest.main()
