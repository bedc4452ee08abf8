import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "telemetry"))

from ferrisfetch_renderer import FERRIS_FULL, FERRIS_SMALL, ArtBlock, info_row_count, lookup, validate_catalog, validate_tables


class ArtCatalogTests(unittest.TestCase):
    def test_lookup_by_mode(self):
        self.assertIs(lookup(False), FERRIS_FULL)
        self.assertIs(lookup(True), FERRIS_SMALL)

    def test_blocks_have_uniform_width(self):
        for block in (FERRIS_FULL, FERRIS_SMALL):
            with self.subTest(height=block.height):
                self.assertEqual({len(line) for line in block.lines}, {block.width})

    def test_declared_dimensions(self):
        self.assertEqual((FERRIS_FULL.width, FERRIS_FULL.height), (23, 8))
        self.assertEqual((FERRIS_SMALL.width, FERRIS_SMALL.height), (11, 5))

    def test_blocks_cover_their_info_rows(self):
        self.assertGreaterEqual(FERRIS_FULL.height, info_row_count(False))
        self.assertGreaterEqual(FERRIS_SMALL.height, info_row_count(True))
        validate_tables()

    def test_ragged_art_is_rejected(self):
        with self.assertRaises(ValueError):
            ArtBlock(lines=("abc", "ab"))

    def test_wide_glyphs_are_measured_in_cells(self):
        with self.assertRaises(ValueError):
            ArtBlock(lines=("🦀", "x"))
        self.assertEqual(ArtBlock(lines=("🦀", "xx")).width, 2)

    def test_empty_block(self):
        empty = ArtBlock.empty()
        self.assertEqual((empty.width, empty.height), (0, 0))

    def test_short_art_fails_validation(self):
        with self.assertRaises(RuntimeError):
            validate_catalog({True: FERRIS_SMALL.height + 1})
        validate_catalog({False: FERRIS_FULL.height, True: FERRIS_SMALL.height})


if __name__ == "__main__":
    unittest.main()
