"""
Tests for writing atlas descriptors.
"""

import unittest

from atlas_samples import MINIMAL_ATLAS, TWO_PAGE_ATLAS, AtlasFileMixin
from sprite_atlas.config import Config
from sprite_atlas.data import Atlas, Page, PixelFormat, Region, TextureFilter, Wrap
from sprite_atlas.errors import AtlasIOError
from sprite_atlas.io import format_atlas, loads, read_atlas, write_atlas


def _build_atlas():
    atlas = Atlas()
    page = atlas.add_page(
        Page(
            name="ui.png",
            width=64,
            height=32,
            format=PixelFormat.RGBA4444,
            min_filter=TextureFilter.LINEAR,
            mag_filter=TextureFilter.NEAREST,
            wrap=Wrap.Y,
        )
    )
    page.add_region(Region(name="panel", width=10, height=12, original_width=10, original_height=12, pads=(1, 1, 2, 2)))
    return atlas


class TestFormatAtlas(unittest.TestCase):
    """Test the canonical text layout."""

    def test_minimal_layout_is_reproduced(self):
        self.assertEqual(format_atlas(loads(MINIMAL_ATLAS)), MINIMAL_ATLAS)

    def test_two_page_layout(self):
        expected = TWO_PAGE_ATLAS.replace("MipMapLinearLinear, Linear", "MipMapLinearLinear,Linear")
        self.assertEqual(format_atlas(loads(TWO_PAGE_ATLAS)), expected)

    def test_optional_nine_patch_lines(self):
        text = format_atlas(_build_atlas())

        self.assertIn("  pad: 1, 1, 2, 2\n", text)
        self.assertNotIn("split:", text)
        lines = text.splitlines()
        self.assertEqual(
            [line.split(":")[0].strip() for line in lines[lines.index("panel") + 1:]],
            ["rotate", "xy", "size", "pad", "orig", "offset", "index"],
        )

    def test_page_header(self):
        lines = format_atlas(_build_atlas()).splitlines()

        self.assertEqual(
            lines[:6],
            ["", "ui.png", "size: 64, 32", "format: RGBA4444", "filter: Linear,Nearest", "repeat: y"],
        )

    def test_empty_atlas(self):
        self.assertEqual(format_atlas(Atlas()), "")


class TestWriteAtlas(AtlasFileMixin, unittest.TestCase):
    """Test writing to disk and reading back."""

    def test_round_trip(self):
        original = read_atlas(self.write_text(TWO_PAGE_ATLAS))
        out_dir = self.tmp_dir / "out"
        out_dir.mkdir()
        target = out_dir / "copy.atlas"

        write_atlas(original, target)
        copy = read_atlas(target)

        self.assertEqual(copy, original)
        self.assertEqual(copy.pages[1].regions[0].original_width, 20)
        self.assertEqual(copy.pages[0].resolved_path, out_dir.resolve() / "first.png")
        self.assertNotEqual(copy.pages[0].resolved_path, original.pages[0].resolved_path)

    def test_built_atlas_round_trip(self):
        atlas = _build_atlas()
        target = self.tmp_dir / "built.atlas"

        write_atlas(atlas, target)

        self.assertEqual(read_atlas(target), atlas)

    def test_encode_failure_keeps_existing_file(self):
        target = self.write_text(MINIMAL_ATLAS, name="keep.atlas")
        atlas = loads(MINIMAL_ATLAS)
        atlas.pages[0].regions[0].name = "h\u00e9ro\u219201"

        with self.assertRaises(AtlasIOError) as ctx:
            write_atlas(atlas, target, Config(encoding="latin-1"))

        self.assertIsInstance(ctx.exception.__cause__, UnicodeEncodeError)
        self.assertEqual(target.read_text(encoding="utf-8"), MINIMAL_ATLAS)
        self.assertEqual(sorted(p.name for p in self.tmp_dir.iterdir()), ["keep.atlas"])

    def test_unknown_encoding(self):
        target = self.write_text(MINIMAL_ATLAS, name="keep.atlas")

        with self.assertRaises(AtlasIOError):
            write_atlas(loads(MINIMAL_ATLAS), target, Config(encoding="no-such-codec"))
        self.assertEqual(target.read_text(encoding="utf-8"), MINIMAL_ATLAS)

    def test_overwrite_replaces_content(self):
        target = self.write_text(TWO_PAGE_ATLAS, name="replace.atlas")

        write_atlas(loads(MINIMAL_ATLAS), target)

        self.assertEqual(target.read_text(encoding="utf-8"), MINIMAL_ATLAS)
        self.assertEqual(sorted(p.name for p in self.tmp_dir.iterdir()), ["replace.atlas"])

    def test_unwritable_destination(self):
        with self.assertRaises(AtlasIOError) as ctx:
            write_atlas(_build_atlas(), self.missing_path())
        self.assertIsInstance(ctx.exception.__cause__, OSError)


if __name__ == "__main__":
    unittest.main()
