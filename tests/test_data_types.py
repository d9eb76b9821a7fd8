"""
Tests for SavedColor, ColorValues and hex helpers.
"""

import pytest

from chromaspace.core.data_types import ColorValues, SavedColor, hex_to_rgb, rgb_to_hex


class TestHex:
    """Color picker hex strings."""

    def test_rgb_to_hex(self):
        assert rgb_to_hex((255, 0, 127.5)) == "#ff0080"
        assert rgb_to_hex((0, 0, 0)) == "#000000"

    def test_rgb_to_hex_clamps(self):
        assert rgb_to_hex((300, -20, 15)) == "#ff000f"

    @pytest.mark.parametrize("text", ["#FF8000", "ff8000", "  #ff8000 "])
    def test_hex_to_rgb(self, text):
        assert hex_to_rgb(text) == (255.0, 128.0, 0.0)

    @pytest.mark.parametrize("text", ["#12345", "zzzzzz", "#1234567", ""])
    def test_invalid_hex(self, text):
        with pytest.raises(ValueError, match="Invalid hex color"):
            hex_to_rgb(text)


class TestSavedColor:
    """Point entities."""

    def test_rgb_is_clamped(self):
        color = SavedColor(id="a", rgb=(300, -5, 10))
        assert color.rgb == (255.0, 0.0, 10.0)

    def test_wrong_channel_count(self):
        with pytest.raises(ValueError, match="3 channels"):
            SavedColor(id="a", rgb=(1, 2))

    def test_copy_is_independent(self):
        """A copy has a new id, the same color and its own hue memory."""
        source = SavedColor(id="a", rgb=(10, 20, 30))
        source.hue_memory.hls = 99.0

        copy = source.copy_with("b")

        assert copy.id == "b"
        assert copy.rgb == source.rgb
        assert copy.interpolated is False
        assert copy.hue_memory is not source.hue_memory
        assert copy.hue_memory.hls == 0.0

    def test_hex(self):
        assert SavedColor(id="a", rgb=(255, 255, 255)).hex == "#ffffff"


class TestColorValues:
    """Derived display values."""

    def test_display_rounds_half_up(self):
        values = ColorValues(
            rgb=(127.5, 0.2, 254.6),
            hls=(120.5, 49.5, 10.4),
            hsv=(120.5, 10.4, 99.5),
        )
        display = values.display()

        assert display["rgb"] == (128, 0, 255)
        assert display["hls"] == (121, 50, 10)
        assert display["hsv"] == (121, 10, 100)

    def test_display_hue_wraps(self):
        """A hue just below 360 is shown as 0."""
        values = ColorValues(rgb=(0, 0, 0), hls=(359.7, 0, 0), hsv=(359.7, 0, 0))
        assert values.display()["hls"][0] == 0
        assert values.display()["hsv"][0] == 0

    def test_hex(self):
        assert ColorValues(rgb=(255, 0, 0), hls=(0, 50, 100), hsv=(0, 100, 100)).hex == "#ff0000"
