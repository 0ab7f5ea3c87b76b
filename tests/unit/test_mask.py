"""Unit tests for the binary mask builder."""

from brandmark.core.mask import is_ink, luminance, to_mask
from brandmark.domain import RasterSample

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
CLEAR = (0, 0, 0, 0)


class TestLuminance:
    """Tests for luminance weighting."""

    def test_extremes(self):
        assert luminance(0, 0, 0) == 0.0
        assert round(luminance(255, 255, 255), 6) == 255.0

    def test_channel_weights(self):
        """Test green weighs most and blue least."""
        assert luminance(0, 100, 0) > luminance(100, 0, 0) > luminance(0, 0, 100)


class TestIsInk:
    """Tests for single pixel classification."""

    def test_dark_opaque_is_ink(self):
        assert is_ink(BLACK)
        assert is_ink((100, 100, 100, 255))

    def test_light_is_not_ink(self):
        assert not is_ink(WHITE)
        assert not is_ink((200, 200, 200, 255))

    def test_alpha_floor_is_exclusive(self):
        """Test that alpha must be strictly above the floor."""
        assert not is_ink((0, 0, 0, 128))
        assert is_ink((0, 0, 0, 129))

    def test_saturated_colors(self):
        """Test that luminance, not channel darkness, decides."""
        assert is_ink((255, 0, 0, 255))
        assert is_ink((0, 0, 255, 255))
        assert not is_ink((255, 255, 0, 255))

    def test_custom_threshold(self):
        gray = (150, 150, 150, 255)
        assert not is_ink(gray, threshold=128)
        assert is_ink(gray, threshold=200)


class TestToMask:
    """Tests for thresholding whole samples."""

    def test_dimensions_preserved(self):
        sample = RasterSample.from_rows([[BLACK, WHITE, CLEAR]] * 2)
        mask = to_mask(sample)
        assert mask.width == 3
        assert mask.height == 2

    def test_cells_follow_pixels(self):
        sample = RasterSample.from_rows(
            [
                [BLACK, WHITE, CLEAR],
                [WHITE, BLACK, (0, 0, 0, 200)],
            ]
        )
        mask = to_mask(sample)
        assert mask.cells == ((True, False, False), (False, True, True))

    def test_transparent_black_is_background(self):
        """Test that transparent pixels never become ink whatever their color."""
        sample = RasterSample.from_rows([[CLEAR] * 4])
        assert to_mask(sample).is_blank()

    def test_empty_sample(self):
        mask = to_mask(RasterSample.from_rows([]))
        assert mask.width == 0
        assert mask.height == 0
        assert mask.is_blank()

    def test_threshold_and_alpha_floor(self):
        sample = RasterSample.from_rows([[(150, 150, 150, 100)]])
        assert to_mask(sample).is_blank()
        assert not to_mask(sample, threshold=200, alpha_floor=50).is_blank()

    def test_matches_pixelwise_classification(self):
        rows = [
            [(r, g, 40, a) for r, g, a in ((10, 20, 255), (250, 250, 255), (90, 90, 140))],
            [(r, g, 40, a) for r, g, a in ((0, 0, 20), (60, 200, 255), (30, 30, 129))],
        ]
        sample = RasterSample.from_rows(rows)
        mask = to_mask(sample)
        for x, y, pixel in sample.iter_pixels():
            assert mask.is_foreground(x, y) == is_ink(pixel)
