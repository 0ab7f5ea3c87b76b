"""Unit tests for the contour tracer."""

from brandmark.core.tracer import MIN_REGION_SIZE, find_regions, region_to_path, trace
from brandmark.domain import BinaryMask, Region


def mask_from_art(*lines: str) -> BinaryMask:
    """Build a mask from strings where '#' marks foreground."""
    return BinaryMask.from_rows([[ch == "#" for ch in line] for line in lines])


RING = mask_from_art(
    "#####",
    "#...#",
    "#####",
)


class TestFindRegions:
    """Tests for region discovery."""

    def test_single_region(self):
        regions = find_regions(RING)
        assert len(regions) == 1
        assert regions[0].size == 12

    def test_diagonal_cells_are_separate(self):
        """Test 4-connectivity: diagonal neighbours are not joined."""
        regions = find_regions(mask_from_art("#.", ".#"))
        assert [r.cells for r in regions] == [[(0, 0)], [(1, 1)]]

    def test_row_major_discovery_order(self):
        mask = mask_from_art(
            "..#",
            "#..",
        )
        regions = find_regions(mask)
        assert [r.cells[0] for r in regions] == [(2, 0), (0, 1)]

    def test_partition(self):
        """Test that every foreground cell lands in exactly one region."""
        mask = mask_from_art(
            "##..#",
            "#..##",
            "..#..",
        )
        regions = find_regions(mask)
        cells = [cell for region in regions for cell in region.cells]
        assert len(cells) == len(set(cells)) == mask.foreground_count()

    def test_blank_mask(self):
        assert find_regions(BinaryMask.blank(4, 4)) == []


class TestRegionToPath:
    """Tests for run-length path encoding."""

    def test_ring(self):
        path = region_to_path(find_regions(RING)[0])
        assert path == "M0,0h5v1h-5zM0,1h1v1h-1zM4,1h1v1h-1zM0,2h5v1h-5z"

    def test_only_member_cells(self):
        """Test a run inside the bounding box but outside the region is skipped."""
        region = Region(cells=[(0, 0), (1, 0), (2, 0), (0, 1), (2, 1)])
        assert region_to_path(region) == "M0,0h3v1h-3zM0,1h1v1h-1zM2,1h1v1h-1z"

    def test_offset_region(self):
        region = Region(cells=[(7, 3), (8, 3)])
        assert region_to_path(region) == "M7,3h2v1h-2z"

    def test_empty_region(self):
        assert region_to_path(Region(cells=[])) == ""


class TestTrace:
    """Tests for full mask tracing."""

    def test_default_noise_floor(self):
        assert MIN_REGION_SIZE == 10

    def test_region_of_ten_cells_dropped(self):
        assert trace(mask_from_art("#" * 9)) == []
        assert trace(mask_from_art("#" * 10)) == []

    def test_region_of_eleven_cells_kept(self):
        fragments = trace(mask_from_art("#" * 11))
        assert len(fragments) == 1
        assert fragments[0].d == "M0,0h11v1h-11z"

    def test_fill_color(self):
        fragments = trace(RING, stroke_color="#1E40AF")
        assert fragments[0].fill == "#1E40AF"
        assert fragments[0].to_svg().endswith('fill="#1E40AF"/>')

    def test_island_inside_frame(self):
        """Test nested regions get separate paths in discovery order."""
        mask = mask_from_art(
            "#######",
            "#.....#",
            "#.###.#",
            "#.....#",
            "#######",
        )
        fragments = trace(mask, min_region_size=0)
        assert len(fragments) == 2
        assert "M0,2h1v1h-1zM6,2h1v1h-1z" in fragments[0].d
        assert "M2,2" not in fragments[0].d
        assert fragments[1].d == "M2,2h3v1h-3z"

    def test_small_island_dropped_by_default(self):
        mask = mask_from_art(
            "#######",
            "#.....#",
            "#.###.#",
            "#.....#",
            "#######",
        )
        assert len(trace(mask)) == 1

    def test_only_path_commands(self):
        fragments = trace(RING)
        assert set(fragments[0].d) <= set("Mhvz0123456789,-")

    def test_deterministic(self):
        mask = mask_from_art(
            "###.####",
            "###.####",
            "........",
            "########",
        )
        assert trace(mask, min_region_size=0) == trace(mask, min_region_size=0)

    def test_blank_mask(self):
        assert trace(BinaryMask.blank(10, 10)) == []
