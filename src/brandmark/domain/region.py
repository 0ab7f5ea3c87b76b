"""Traced region and path fragment types."""

from dataclasses import dataclass, field


@dataclass
class Region:
    """A maximal 4-connected cluster of foreground cells.

    Regions are transient: discovered by flood fill, converted into a
    PathFragment and then dropped.

    Attributes:
        cells: (x, y) coordinates in the order the flood fill visited them
    """

    cells: list[tuple[int, int]]
    _cached_bbox: tuple[int, int, int, int] | None = field(
        default=None, repr=False, init=False
    )

    @property
    def size(self) -> int:
        """Number of member cells."""
        return len(self.cells)

    def bounding_box(self) -> tuple[int, int, int, int]:
        """Calculate the inclusive bounding box of the region.

        Result is cached.

        Returns:
            Tuple of (min_x, max_x, min_y, max_y)
        """
        if self._cached_bbox is not None:
            return self._cached_bbox

        if not self.cells:
            self._cached_bbox = (0, 0, 0, 0)
            return self._cached_bbox

        xs = [x for x, _ in self.cells]
        ys = [y for _, y in self.cells]
        self._cached_bbox = (min(xs), max(xs), min(ys), max(ys))
        return self._cached_bbox

    def members(self) -> frozenset[tuple[int, int]]:
        """Member cells as a set for membership tests."""
        return frozenset(self.cells)


@dataclass(frozen=True, slots=True)
class PathFragment:
    """One region's silhouette as SVG path data.

    Attributes:
        d: Path commands using only M, h, v and z
        fill: Fill colour of the path
    """

    d: str
    fill: str = "#000000"

    def to_svg(self) -> str:
        """Render as a <path> element."""
        return f'<path d="{self.d}" fill="{self.fill}"/>'

    def __str__(self) -> str:
        return self.to_svg()
