"""Contour tracer producing run-length SVG path data.

Foreground cells are grouped into 4-connected regions by a stack-based
flood fill. Each surviving region is emitted as one path made of unit-height
horizontal strips, one strip per contiguous run of cells in a row. The
output is a blocky pixel-run silhouette, not a smoothed outline.

Regions are emitted in the order their first cell is met in a row-major
scan, so identical masks always produce identical output.
"""

import structlog

from brandmark.domain import BinaryMask, PathFragment, Region

logger = structlog.get_logger("brandmark")

MIN_REGION_SIZE = 10


def flood_fill(
    mask: BinaryMask,
    visited: list[list[bool]],
    x: int,
    y: int,
) -> Region:
    """Collect the 4-connected region containing (x, y).

    Marks every collected cell in ``visited``.

    Args:
        mask: Foreground mask
        visited: Row-major visited flags, updated in place
        x: Seed column
        y: Seed row

    Returns:
        Region with cells in visit order (empty if the seed is background
        or already visited)
    """
    width, height = mask.width, mask.height
    cells = mask.cells
    region: list[tuple[int, int]] = []
    stack = [(x, y)]

    while stack:
        cx, cy = stack.pop()
        if cx < 0 or cx >= width or cy < 0 or cy >= height:
            continue
        if visited[cy][cx] or not cells[cy][cx]:
            continue

        visited[cy][cx] = True
        region.append((cx, cy))

        stack.append((cx + 1, cy))
        stack.append((cx - 1, cy))
        stack.append((cx, cy + 1))
        stack.append((cx, cy - 1))

    return Region(cells=region)


def find_regions(mask: BinaryMask) -> list[Region]:
    """Find every 4-connected foreground region in row-major discovery order."""
    visited = [[False] * mask.width for _ in range(mask.height)]
    regions: list[Region] = []

    for y in range(mask.height):
        row = mask.cells[y]
        for x in range(mask.width):
            if row[x] and not visited[y][x]:
                regions.append(flood_fill(mask, visited, x, y))

    return regions


def region_to_path(region: Region) -> str:
    """Encode a region as run-length strip commands.

    Each run of cells [start, end) on row y becomes
    ``M{start},{y}h{end-start}v1h{start-end}z``. Only cells of this region
    count, even where another region shares its bounding box.
    """
    if not region.cells:
        return ""

    min_x, max_x, min_y, max_y = region.bounding_box()
    members = region.members()
    parts: list[str] = []

    for ry in range(min_y, max_y + 1):
        in_run = False
        run_start = 0
        for rx in range(min_x, max_x + 2):
            inside = rx <= max_x and (rx, ry) in members
            if inside and not in_run:
                run_start = rx
                in_run = True
            elif not inside and in_run:
                parts.append(f"M{run_start},{ry}h{rx - run_start}v1h{run_start - rx}z")
                in_run = False

    return "".join(parts)


def trace(
    mask: BinaryMask,
    stroke_color: str = "#000000",
    min_region_size: int = MIN_REGION_SIZE,
) -> list[PathFragment]:
    """Trace a mask into one path fragment per region.

    Args:
        mask: Foreground mask
        stroke_color: Fill colour for every emitted path
        min_region_size: Regions with this many cells or fewer are dropped
            as noise

    Returns:
        Path fragments in region discovery order; empty for a blank mask
    """
    fragments: list[PathFragment] = []
    regions = find_regions(mask)
    dropped = 0

    for region in regions:
        if region.size <= min_region_size:
            dropped += 1
            continue
        path_data = region_to_path(region)
        if path_data:
            fragments.append(PathFragment(d=path_data, fill=stroke_color))

    logger.debug(
        "Mask traced",
        width=mask.width,
        height=mask.height,
        regions=len(regions),
        dropped=dropped,
        paths=len(fragments),
    )
    return fragments
