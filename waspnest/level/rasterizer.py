"""
Rasterize nest geometry into a wall/floor tile grid.

Every cell starts as wall; each room or corridor carves out every cell it
touches (floor of its near edge through ceil of its far edge). Carving is a
union, so room order does not matter.
"""

import math
from typing import Iterable, List, Tuple

from waspnest.level.nest_data import Rect, TileGrid, WorldBounds
from waspnest.tiles.tile_types import TileType


def grid_dimensions(bounds: WorldBounds, tile_size: int) -> Tuple[int, int]:
    """(columns, rows) needed to cover ``bounds``."""
    return (
        math.ceil(bounds.width / tile_size),
        math.ceil(bounds.height / tile_size),
    )


def cell_span(rect: Rect, bounds: WorldBounds, tile_size: int) -> Tuple[int, int, int, int]:
    """Half-open cell range (start_x, start_y, end_x, end_y) covered by ``rect``."""
    start_x = math.floor((rect.x - bounds.x) / tile_size)
    start_y = math.floor((rect.y - bounds.y) / tile_size)
    end_x = math.ceil((rect.right - bounds.x) / tile_size)
    end_y = math.ceil((rect.bottom - bounds.y) / tile_size)
    return start_x, start_y, end_x, end_y


def rasterize(rooms: Iterable, bounds: WorldBounds, tile_size: int) -> TileGrid:
    """
    Build the tile grid for a nest.

    Args:
        rooms: Placed rooms and corridors (anything with ``rect``)
        bounds: World bounds the grid covers
        tile_size: Tile edge length in world pixels

    Returns:
        TileGrid with FLOOR under every room/corridor and WALL elsewhere
    """
    if tile_size <= 0:
        raise ValueError("tile_size must be positive")

    width, height = grid_dimensions(bounds, tile_size)
    cells: List[List[TileType]] = [[TileType.WALL] * width for _ in range(height)]

    for room in rooms:
        start_x, start_y, end_x, end_y = cell_span(room.rect, bounds, tile_size)
        # Clip to the grid
        start_x, start_y = max(start_x, 0), max(start_y, 0)
        end_x, end_y = min(end_x, width), min(end_y, height)
        for ty in range(start_y, end_y):
            row = cells[ty]
            for tx in range(start_x, end_x):
                row[tx] = TileType.FLOOR

    return TileGrid(
        cells=tuple(tuple(row) for row in cells),
        tile_size=tile_size,
        origin_x=bounds.x,
        origin_y=bounds.y,
    )
