import pygame
from typing import Dict, Optional, Tuple

from waspnest import config as game_config
from waspnest.level.nest_data import NestResult, RoomType, TileGrid
from .tile_types import TileType


class NestPreviewRenderer:
    """Draws a generated nest for the developer preview window."""

    TILE_COLORS: Dict[TileType, Tuple[int, int, int]] = {
        TileType.WALL: game_config.COLOR_WALL,
        TileType.FLOOR: game_config.COLOR_FLOOR,
    }
    OUTLINE_COLORS: Dict[RoomType, Tuple[int, int, int]] = {
        RoomType.QUEEN: game_config.COLOR_QUEEN,
        RoomType.NORMAL: game_config.COLOR_ROOM,
        RoomType.CORRIDOR: game_config.COLOR_CORRIDOR,
    }

    def __init__(self, tile_size: Optional[int] = None):
        # Use provided tile_size or fall back to configured TILE_SIZE constant
        self.tile_size = tile_size if tile_size is not None else game_config.TILE_SIZE
        # Pre-rendered grid surfaces keyed by (id(grid), zoom)
        self.grid_surface_cache: Dict[Tuple[int, float], pygame.Surface] = {}

    def clear_cache(self):
        self.grid_surface_cache.clear()

    def build_grid_surface(self, grid: TileGrid, zoom: float = 1.0) -> pygame.Surface:
        """Render the whole grid once; later frames just blit the cached surface."""
        key = (id(grid), zoom)
        cached = self.grid_surface_cache.get(key)
        if cached is not None:
            return cached

        cell = max(1, int(self.tile_size * zoom))
        surface = pygame.Surface((grid.width * cell, grid.height * cell))
        surface.fill(self.TILE_COLORS[TileType.WALL])
        floor_color = self.TILE_COLORS[TileType.FLOOR]
        for tx, ty in grid.floor_cells():
            surface.fill(floor_color, pygame.Rect(tx * cell, ty * cell, cell, cell))

        self.grid_surface_cache = {key: surface}
        return surface

    def world_to_screen(self, x: float, y: float, camera_offset: Tuple[float, float],
                        zoom: float) -> Tuple[int, int]:
        return (
            int((x - camera_offset[0]) * zoom),
            int((y - camera_offset[1]) * zoom),
        )

    def render(self, surface: pygame.Surface, result: NestResult,
               camera_offset: Tuple[float, float] = (0, 0), zoom: float = 1.0,
               show_outlines: bool = True, show_spawns: bool = True):
        """Draw tiles, room outlines and worm spawn points."""
        grid = result.grid
        grid_surface = self.build_grid_surface(grid, zoom)
        surface.blit(grid_surface, self.world_to_screen(grid.origin_x, grid.origin_y, camera_offset, zoom))

        if show_outlines:
            for room in result.rooms:
                sx, sy = self.world_to_screen(room.x, room.y, camera_offset, zoom)
                rect = pygame.Rect(sx, sy, max(1, int(room.width * zoom)), max(1, int(room.height * zoom)))
                pygame.draw.rect(surface, self.OUTLINE_COLORS[room.room_type], rect, 1)

        if show_spawns:
            radius = max(2, int(self.tile_size * zoom / 4))
            for point in result.spawn_points:
                pygame.draw.circle(
                    surface,
                    game_config.COLOR_WORM,
                    self.world_to_screen(point.x, point.y, camera_offset, zoom),
                    radius,
                )
