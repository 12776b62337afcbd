"""Nest data structures.

Rooms, spawn points, bounds and the tile grid produced by one call to the
nest generator. Everything returned to callers is frozen; the generator keeps
its own mutable drafts while it is building.
"""

from dataclasses import dataclass, asdict, fields
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple
import json
import os

from waspnest import config as game_config
from waspnest.tiles.tile_types import TileType


class RoomType(str, Enum):
    QUEEN = "queen"
    NORMAL = "normal"
    CORRIDOR = "corridor"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in world pixels."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def expanded(self, padding: float) -> "Rect":
        return Rect(
            self.x - padding,
            self.y - padding,
            self.width + padding * 2,
            self.height + padding * 2,
        )

    def intersects(self, other: "Rect") -> bool:
        """Closed-interval test: rectangles sharing an edge intersect."""
        return not (
            self.right < other.x
            or self.x > other.right
            or self.bottom < other.y
            or self.y > other.bottom
        )

    def contains_point(self, px: float, py: float) -> bool:
        return self.x <= px <= self.right and self.y <= py <= self.bottom


@dataclass(frozen=True)
class Room:
    """A placed room or corridor."""
    id: int
    rect: Rect
    room_type: RoomType
    depth: int
    connections: Tuple[int, ...] = ()

    @property
    def x(self) -> float:
        return self.rect.x

    @property
    def y(self) -> float:
        return self.rect.y

    @property
    def width(self) -> float:
        return self.rect.width

    @property
    def height(self) -> float:
        return self.rect.height

    @property
    def center(self) -> Tuple[float, float]:
        return self.rect.center

    @property
    def is_corridor(self) -> bool:
        return self.room_type == RoomType.CORRIDOR

    def to_dict(self) -> Dict[str, Any]:
        cx, cy = self.center
        return {
            "id": self.id,
            "type": self.room_type.value,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "depth": self.depth,
            "connections": list(self.connections),
            "center_x": cx,
            "center_y": cy,
        }


@dataclass(frozen=True)
class SpawnPoint:
    """Location eligible for a collectible (worm)."""
    x: float
    y: float
    room_id: int
    depth: int


@dataclass(frozen=True)
class WorldBounds:
    x: float
    y: float
    width: float
    height: float

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class TileGrid:
    """Wall/floor classification of the world, row-major (cells[ty][tx])."""
    cells: Tuple[Tuple[TileType, ...], ...]
    tile_size: int
    origin_x: float
    origin_y: float

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def height(self) -> int:
        return len(self.cells)

    def in_bounds(self, tx: int, ty: int) -> bool:
        return 0 <= tx < self.width and 0 <= ty < self.height

    def get(self, tx: int, ty: int) -> TileType:
        """Tile at (tx, ty); anything outside the grid counts as wall."""
        if not self.in_bounds(tx, ty):
            return TileType.WALL
        return self.cells[ty][tx]

    def is_floor(self, tx: int, ty: int) -> bool:
        return self.get(tx, ty) == TileType.FLOOR

    def cell_center(self, tx: int, ty: int) -> Tuple[float, float]:
        return (
            self.origin_x + (tx + 0.5) * self.tile_size,
            self.origin_y + (ty + 0.5) * self.tile_size,
        )

    def world_to_tile(self, x: float, y: float) -> Tuple[int, int]:
        return (
            int((x - self.origin_x) // self.tile_size),
            int((y - self.origin_y) // self.tile_size),
        )

    def floor_cells(self) -> Iterator[Tuple[int, int]]:
        for ty, row in enumerate(self.cells):
            for tx, cell in enumerate(row):
                if cell == TileType.FLOOR:
                    yield (tx, ty)

    def to_rows(self) -> List[List[int]]:
        """Plain int rows (0 = wall, 1 = floor) for tilemap consumers."""
        return [[int(cell) for cell in row] for row in self.cells]


@dataclass
class NestConfig:
    """Tunables for nest generation.

    Sizes and lengths are world pixels; paddings are counted in tiles and
    scaled by ``tile_size``.
    """
    room_min_size: float = game_config.ROOM_MIN_SIZE
    room_max_size: float = game_config.ROOM_MAX_SIZE
    corridor_width: float = game_config.CORRIDOR_WIDTH
    min_corridor_length: float = game_config.MIN_CORRIDOR_LENGTH
    max_corridor_length: float = game_config.MAX_CORRIDOR_LENGTH
    branch_probability: float = game_config.BRANCH_PROBABILITY
    depth_decay: float = game_config.DEPTH_DECAY
    max_depth: int = game_config.MAX_DEPTH
    tile_size: int = game_config.TILE_SIZE

    overlap_padding_tiles: int = game_config.OVERLAP_PADDING_TILES
    spawn_padding_tiles: int = game_config.SPAWN_PADDING_TILES
    bounds_padding_tiles: int = game_config.BOUNDS_PADDING_TILES

    @property
    def overlap_padding(self) -> float:
        return self.tile_size * self.overlap_padding_tiles

    @property
    def spawn_padding(self) -> float:
        return self.tile_size * self.spawn_padding_tiles

    @property
    def bounds_padding(self) -> float:
        return self.tile_size * self.bounds_padding_tiles

    def validate(self) -> None:
        """Raise ValueError if the tunables cannot produce a nest."""
        if self.tile_size <= 0:
            raise ValueError("NestConfig.tile_size must be positive")
        if self.room_min_size <= 0 or self.room_min_size > self.room_max_size:
            raise ValueError(
                f"NestConfig room size range is invalid: "
                f"{self.room_min_size}..{self.room_max_size}"
            )
        if self.min_corridor_length <= 0 or self.min_corridor_length > self.max_corridor_length:
            raise ValueError(
                f"NestConfig corridor length range is invalid: "
                f"{self.min_corridor_length}..{self.max_corridor_length}"
            )
        if self.corridor_width <= 0:
            raise ValueError("NestConfig.corridor_width must be positive")
        if not 0.0 <= self.branch_probability <= 1.0:
            raise ValueError("NestConfig.branch_probability must be within [0, 1]")
        if self.depth_decay < 0:
            raise ValueError("NestConfig.depth_decay must not be negative")
        if self.max_depth < 0:
            raise ValueError("NestConfig.max_depth must not be negative")
        for name in ("overlap_padding_tiles", "spawn_padding_tiles", "bounds_padding_tiles"):
            if getattr(self, name) < 0:
                raise ValueError(f"NestConfig.{name} must not be negative")
        # Every normal room must keep a non-empty interior once the spawn inset is removed
        if self.room_min_size <= 2 * self.spawn_padding:
            raise ValueError(
                f"NestConfig.room_min_size ({self.room_min_size}) must exceed twice "
                f"the spawn padding ({self.spawn_padding})"
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NestConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown NestConfig keys: {', '.join(unknown)}")
        return cls(**data)


@dataclass(frozen=True)
class NestGraph:
    """All placed rooms and corridors, ordered by id."""
    rooms: Tuple[Room, ...]

    def __len__(self) -> int:
        return len(self.rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self.rooms)

    def get_room(self, room_id: int) -> Optional[Room]:
        if 0 <= room_id < len(self.rooms) and self.rooms[room_id].id == room_id:
            return self.rooms[room_id]
        for room in self.rooms:
            if room.id == room_id:
                return room
        return None

    @property
    def queen_room(self) -> Room:
        for room in self.rooms:
            if room.room_type == RoomType.QUEEN:
                return room
        raise LookupError("Nest graph has no queen room")

    def rooms_of_type(self, *room_types: RoomType) -> List[Room]:
        return [room for room in self.rooms if room.room_type in room_types]

    @property
    def corridors(self) -> List[Room]:
        return self.rooms_of_type(RoomType.CORRIDOR)


@dataclass(frozen=True)
class NestResult:
    """Everything one generation run produces."""
    graph: NestGraph
    spawn_points: Tuple[SpawnPoint, ...]
    bounds: WorldBounds
    grid: TileGrid
    seed: Optional[int] = None

    @property
    def rooms(self) -> Tuple[Room, ...]:
        return self.graph.rooms

    @property
    def queen_room(self) -> Room:
        return self.graph.queen_room

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "seed": self.seed,
            "rooms": [room.to_dict() for room in self.graph.rooms],
            "spawn_points": [asdict(point) for point in self.spawn_points],
            "bounds": asdict(self.bounds),
            "tile_size": self.grid.tile_size,
            "tiles": self.grid.to_rows(),
        }

    def save_to_json(self, filepath: str) -> None:
        """Save the nest to a JSON file (debug dumps, fixtures)."""
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
