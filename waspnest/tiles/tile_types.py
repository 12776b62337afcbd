from enum import IntEnum


class TileType(IntEnum):
    """Enumeration of the tile types a nest grid can hold."""

    WALL = 0
    FLOOR = 1

    @property
    def is_solid(self) -> bool:
        """Return True if tile blocks movement completely."""
        return self == TileType.WALL

    @property
    def is_walkable(self) -> bool:
        return self == TileType.FLOOR

    @property
    def has_collision(self) -> bool:
        """Return True if the collision layer should build a static collider here."""
        return self.is_solid

    @property
    def label(self) -> str:
        """Return human-readable name."""
        return {
            TileType.WALL: "Wall",
            TileType.FLOOR: "Floor",
        }.get(self, f"Tile_{self.value}")
