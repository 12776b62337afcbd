"""Worm spawn point allocation."""

import logging
from typing import Tuple

from waspnest.level.nest_data import RoomType, SpawnPoint
from waspnest.level.random_source import RandomSource, uniform_between

logger = logging.getLogger(__name__)

# Extra points per room are drawn from randrange(0, EXTRA_SPAWN_RANGE)
EXTRA_SPAWN_RANGE = 3
DEPTH_SPAWN_FACTOR = 0.5


class SpawnPointAllocator:
    """Scatters collectible spawn points inside normal rooms.

    Deeper rooms get more points: floor(depth * 0.5) plus 0-2 extra.
    """

    def __init__(self, padding: float):
        self.padding = padding

    def spawn_count(self, depth: int, rng: RandomSource) -> int:
        return int(depth * DEPTH_SPAWN_FACTOR) + rng.randrange(0, EXTRA_SPAWN_RANGE)

    def allocate(self, room, rng: RandomSource) -> Tuple[SpawnPoint, ...]:
        """
        Allocate spawn points for a freshly placed room.

        Args:
            room: Placed room (needs id, rect, room_type, depth)
            rng: Random source driving count and positions

        Returns:
            Spawn points, empty for queen chambers and corridors
        """
        if room.room_type in (RoomType.QUEEN, RoomType.CORRIDOR):
            return ()

        count = self.spawn_count(room.depth, rng)
        rect = room.rect
        inner_w = max(rect.width - self.padding * 2, 0.0)
        inner_h = max(rect.height - self.padding * 2, 0.0)

        points = []
        for _ in range(count):
            x = uniform_between(rng, rect.x + self.padding, rect.x + self.padding + inner_w)
            y = uniform_between(rng, rect.y + self.padding, rect.y + self.padding + inner_h)
            points.append(SpawnPoint(x=x, y=y, room_id=room.id, depth=room.depth))

        logger.debug("Room %d (depth %d): %d spawn points", room.id, room.depth, count)
        return tuple(points)
