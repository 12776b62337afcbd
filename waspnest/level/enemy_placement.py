"""
Entity spawn planning on top of a generated nest.

Hornets guard normal rooms (never the queen's chamber or corridors); a room
at depth d gets min(d, 2) of them. Difficulty increases add one more hornet
in a random normal room.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from waspnest.level.nest_data import NestGraph, NestResult, Room, RoomType
from waspnest.level.random_source import RandomSource

MAX_ENEMIES_PER_ROOM = 2


@dataclass(frozen=True)
class EnemySpawn:
    room_id: int
    x: float
    y: float
    count: int


def enemy_rooms(graph: NestGraph) -> List[Room]:
    """Rooms hornets may spawn in."""
    return [
        room for room in graph
        if room.room_type not in (RoomType.QUEEN, RoomType.CORRIDOR)
    ]


def enemies_for_room(room: Room) -> int:
    return min(room.depth, MAX_ENEMIES_PER_ROOM)


def plan_enemy_spawns(graph: NestGraph) -> List[EnemySpawn]:
    """One entry per guarded room, at the room centre, in room id order."""
    spawns: List[EnemySpawn] = []
    for room in enemy_rooms(graph):
        count = enemies_for_room(room)
        if count <= 0:
            continue
        cx, cy = room.center
        spawns.append(EnemySpawn(room_id=room.id, x=cx, y=cy, count=count))
    return spawns


def pick_reinforcement_room(graph: NestGraph, rng: RandomSource) -> Optional[Room]:
    """Uniformly chosen room for a difficulty-driven extra hornet, or None."""
    rooms = enemy_rooms(graph)
    if not rooms:
        return None
    return rooms[rng.randrange(0, len(rooms))]


def queen_spawn(result: NestResult) -> Tuple[float, float]:
    """Where the queen (and the player) start."""
    return result.queen_room.center
