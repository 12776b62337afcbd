"""Nest generator.

Grows a tree of rooms outward from the queen's chamber:

- The queen's chamber sits at the origin with the maximum room size, depth 0
- Each room below ``max_depth`` tries the four cardinal directions in a
  shuffled order
- A direction branches with probability
  ``branch_probability * (1 - depth * depth_decay)``
- A branch is a corridor flush against the room edge plus a room flush
  against the corridor's far end
- A corridor or room that overlaps placed geometry (grown by the overlap
  padding) drops the whole branch; nothing is retried
- Accepted rooms get worm spawn points and are expanded depth-first

The finished rooms are frozen into a NestGraph, measured for world bounds
and rasterized into a TileGrid.
"""

from dataclasses import dataclass, field
import logging
import random
from typing import Dict, List, Optional, Tuple

from waspnest.level.bounds import compute_bounds
from waspnest.level.errors import PlacementRejected
from waspnest.level.nest_data import (
    NestConfig,
    NestGraph,
    NestResult,
    Rect,
    Room,
    RoomType,
    SpawnPoint,
)
from waspnest.level.overlap_index import SpatialOverlapIndex
from waspnest.level.random_source import RandomSource, shuffle, uniform_between
from waspnest.level.rasterizer import rasterize
from waspnest.level.seed_manager import STRUCTURE
from waspnest.level.spawn_allocator import SpawnPointAllocator

logger = logging.getLogger(__name__)

# (dx, dy): right, left, down, up
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class _RoomDraft:
    """Mutable room while the nest is still growing."""
    id: int
    rect: Rect
    room_type: RoomType
    depth: int
    connections: List[int] = field(default_factory=list)

    def connect(self, other_id: int) -> None:
        if other_id not in self.connections:
            self.connections.append(other_id)

    def freeze(self) -> Room:
        return Room(
            id=self.id,
            rect=self.rect,
            room_type=self.room_type,
            depth=self.depth,
            connections=tuple(self.connections),
        )


class RoomGraphBuilder:
    """Builds one nest per ``generate()`` call.

    The builder owns the room arena; the overlap index reads it directly.
    Each call starts from an empty arena, so graphs returned by earlier
    calls are never touched.
    """

    def __init__(
        self,
        config: Optional[NestConfig] = None,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ):
        self.config = config if config is not None else NestConfig()
        self.config.validate()
        self.seed = seed
        self.rng: RandomSource = rng if rng is not None else random.Random(seed)

        self._arena: Dict[int, _RoomDraft] = {}
        self._next_id = 0
        self._spawn_points: List[SpawnPoint] = []
        self._rejections = 0
        self.overlap_index = SpatialOverlapIndex(self._arena, self.config.overlap_padding)
        self.spawn_allocator = SpawnPointAllocator(self.config.spawn_padding)

    # ----- public -----

    def generate(self) -> NestResult:
        """Generate a complete nest: graph, spawn points, bounds and grid."""
        self._reset()

        queen = self._add_room(
            Rect(0.0, 0.0, self.config.room_max_size, self.config.room_max_size),
            RoomType.QUEEN,
            depth=0,
        )
        self._expand_room(queen)

        graph = NestGraph(rooms=tuple(draft.freeze() for draft in self._arena.values()))
        bounds = compute_bounds(graph.rooms, self.config.bounds_padding)
        grid = rasterize(graph.rooms, bounds, self.config.tile_size)

        logger.info(
            "Generated nest: %d rooms, %d corridors, %d spawn points, %d rejected branches, grid %dx%d",
            len(graph) - len(graph.corridors),
            len(graph.corridors),
            len(self._spawn_points),
            self._rejections,
            grid.width,
            grid.height,
        )

        return NestResult(
            graph=graph,
            spawn_points=tuple(self._spawn_points),
            bounds=bounds,
            grid=grid,
            seed=self.seed,
        )

    def branch_probability(self, depth: int) -> float:
        return self.config.branch_probability * (1 - depth * self.config.depth_decay)

    # ----- arena -----

    def _reset(self) -> None:
        self._arena.clear()
        self._next_id = 0
        self._spawn_points = []
        self._rejections = 0

    def _add_room(self, rect: Rect, room_type: RoomType, depth: int) -> _RoomDraft:
        draft = _RoomDraft(id=self._next_id, rect=rect, room_type=room_type, depth=depth)
        self._arena[draft.id] = draft
        self._next_id += 1
        return draft

    def _discard(self, draft: _RoomDraft) -> None:
        # Only the most recently added room can be discarded, which keeps ids contiguous
        del self._arena[draft.id]
        self._next_id = draft.id

    # ----- growth -----

    def _expand_room(self, room: _RoomDraft) -> None:
        if room.depth >= self.config.max_depth:
            return

        directions = list(DIRECTIONS)
        shuffle(directions, self.rng)

        for direction in directions:
            if self.rng.random() >= self.branch_probability(room.depth):
                continue
            try:
                new_room = self._grow_branch(room, direction)
            except PlacementRejected as exc:
                self._rejections += 1
                logger.debug("Branch from room %d towards %s rejected: %s", room.id, direction, exc)
                continue

            self._spawn_points.extend(self.spawn_allocator.allocate(new_room, self.rng))
            self._expand_room(new_room)

    def _grow_branch(self, parent: _RoomDraft, direction: Tuple[int, int]) -> _RoomDraft:
        """Place a corridor and a room beyond it, or raise PlacementRejected."""
        corridor_rect = self._corridor_rect(parent.rect, direction)
        hits = self.overlap_index.conflicts(corridor_rect, exclude_ids=(parent.id,))
        if hits:
            raise PlacementRejected(corridor_rect, direction, hits)
        corridor = self._add_room(corridor_rect, RoomType.CORRIDOR, parent.depth)

        room_rect = self._room_rect(corridor_rect, direction)
        hits = self.overlap_index.conflicts(room_rect, exclude_ids=(corridor.id,))
        if hits:
            self._discard(corridor)
            raise PlacementRejected(room_rect, direction, hits)
        room = self._add_room(room_rect, RoomType.NORMAL, parent.depth + 1)

        parent.connect(corridor.id)
        corridor.connect(parent.id)
        corridor.connect(room.id)
        room.connect(corridor.id)
        return room

    def _corridor_rect(self, origin: Rect, direction: Tuple[int, int]) -> Rect:
        cfg = self.config
        length = uniform_between(self.rng, cfg.min_corridor_length, cfg.max_corridor_length)
        cx, cy = origin.center
        dx, dy = direction

        if dx != 0:
            y = cy - cfg.corridor_width / 2
            x = origin.right if dx > 0 else origin.x - length
            return Rect(x, y, length, cfg.corridor_width)

        x = cx - cfg.corridor_width / 2
        y = origin.bottom if dy > 0 else origin.y - length
        return Rect(x, y, cfg.corridor_width, length)

    def _room_rect(self, corridor: Rect, direction: Tuple[int, int]) -> Rect:
        cfg = self.config
        width = uniform_between(self.rng, cfg.room_min_size, cfg.room_max_size)
        height = uniform_between(self.rng, cfg.room_min_size, cfg.room_max_size)
        cx, cy = corridor.center
        dx, dy = direction

        if dx > 0:
            return Rect(corridor.right, cy - height / 2, width, height)
        if dx < 0:
            return Rect(corridor.x - width, cy - height / 2, width, height)
        if dy > 0:
            return Rect(cx - width / 2, corridor.bottom, width, height)
        return Rect(cx - width / 2, corridor.y - height, width, height)


def generate_nest(
    config: Optional[NestConfig] = None,
    rng: Optional[RandomSource] = None,
    seed: Optional[int] = None,
) -> NestResult:
    """Generate a nest with a throwaway builder."""
    return RoomGraphBuilder(config=config, rng=rng, seed=seed).generate()


def generate_level_nest(seed_manager, level_index: int, config: Optional[NestConfig] = None) -> NestResult:
    """Generate the nest for a level from a SeedManager's structure stream."""
    level_seed = seed_manager.generate_level_seed(level_index)
    rng = seed_manager.get_random(STRUCTURE)
    logger.debug("Level %d seed: %d", level_index, level_seed)
    return RoomGraphBuilder(config=config, rng=rng, seed=level_seed).generate()
