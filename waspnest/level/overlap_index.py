"""
Overlap queries against already placed nest geometry.
"""

from typing import Iterable, List, Mapping, Optional

from waspnest.level.nest_data import Rect


class SpatialOverlapIndex:
    """Read-only overlap view over the generator's room arena.

    The arena maps room id to anything exposing ``rect``; the index never
    copies it, so rooms added to or removed from the arena are seen by the
    next query. A linear scan is enough: a nest holds a few dozen rectangles.
    """

    def __init__(self, arena: Mapping[int, object], padding: float):
        self.arena = arena
        self.padding = padding

    def __len__(self) -> int:
        return len(self.arena)

    def conflicts(self, candidate: Rect, exclude_ids: Iterable[int] = ()) -> List[int]:
        """
        Ids of placed rectangles the candidate collides with.

        The candidate is grown by ``padding`` on every side; touching the
        grown box counts as a collision.

        Args:
            candidate: Rectangle being considered for placement
            exclude_ids: Rooms the candidate is allowed to touch (its parent)

        Returns:
            Colliding room ids in arena order
        """
        excluded = set(exclude_ids)
        grown = candidate.expanded(self.padding)
        return [
            room_id
            for room_id, room in self.arena.items()
            if room_id not in excluded and grown.intersects(room.rect)
        ]

    def first_conflict(self, candidate: Rect, exclude_ids: Iterable[int] = ()) -> Optional[int]:
        excluded = set(exclude_ids)
        grown = candidate.expanded(self.padding)
        for room_id, room in self.arena.items():
            if room_id in excluded:
                continue
            if grown.intersects(room.rect):
                return room_id
        return None

    def overlaps(self, candidate: Rect, exclude_ids: Iterable[int] = ()) -> bool:
        """True if the candidate collides with any placed rectangle not excluded."""
        return self.first_conflict(candidate, exclude_ids) is not None
