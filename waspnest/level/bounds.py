"""World bounds over placed nest geometry."""

from typing import Iterable

from waspnest.level.errors import EmptyGraphInvariantViolation
from waspnest.level.nest_data import WorldBounds


def compute_bounds(rooms: Iterable, padding: float) -> WorldBounds:
    """
    Smallest rectangle enclosing every room, grown by ``padding`` on each side.

    Raises:
        EmptyGraphInvariantViolation: if ``rooms`` is empty
    """
    rects = [room.rect for room in rooms]
    if not rects:
        raise EmptyGraphInvariantViolation("Cannot compute world bounds of an empty nest")

    min_x = min(r.x for r in rects)
    min_y = min(r.y for r in rects)
    max_x = max(r.right for r in rects)
    max_y = max(r.bottom for r in rects)

    return WorldBounds(
        x=min_x - padding,
        y=min_y - padding,
        width=max_x - min_x + padding * 2,
        height=max_y - min_y + padding * 2,
    )
