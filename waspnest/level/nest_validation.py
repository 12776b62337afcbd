"""Consistency checks for a generated nest.

Checks:
- exactly one queen chamber, at depth 0
- every corridor joins exactly two rooms, parent and child
- connections are symmetric and form a tree rooted at the queen
- every room is one level deeper than the room it branches from
- unrelated rectangles keep the overlap padding between them
- spawn points belong to normal rooms and sit inside the inset interior
- floor cells are exactly the cells covered by rooms and corridors
"""

from collections import deque
from typing import Dict, List, Optional, Set, Tuple

from waspnest.level.nest_data import NestConfig, NestResult, Rect, RoomType
from waspnest.level.rasterizer import cell_span, grid_dimensions


def _check_queen(result: NestResult, errors: List[str]) -> None:
    queens = result.graph.rooms_of_type(RoomType.QUEEN)
    if len(queens) != 1:
        errors.append(f"expected exactly one queen chamber, found {len(queens)}")
        return
    if queens[0].depth != 0:
        errors.append(f"queen chamber {queens[0].id} has depth {queens[0].depth}, expected 0")


def _check_connections(result: NestResult, errors: List[str]) -> None:
    graph = result.graph
    for room in graph:
        if len(set(room.connections)) != len(room.connections):
            errors.append(f"room {room.id} lists a connection twice")
        for other_id in room.connections:
            other = graph.get_room(other_id)
            if other is None:
                errors.append(f"room {room.id} connects to missing room {other_id}")
            elif room.id not in other.connections:
                errors.append(f"connection {room.id} -> {other_id} is not mirrored")
            elif room.is_corridor == other.is_corridor:
                errors.append(f"rooms {room.id} and {other_id} connect without a corridor between them")

    for corridor in graph.corridors:
        if len(corridor.connections) != 2:
            errors.append(
                f"corridor {corridor.id} has {len(corridor.connections)} connections, expected 2"
            )
            continue
        depths = sorted(
            graph.get_room(room_id).depth
            for room_id in corridor.connections
            if graph.get_room(room_id) is not None
        )
        if depths != [corridor.depth, corridor.depth + 1]:
            errors.append(
                f"corridor {corridor.id} (depth {corridor.depth}) joins rooms at depths {depths}"
            )


def _check_tree(result: NestResult, errors: List[str]) -> None:
    graph = result.graph
    try:
        root = graph.queen_room
    except LookupError:
        return

    edges = sum(len(room.connections) for room in graph) // 2
    if edges != len(graph) - 1:
        errors.append(f"{edges} connections for {len(graph)} rooms; a tree needs {len(graph) - 1}")

    seen: Set[int] = {root.id}
    queue = deque([root.id])
    while queue:
        room = graph.get_room(queue.popleft())
        for other_id in room.connections:
            if other_id not in seen and graph.get_room(other_id) is not None:
                seen.add(other_id)
                queue.append(other_id)

    unreachable = sorted(room.id for room in graph if room.id not in seen)
    if unreachable:
        errors.append(f"rooms unreachable from the queen chamber: {unreachable}")


def _check_clearance(result: NestResult, padding: float, errors: List[str]) -> None:
    rooms = result.graph.rooms
    for i, a in enumerate(rooms):
        grown = a.rect.expanded(padding)
        for b in rooms[i + 1:]:
            if b.id in a.connections:
                continue
            if grown.intersects(b.rect):
                errors.append(f"rooms {a.id} and {b.id} are closer than the overlap padding")


def _check_spawns(result: NestResult, padding: float, errors: List[str]) -> None:
    graph = result.graph
    for index, point in enumerate(result.spawn_points):
        room = graph.get_room(point.room_id)
        if room is None:
            errors.append(f"spawn point {index} belongs to missing room {point.room_id}")
            continue
        if room.room_type != RoomType.NORMAL:
            errors.append(f"spawn point {index} sits in {room.room_type.value} room {room.id}")
        if point.depth != room.depth:
            errors.append(f"spawn point {index} has depth {point.depth}, room {room.id} has {room.depth}")
        inner = Rect(
            room.x + padding,
            room.y + padding,
            room.width - padding * 2,
            room.height - padding * 2,
        )
        if not inner.contains_point(point.x, point.y):
            errors.append(f"spawn point {index} ({point.x:.1f}, {point.y:.1f}) is outside room {room.id} interior")


def _check_grid(result: NestResult, errors: List[str]) -> None:
    grid, bounds = result.grid, result.bounds
    width, height = grid_dimensions(bounds, grid.tile_size)
    if (grid.width, grid.height) != (width, height):
        errors.append(f"grid is {grid.width}x{grid.height}, bounds need {width}x{height}")
        return

    covered: Set[Tuple[int, int]] = set()
    for room in result.graph:
        start_x, start_y, end_x, end_y = cell_span(room.rect, bounds, grid.tile_size)
        for ty in range(max(start_y, 0), min(end_y, height)):
            for tx in range(max(start_x, 0), min(end_x, width)):
                covered.add((tx, ty))

    floor = set(grid.floor_cells())
    stray = floor - covered
    if stray:
        errors.append(f"{len(stray)} floor cells lie outside every room, e.g. {min(stray)}")
    missing = covered - floor
    if missing:
        errors.append(f"{len(missing)} cells under rooms are walls, e.g. {min(missing)}")


def validate_nest(result: NestResult, config: Optional[NestConfig] = None) -> List[str]:
    """
    Check a generated nest against its structural invariants.

    Args:
        result: Output of the nest generator
        config: Config the nest was generated with (defaults if omitted)

    Returns:
        Human-readable violations; empty when the nest is valid
    """
    config = config if config is not None else NestConfig()
    errors: List[str] = []
    _check_queen(result, errors)
    _check_connections(result, errors)
    _check_tree(result, errors)
    _check_clearance(result, config.overlap_padding, errors)
    _check_spawns(result, config.spawn_padding, errors)
    _check_grid(result, errors)
    return errors


def summarize_nest(result: NestResult) -> Dict[str, int]:
    graph = result.graph
    return {
        'rooms': len(graph) - len(graph.corridors),
        'corridors': len(graph.corridors),
        'spawn_points': len(result.spawn_points),
        'max_depth': max(room.depth for room in graph),
        'floor_tiles': sum(1 for _ in result.grid.floor_cells()),
    }
