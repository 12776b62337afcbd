import dataclasses

from waspnest.level.nest_data import NestConfig, NestGraph, Rect, RoomType, SpawnPoint
from waspnest.level.nest_generator import generate_nest
from waspnest.level.nest_validation import summarize_nest, validate_nest
from waspnest.level.rasterizer import rasterize


def branching_nest(seed=3):
    """Seeded nest with at least one corridor."""
    config = NestConfig(branch_probability=1.0)
    nest = generate_nest(config, seed=seed)
    assert nest.graph.corridors
    return nest, config


def with_rooms(nest, rooms):
    return dataclasses.replace(nest, graph=NestGraph(rooms=tuple(rooms)))


class TestValidateNest:
    """The validator flags each broken invariant."""

    def test_generated_nest_is_valid(self):
        nest, config = branching_nest()
        assert validate_nest(nest, config) == []

    def test_second_queen(self):
        nest, config = branching_nest()
        rooms = list(nest.rooms)
        last = rooms[-1]
        rooms[-1] = dataclasses.replace(last, room_type=RoomType.QUEEN)
        errors = validate_nest(with_rooms(nest, rooms), config)
        assert any("exactly one queen" in e for e in errors)

    def test_orphan_corridor(self):
        nest, config = branching_nest()
        rooms = list(nest.rooms)
        corridor = nest.graph.corridors[0]
        rooms[corridor.id] = dataclasses.replace(corridor, connections=corridor.connections[:1])
        errors = validate_nest(with_rooms(nest, rooms), config)
        assert any("connections, expected 2" in e for e in errors)
        assert any("not mirrored" in e for e in errors)

    def test_wrong_depth(self):
        nest, config = branching_nest()
        rooms = list(nest.rooms)
        child = rooms[2]
        rooms[2] = dataclasses.replace(child, depth=child.depth + 3)
        errors = validate_nest(with_rooms(nest, rooms), config)
        assert any("joins rooms at depths" in e for e in errors)

    def test_overlapping_rooms(self):
        nest, config = branching_nest()
        rooms = list(nest.rooms)
        # Move the last room on top of the queen chamber
        rooms[-1] = dataclasses.replace(rooms[-1], rect=Rect(10, 10, 50, 50))
        errors = validate_nest(with_rooms(nest, rooms), config)
        assert any("closer than the overlap padding" in e for e in errors)

    def test_spawn_in_corridor(self):
        nest, config = branching_nest()
        corridor = nest.graph.corridors[0]
        cx, cy = corridor.center
        bad = nest.spawn_points + (SpawnPoint(cx, cy, corridor.id, corridor.depth),)
        errors = validate_nest(dataclasses.replace(nest, spawn_points=bad), config)
        assert any("corridor room" in e for e in errors)

    def test_spawn_outside_interior(self):
        nest, config = branching_nest()
        room = nest.graph.rooms_of_type(RoomType.NORMAL)[0]
        bad = nest.spawn_points + (SpawnPoint(room.x + 1, room.y + 1, room.id, room.depth),)
        errors = validate_nest(dataclasses.replace(nest, spawn_points=bad), config)
        assert any("outside room" in e for e in errors)

    def test_spawn_in_room_narrower_than_inset(self):
        """A room too small for the spawn inset has no valid interior at all"""
        nest, config = branching_nest()
        rooms = list(nest.rooms)
        room = nest.graph.rooms_of_type(RoomType.NORMAL)[0]
        cx, cy = room.center
        rooms[room.id] = dataclasses.replace(room, rect=Rect(cx - 24, cy - 24, 48, 48))
        bad = (SpawnPoint(cx, cy, room.id, room.depth),)
        errors = validate_nest(dataclasses.replace(with_rooms(nest, rooms), spawn_points=bad), config)
        assert any("outside room" in e for e in errors)

    def test_grid_mismatch(self):
        nest, config = branching_nest()
        queen_only = rasterize(nest.rooms[:1], nest.bounds, config.tile_size)
        errors = validate_nest(dataclasses.replace(nest, grid=queen_only), config)
        assert any("under rooms are walls" in e for e in errors)


def test_summary_counts():
    nest, _ = branching_nest()
    summary = summarize_nest(nest)
    assert summary['rooms'] + summary['corridors'] == len(nest.rooms)
    assert summary['corridors'] == summary['rooms'] - 1
    assert summary['spawn_points'] == len(nest.spawn_points)
    assert summary['floor_tiles'] > 0
