import json

import pytest
from waspnest.level.nest_data import NestConfig, NestGraph, Rect, Room, RoomType
from waspnest.level.nest_generator import generate_nest


class TestNestConfig:
    """NestConfig defaults, derived paddings and validation."""

    def test_defaults(self):
        config = NestConfig()
        assert config.room_min_size == 200
        assert config.room_max_size == 400
        assert config.corridor_width == 64
        assert config.branch_probability == 0.6
        assert config.max_depth == 5
        assert config.tile_size == 16

    def test_paddings_scale_with_tile_size(self):
        config = NestConfig(tile_size=8)
        assert config.overlap_padding == 16
        assert config.spawn_padding == 16
        assert config.bounds_padding == 80

    @pytest.mark.parametrize("overrides", [
        {"tile_size": 0},
        {"room_min_size": 500},
        {"min_corridor_length": 300},
        {"corridor_width": 0},
        {"branch_probability": 1.5},
        {"branch_probability": -0.1},
        {"depth_decay": -1},
        {"max_depth": -1},
        {"overlap_padding_tiles": -2},
        {"room_min_size": 64},
        {"room_min_size": 40, "room_max_size": 60},
        {"spawn_padding_tiles": 7},
    ])
    def test_validate_rejects(self, overrides):
        with pytest.raises(ValueError):
            NestConfig(**overrides).validate()

    def test_round_trip_dict(self):
        config = NestConfig(max_depth=3, branch_probability=0.4)
        assert NestConfig.from_dict(config.to_dict()) == config

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="bogus"):
            NestConfig.from_dict({"bogus": 1})


class TestNestGraph:

    def setup_method(self):
        self.graph = NestGraph(rooms=(
            Room(0, Rect(0, 0, 400, 400), RoomType.QUEEN, 0, (1,)),
            Room(1, Rect(400, 168, 150, 64), RoomType.CORRIDOR, 0, (0, 2)),
            Room(2, Rect(550, 75, 300, 250), RoomType.NORMAL, 1, (1,)),
        ))

    def test_lookup(self):
        assert self.graph.get_room(2).room_type == RoomType.NORMAL
        assert self.graph.get_room(9) is None
        assert self.graph.queen_room.id == 0
        assert [r.id for r in self.graph.corridors] == [1]
        assert len(self.graph) == 3

    def test_rooms_are_frozen(self):
        with pytest.raises(AttributeError):
            self.graph.rooms[0].depth = 3

    def test_missing_queen(self):
        graph = NestGraph(rooms=self.graph.rooms[1:])
        with pytest.raises(LookupError):
            graph.queen_room

    def test_room_dict(self):
        data = self.graph.get_room(2).to_dict()
        assert data["type"] == "normal"
        assert data["center_x"] == 700.0
        assert data["center_y"] == 200.0
        assert data["connections"] == [1]


class TestNestResultJson:

    def test_save_to_json(self, tmp_path):
        nest = generate_nest(seed=7)
        path = tmp_path / "dumps" / "nest.json"
        nest.save_to_json(str(path))

        data = json.loads(path.read_text())
        assert data["seed"] == 7
        assert len(data["rooms"]) == len(nest.rooms)
        assert len(data["tiles"]) == nest.grid.height
        assert data["rooms"][0]["type"] == "queen"
        assert data["bounds"]["width"] == nest.bounds.width
