from .errors import EmptyGraphInvariantViolation, NestGenerationError, PlacementRejected
from .nest_data import (
    NestConfig,
    NestGraph,
    NestResult,
    Rect,
    Room,
    RoomType,
    SpawnPoint,
    TileGrid,
    WorldBounds,
)
from .nest_generator import RoomGraphBuilder, generate_level_nest, generate_nest

__all__ = [
    'EmptyGraphInvariantViolation',
    'NestGenerationError',
    'PlacementRejected',
    'NestConfig',
    'NestGraph',
    'NestResult',
    'Rect',
    'Room',
    'RoomType',
    'SpawnPoint',
    'TileGrid',
    'WorldBounds',
    'RoomGraphBuilder',
    'generate_level_nest',
    'generate_nest',
]
