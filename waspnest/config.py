"""
Game-wide constants shared by the nest generator and the preview window.
"""

# Window
WIDTH, HEIGHT = 800, 600
FPS = 60

# Tiles
TILE_SIZE = 16
TILE_WALL = 0
TILE_FLOOR = 1

# Nest generation defaults (world pixels unless noted)
ROOM_MIN_SIZE = 200
ROOM_MAX_SIZE = 400
CORRIDOR_WIDTH = 64
MIN_CORRIDOR_LENGTH = 100
MAX_CORRIDOR_LENGTH = 200
BRANCH_PROBABILITY = 0.6
DEPTH_DECAY = 0.1
MAX_DEPTH = 5

# Paddings, in tiles
OVERLAP_PADDING_TILES = 2
SPAWN_PADDING_TILES = 2
BOUNDS_PADDING_TILES = 10

# Colors
BG = (12, 8, 8)
WHITE = (235, 235, 235)
COLOR_WALL = (139, 69, 19)
COLOR_FLOOR = (45, 31, 31)
COLOR_QUEEN = (255, 0, 255)
COLOR_ROOM = (255, 255, 0)
COLOR_CORRIDOR = (120, 120, 140)
COLOR_WORM = (255, 105, 180)
