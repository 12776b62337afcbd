"""
Seed Manager - deterministic seeds for successive nests

One world seed drives a whole session. Each level (the first game, then one
more per restart) hashes it into a level seed, and each consumer of
randomness gets its own stream derived from that level seed, so drawing
enemy reinforcements never shifts the nest layout.
"""

import hashlib
import random
from typing import Dict, Optional

STRUCTURE = 'structure'
ENEMIES = 'enemies'
STREAMS = (STRUCTURE, ENEMIES)


def _derive_seed(seed_string: str) -> int:
    seed_hash = hashlib.md5(seed_string.encode()).hexdigest()
    return int(seed_hash[:8], 16)


class SeedManager:
    """Hands out per-level random streams for nest structure and enemies"""

    def __init__(self, world_seed: Optional[int] = None):
        """
        Args:
            world_seed: Master seed for the session. If None, picks a random one.
        """
        self.world_seed = world_seed if world_seed is not None else random.randint(0, 2**31 - 1)
        self.level_seed: Optional[int] = None
        self._streams: Dict[str, random.Random] = {}

    def generate_level_seed(self, level_index: int) -> int:
        """Switch to ``level_index`` and return its seed; earlier streams are dropped."""
        self.level_seed = _derive_seed(f"{self.world_seed}_level_{level_index}")
        self._streams = {}
        return self.level_seed

    def get_random(self, stream: str) -> random.Random:
        """
        Random instance for one stream of the current level

        Args:
            stream: STRUCTURE (nest layout) or ENEMIES (reinforcement picks)

        Raises:
            ValueError: for an unknown stream name
            RuntimeError: if no level seed has been generated yet
        """
        if stream not in STREAMS:
            raise ValueError(f"Unknown random stream {stream!r}; expected one of {STREAMS}")
        if self.level_seed is None:
            raise RuntimeError("generate_level_seed() must be called before get_random()")

        if stream not in self._streams:
            self._streams[stream] = random.Random(_derive_seed(f"{self.level_seed}_{stream}"))
        return self._streams[stream]
