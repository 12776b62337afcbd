"""Exceptions raised by nest generation."""


class NestGenerationError(Exception):
    """Base class for nest generation failures."""


class PlacementRejected(NestGenerationError):
    """A candidate corridor or room overlaps already placed geometry.

    Raised and caught inside the room graph builder; a rejected branch is
    dropped and never reported to the caller.
    """

    def __init__(self, candidate, direction=None, conflicts=()):
        self.candidate = candidate
        self.direction = direction
        self.conflicts = tuple(conflicts)
        super().__init__(f"Candidate {candidate} overlaps rooms {list(self.conflicts)}")


class EmptyGraphInvariantViolation(NestGenerationError):
    """Bounds were requested for a nest with no rooms."""
