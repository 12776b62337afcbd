import pytest


class ScriptedRandom:
    """RandomSource that replays a fixed sequence of draws.

    Each ``random()`` or ``randrange()`` call consumes the next value. Once the
    script runs out, ``random()`` returns 0.99 (never branches) and
    ``randrange()`` returns its lower bound.
    """

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def _next(self):
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return None

    def random(self):
        value = self._next()
        if value is None:
            return 0.99
        assert isinstance(value, float), f"random() got scripted {value!r}"
        return value

    def randrange(self, start, stop):
        value = self._next()
        if value is None:
            return start
        assert isinstance(value, int) and start <= value < stop, \
            f"randrange({start}, {stop}) got scripted {value!r}"
        return value

    @property
    def exhausted(self):
        return not self.values


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
