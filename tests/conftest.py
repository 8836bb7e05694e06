import pytest


class SequenceRandom:
    """Random source that replays a fixed list of draws."""
    
    def __init__(self, values):
        self._values = list(values)
        self.calls = []
    
    def randint(self, low, high):
        self.calls.append((low, high))
        if not self._values:
            raise AssertionError("SequenceRandom ran out of values")
        return self._values.pop(0)


@pytest.fixture
def sequence_rng():
    """Factory for deterministic random sources."""
    return SequenceRandom
