import pytest


class ScriptedRandom:
    """Random source that replays a fixed list of cells for food placement."""

    def __init__(self, cells):
        self.values = [v for cell in cells for v in cell]
        self.calls = 0

    def randrange(self, stop):
        value = self.values[self.calls]
        self.calls += 1
        assert 0 <= value < stop
        return value


@pytest.fixture
def scripted():
    return ScriptedRandom
