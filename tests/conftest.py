import pytest


class ScriptedRandom:
    """Random source that hands out pre-set values from randint."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.values.pop(0)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
