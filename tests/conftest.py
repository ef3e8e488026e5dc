import pytest

from itemizer import Itemizer


class Key:
    """Composite key compared by value, not by identity."""

    def __init__(self, name, version):
        self.name = name
        self.version = version

    def __eq__(self, other):
        return (
            type(self) is type(other)
            and self.name == other.name
            and self.version == other.version
        )

    def __hash__(self):
        return hash((type(self), self.name, self.version))


def distinct_strings(n):
    return [f"value-{i}" for i in range(n)]


@pytest.fixture
def itemizer():
    return Itemizer()
