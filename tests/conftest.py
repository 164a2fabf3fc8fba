import pytest

from tokendiff.registry import default_registry


@pytest.fixture(autouse=True)
def clear_boundary_pattern():
    default_registry.set(None)
    yield
    default_registry.set(None)
