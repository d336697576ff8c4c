"""Fixtures for id_generator contract tests."""

from collections.abc import Iterator

import pytest

from clinicflow.adapters.id_generators import (
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from clinicflow.interfaces.id_generator import IdGenerator

_FACTORIES = {
    "uuid4": UUIDv4Generator,
    "ulid": ULIDGenerator,
    "simple": SimpleIdGenerator,
}


@pytest.fixture(params=sorted(_FACTORIES))
def id_generator(request: pytest.FixtureRequest) -> Iterator[IdGenerator]:
    """Yield a fresh generator of each kind."""
    yield _FACTORIES[request.param]()


@pytest.fixture(params=["ulid", "simple"])
def ordered_id_generator(request: pytest.FixtureRequest) -> Iterator[IdGenerator]:
    """Yield generators whose ids sort in generation order."""
    yield _FACTORIES[request.param]()
