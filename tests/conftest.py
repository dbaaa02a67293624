from __future__ import annotations

import pytest
from fakes import HOST, FakeBackend

from webdantic import Instance, get_instance


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def instance(backend: FakeBackend) -> Instance:
    return get_instance(HOST + "/", transport=backend.transport)
