"""API test fixtures — FastAPI test client over a fixed in-memory dataset.

Invariants:
    - get_dataset is overridden per test; the lifespan loader never runs
      (ASGITransport does not send lifespan events)

Design Decisions:
    - dependency_overrides over monkeypatching app.state: same seam the routes use
"""

import pytest
from httpx import ASGITransport, AsyncClient

from munro_api.api.dependencies import get_dataset
from munro_api.core.dataset import MunroDataset
from munro_api.main import app


@pytest.fixture
def dataset(hills_dataset) -> MunroDataset:
    return hills_dataset


@pytest.fixture
async def client(dataset):
    """FastAPI test client with the dataset dependency overridden."""
    app.dependency_overrides[get_dataset] = lambda: dataset

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
