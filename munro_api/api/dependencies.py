"""Request Dependencies — hands the startup-loaded dataset to route handlers.

Invariants:
    - The dataset lives on app.state, set once by the lifespan
    - Handlers receive it by reference and never mutate it

Design Decisions:
    - FastAPI dependency over module import: tests inject a fixed dataset with
      app.dependency_overrides[get_dataset]
"""

from fastapi import Request

from munro_api.core.dataset import MunroDataset


def get_dataset(request: Request) -> MunroDataset:
    """FastAPI dependency for the shared read-only dataset."""
    dataset = getattr(request.app.state, "dataset", None)
    if dataset is None:
        raise RuntimeError("Dataset not initialized")
    return dataset
