"""Munro Routes — read-only HTTP surface over the query engine.

Invariants:
    - Handlers only parse parameters, call one engine function, and shape the response
    - Engine validation failures propagate as QueryValidationError (400 via global handler)
    - A lookup miss becomes ResourceNotFoundError (404); the engine itself never raises it
    - Query parameter names are camelCase (hillCategory, orderHeightBy, ...)

Design Decisions:
    - Shared list parameters collected by one dependency (list_options) instead of
      repeating four Query declarations per route
    - /search declared before /{running_number} so it is matched first
"""

from dataclasses import asdict, dataclass

from fastapi import APIRouter, Depends, Query

from munro_api.api.dependencies import get_dataset
from munro_api.core.dataset import MunroDataset
from munro_api.core.domain_types import HeightInMetres, RunningNumber
from munro_api.core.errors import ErrorContext, ResourceNotFoundError
from munro_api.core.munro import Munro
from munro_api.core.query_engine import (
    MunroQuery,
    find_all,
    find_by_height_range,
    find_by_maximum_height,
    find_by_minimum_height,
    find_by_running_number,
    find_munros,
)
from munro_api.schemas.munro import MunroResponse

router = APIRouter(prefix="/api/v1/munros", tags=["munros"])


@dataclass(frozen=True)
class ListOptions:
    """Category, sort and limit parameters shared by every list endpoint."""
    hill_category: str | None = None
    order_height_by: str | None = None
    order_name_by: str | None = None
    limit: int | None = None


def list_options(
    hill_category: str | None = Query(
        None, alias="hillCategory", description="MUN or TOP; both when omitted",
    ),
    order_height_by: str | None = Query(
        None, alias="orderHeightBy", description="asc or desc",
    ),
    order_name_by: str | None = Query(
        None, alias="orderNameBy", description="asc or desc",
    ),
    limit: int | None = Query(None, description="Maximum number of results"),
) -> ListOptions:
    return ListOptions(
        hill_category=hill_category,
        order_height_by=order_height_by,
        order_name_by=order_name_by,
        limit=limit,
    )


def _to_response(munros: list[Munro]) -> list[MunroResponse]:
    return [MunroResponse.from_munro(m) for m in munros]


def _height(value: float | None) -> HeightInMetres | None:
    return None if value is None else HeightInMetres(value)


@router.get("", response_model=list[MunroResponse])
async def list_munros(
    options: ListOptions = Depends(list_options),
    dataset: MunroDataset = Depends(get_dataset),
):
    """List all Munros and Tops."""
    return _to_response(find_all(dataset, **asdict(options)))


@router.get("/search", response_model=list[MunroResponse])
async def search_munros(
    min_height: float | None = Query(None, alias="minHeight"),
    max_height: float | None = Query(None, alias="maxHeight"),
    options: ListOptions = Depends(list_options),
    dataset: MunroDataset = Depends(get_dataset),
):
    """Combine height bounds, category, sorting and limit in one query."""
    query = MunroQuery(
        min_height=_height(min_height), max_height=_height(max_height),
        **asdict(options),
    )
    return _to_response(find_munros(dataset, query))


@router.get("/minimum-height/{min_height}", response_model=list[MunroResponse])
async def list_by_minimum_height(
    min_height: float,
    options: ListOptions = Depends(list_options),
    dataset: MunroDataset = Depends(get_dataset),
):
    """Munros at or above min_height."""
    return _to_response(
        find_by_minimum_height(dataset, HeightInMetres(min_height), **asdict(options)),
    )


@router.get("/maximum-height/{max_height}", response_model=list[MunroResponse])
async def list_by_maximum_height(
    max_height: float,
    options: ListOptions = Depends(list_options),
    dataset: MunroDataset = Depends(get_dataset),
):
    """Munros strictly below max_height."""
    return _to_response(
        find_by_maximum_height(dataset, HeightInMetres(max_height), **asdict(options)),
    )


@router.get(
    "/minimum-height/{min_height}/maximum-height/{max_height}",
    response_model=list[MunroResponse],
)
async def list_by_height_range(
    min_height: float,
    max_height: float,
    options: ListOptions = Depends(list_options),
    dataset: MunroDataset = Depends(get_dataset),
):
    """Munros in [min_height, max_height)."""
    return _to_response(
        find_by_height_range(
            dataset, HeightInMetres(min_height), HeightInMetres(max_height),
            **asdict(options),
        ),
    )


@router.get("/{running_number}", response_model=MunroResponse)
async def get_munro(
    running_number: int, dataset: MunroDataset = Depends(get_dataset),
):
    """Get one Munro by running number."""
    munro = find_by_running_number(dataset, RunningNumber(running_number))
    if munro is None:
        raise ResourceNotFoundError(
            "Munro", str(running_number),
            ErrorContext(running_number=running_number),
        )
    return MunroResponse.from_munro(munro)
