"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the dataset loaded zero records (readiness)

Design Decisions:
    - Separate liveness/readiness: a failed load keeps the process alive (fail-open)
      but takes it out of the load balancer
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from munro_api.api.dependencies import get_dataset
from munro_api.core.dataset import MunroDataset

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "munro-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(dataset: MunroDataset = Depends(get_dataset)):
    """Readiness probe — the dataset must hold at least one record."""
    if dataset.is_empty:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "dataset_empty",
            },
        )
    return {
        "status": "ready",
        "checks": {
            "dataset": {
                "records": len(dataset),
                "rejected_rows": dataset.rejected_rows,
            },
        },
    }
