"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up

Design Decisions:
    - No readiness probe: the store is in-process, there is no dependency to wait for
"""

from datetime import datetime, timezone

from fastapi import APIRouter, status

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "Healthy", "timestamp": datetime.now(timezone.utc).isoformat()}
