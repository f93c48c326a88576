"""
Notes App Backend — Health Check Route
========================================

What:  GET / answers {"message": "Healthy"} for liveness probes.
Why:   The store is in process memory, so there is no dependency to probe:
       if the process can answer, it is healthy.
"""

from fastapi import APIRouter

from notes_app.schemas.note import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(message="Healthy")
