# =============================================================================
# app/routers/upload.py - Upload Route Diagnostics
# =============================================================================
# Lets deployments verify that the upload route is reachable for both verbs.
# Neither endpoint touches storage or reads the request body.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import RuntimeEnvironmentDep
from core.models.diagnostics import UploadPostResponse, UploadTestResponse
from lib.utils import utc_timestamp

router = APIRouter()


@router.get("/test", response_model=UploadTestResponse)
async def upload_test(environment: RuntimeEnvironmentDep) -> UploadTestResponse:
    """
    Confirm the upload route is accessible and echo the environment flags.
    """
    return UploadTestResponse(
        message="Upload API route is accessible",
        timestamp=utc_timestamp(),
        environment=environment,
    )


@router.post("/test", response_model=UploadPostResponse)
async def upload_test_post() -> UploadPostResponse:
    """Confirm the upload route accepts POST requests."""
    return UploadPostResponse(
        message="Upload API route accepts POST requests",
        timestamp=utc_timestamp(),
    )
