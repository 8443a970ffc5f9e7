# =============================================================================
# core/models/diagnostics.py - Diagnostic Schemas
# =============================================================================
# Models for the upload diagnostic route:
# - RuntimeEnvironment: environment flags handed to the route as a dependency
# - UploadTestResponse / UploadPostResponse: the echoed payloads
#
# Field names are snake_case in Python and camelCase on the wire.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class RuntimeEnvironment(BaseModel):
    """
    Snapshot of the process environment flags.

    Built from settings once per request and injected into the handler,
    so tests can supply their own values.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    is_vercel: bool = Field(
        default=False,
        alias="isVercel",
        description="Running on the Vercel serverless platform"
    )
    node_env: str | None = Field(
        default=None,
        alias="nodeEnv",
        description="Declared runtime mode, echoed as configured"
    )

    @classmethod
    def from_settings(cls, settings) -> "RuntimeEnvironment":
        return cls(is_vercel=settings.is_vercel, node_env=settings.ENVIRONMENT)


class UploadPostResponse(BaseModel):
    """Confirms that the upload route accepts POST requests."""

    success: bool = True
    message: str
    timestamp: str


class UploadTestResponse(UploadPostResponse):
    """
    Confirms that the upload route is reachable and echoes the environment.

    Example:
        {
            "success": true,
            "message": "Upload API route is accessible",
            "timestamp": "2024-01-15T10:30:00.123Z",
            "environment": {"isVercel": false, "nodeEnv": "development"}
        }
    """

    environment: RuntimeEnvironment
