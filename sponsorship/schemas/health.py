"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness) and GET /health/ready."""

    status: str = Field(default="ok", description="Service status")


class ReadinessErrorResponse(BaseModel):
    """Response for GET /health/ready when the database is unreachable (503)."""

    status: str = Field(default="not_ready", description="Readiness status")
    message: str = Field(..., description="Reason")
