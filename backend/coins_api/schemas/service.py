"""Service Schemas: response models for the root and health endpoints."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str
    version: str


class ServiceInfoResponse(BaseModel):
    """GET /: static description of the API."""
    service: str
    version: str
    endpoints: dict[str, str]
