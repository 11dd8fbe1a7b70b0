"""
RESTful Notes — Hypermedia Building Blocks
==========================================

What:  Link object, index document, error body and health payload shared by
       every route.

HAL reserves `_links` and `_embedded`; pydantic treats leading underscores
as private, so the models use plain attribute names with those aliases.
FastAPI serializes response models by alias.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    href: str = Field(description="Absolute URI of the linked resource")


class CollectionLinks(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    self_link: Link = Field(alias="self", description="This collection")


class IndexLinks(BaseModel):
    notes: Link = Field(description="The Notes resource")
    tags: Link = Field(description="The Tags resource")


class IndexModel(BaseModel):
    """Body of GET /, the entry point of the API."""

    model_config = ConfigDict(populate_by_name=True)

    links: IndexLinks = Field(alias="_links", description="Links to other resources")


class ErrorResponse(BaseModel):
    """
    Uniform error body for every 4xx/5xx answer, including GET /error.

    Example:
        {
            "error": "Bad Request",
            "message": "The tag 'http://localhost:8080/tags/123' does not exist",
            "path": "/notes",
            "status": 400,
            "timestamp": 1717000000000,
            "request_id": "a1b2c3d4"
        }
    """

    error: str = Field(description="The HTTP error that occurred, e.g. `Bad Request`")
    message: str = Field(description="A description of the cause of the error")
    path: str = Field(description="The path to which the request was made")
    status: int = Field(description="The HTTP status code, e.g. `400`")
    timestamp: int = Field(description="The time, in milliseconds, at which the error occurred")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
