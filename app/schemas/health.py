"""
Local Library Catalog — Health Response Schema
=================================================

What:  JSON body of GET /health, the only non-HTML endpoint.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """
    What:  Service and dependency status.
    Who:   Returned by GET /health for monitoring and load balancer checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
