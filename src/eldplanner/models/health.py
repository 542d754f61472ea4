"""Backend health check model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from eldplanner.models._types import Timestamp


class HealthStatus(BaseModel):
    """Response of the backend health endpoint."""

    model_config = ConfigDict(frozen=True)

    status: str
    timestamp: Timestamp | None = None

    @property
    def is_healthy(self) -> bool:
        return self.status.lower() in {"ok", "healthy"}
