"""Base model for all domain entities."""

from datetime import datetime, timezone
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Base class for all domain entities.

    Entities are immutable. Changes produce a new instance through
    ``evolve``, which also stamps ``updated_at``.
    """

    model_config = ConfigDict(frozen=True)

    updated_at: datetime = Field(default_factory=utcnow)

    def evolve(self, **changes: Any) -> Self:
        """Return a copy with ``changes`` applied and a fresh ``updated_at``."""
        return self.model_copy(update={**changes, "updated_at": utcnow()})
