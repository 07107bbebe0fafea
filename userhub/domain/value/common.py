"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value compared by its fields.

    Unknown fields are rejected unless a subclass relaxes ``extra``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
