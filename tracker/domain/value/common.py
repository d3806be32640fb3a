"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value compared field by field (e.g. vote aggregates)."""

    model_config = ConfigDict(frozen=True, extra="forbid")
