"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for comment-system entities.

    Entities are immutable snapshots; a changed vote is a new record.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",  # Mapper typos fail loudly
    )
