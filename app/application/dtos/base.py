"""Base DTO class."""

from pydantic import BaseModel, ConfigDict


class DTO(BaseModel):
    """Base class for application DTOs (immutable, populated by field name or alias)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)
