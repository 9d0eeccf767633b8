"""Base class for pricing domain entities"""

from sqlmodel import SQLModel


class BaseModel(SQLModel):
    """
    Base for all domain entities

    Entities are plain (non-table) SQLModel models: validated on construction,
    copied with ``model_copy(update=...)`` instead of being mutated.
    """
