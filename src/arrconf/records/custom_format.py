"""Custom format models: the format itself and its polymorphic conditions."""

from typing import ClassVar, FrozenSet, List, Optional
from pydantic import BaseModel, Field
from .base import GenericRecord


class ConditionRecord(GenericRecord):
    """Every attribute used by any custom format condition (specification)."""
    PROPERTIES: ClassVar[FrozenSet[str]] = frozenset({"negate", "required"})

    negate: Optional[bool] = Field(None, description="Negate flag.")
    required: Optional[bool] = Field(None, description="Required flag.")

    # Field values
    value: Optional[str] = Field(None, description="Value.")
    min: Optional[int] = Field(None, description="Min.")
    max: Optional[int] = Field(None, description="Max.")


class FormatCondition(BaseModel):
    """One condition of a custom format, as declared by the user."""
    name: str = Field(..., description="Specification name.")
    implementation: str = Field(..., description="Implementation.")
    negate: Optional[bool] = Field(None, description="Negate flag.")
    required: Optional[bool] = Field(None, description="Required flag.")
    value: Optional[str] = Field(None, description="Value.")
    min: Optional[int] = Field(None, description="Min.")
    max: Optional[int] = Field(None, description="Max.")

    class Config:
        extra = "forbid"


class CustomFormat(BaseModel):
    """Custom format resource."""
    id: Optional[int] = Field(None, description="Custom Format ID.")
    name: str = Field(..., description="Custom Format name.")
    include_custom_format_when_renaming: Optional[bool] = Field(
        None, description="Include custom format when renaming flag."
    )
    specifications: List[FormatCondition] = Field(..., description="Specifications.")

    class Config:
        extra = "forbid"
