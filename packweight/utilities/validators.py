"""
Input validation schemas using Pydantic for better data integrity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from packweight.utilities.units import WEIGHT_UNITS


class PackListItemUpdateInput(BaseModel):
    """Schema for updating one pack list row."""
    quantity: Optional[int] = Field(None, ge=1, le=1000)
    is_included: Optional[bool] = None


class WeightGoalInput(BaseModel):
    """Schema for user weight goals.

    Omitted fields are left untouched; an explicit null clears the goal.
    Values are expressed in ``unit`` and converted to grams by the handler.
    """
    base_weight_goal: Optional[float] = Field(None, ge=0)
    total_weight_goal: Optional[float] = Field(None, ge=0)
    unit: str = "g"

    @field_validator('unit')
    @classmethod
    def validate_unit(cls, v):
        """Ensure the unit is one we can convert."""
        v = (v or "").strip().lower()
        if v not in WEIGHT_UNITS:
            raise ValueError(f"unit must be one of {', '.join(WEIGHT_UNITS)}")
        return v

