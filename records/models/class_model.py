# /academic-records/records/models/class_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict

# --- Model Definitions ---

class ClassCreate(BaseModel):
    """The data a caller supplies when opening a new class."""
    name: str = Field(..., description="Display name. Names are not unique.")
    capacity: int = Field(..., description="Maximum number of enrolled students.")


class Class(BaseModel):
    """
    One slot of the class collection. A slot keeps its data after it is
    deactivated, until a new class is created in the same position.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(default=0, description="Slot index + 1, assigned at creation.")
    name: str = Field(default="")
    capacity: int = Field(default=0)
    occupied: int = Field(default=0, description="Active students enrolled in this class.")
    active: bool = Field(default=False)

    @property
    def is_full(self) -> bool:
        return self.occupied >= self.capacity
