# /academic-records/records/models/student_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional

# --- Model Definitions ---

class StudentCreate(BaseModel):
    """The model used for enrolling a new student."""
    name: str = Field(..., description="The full name of the student.")
    registration_id: str = Field(..., description="The RA, unique among active students.")
    class_id: int = Field(..., description="The ID of the class the student joins.")


class StudentUpdate(BaseModel):
    """
    The model for editing a student. An empty name and a class_id of 0 both
    mean "keep the current value".
    """
    name: Optional[str] = Field(default="")
    class_id: Optional[int] = Field(default=0)


class Student(BaseModel):
    """
    One slot of the student collection, as held in memory and persisted in
    the snapshot.
    """
    model_config = ConfigDict(from_attributes=True)

    registration_id: str = Field(default="")
    name: str = Field(default="")
    class_id: int = Field(default=0)
    scores: List[float] = Field(default_factory=lambda: [0.0, 0.0, 0.0], min_length=3, max_length=3)
    average: float = Field(default=0.0)
    active: bool = Field(default=False)
