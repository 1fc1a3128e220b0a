# /academic-records/records/models/snapshot_model.py

from typing import List
from pydantic import BaseModel, Field

from .class_model import Class
from .student_model import Student


class StoreSnapshot(BaseModel):
    """
    A full image of the record store: every slot, active or not, plus the
    two counters. This is what gets persisted between runs.
    """
    classes: List[Class] = Field(default_factory=list)
    students: List[Student] = Field(default_factory=list)
    active_class_count: int = 0
    active_student_count: int = 0
