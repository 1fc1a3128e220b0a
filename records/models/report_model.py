# /academic-records/records/models/report_model.py

from enum import Enum
from typing import List
from pydantic import BaseModel, Field

APPROVAL_AVERAGE = 7.0
REMEDIAL_AVERAGE = 5.0


class StudentStatus(str, Enum):
    APPROVED = "Approved"
    REMEDIAL = "Remedial"
    FAILED = "Failed"

    @classmethod
    def from_average(cls, average: float) -> "StudentStatus":
        if average >= APPROVAL_AVERAGE:
            return cls.APPROVED
        if average >= REMEDIAL_AVERAGE:
            return cls.REMEDIAL
        return cls.FAILED


class ReportRow(BaseModel):
    registration_id: str
    name: str
    scores: List[float] = Field(..., min_length=3, max_length=3)
    average: float
    status: StudentStatus


class ClassReport(BaseModel):
    """Everything the class report screen and the CSV export need."""
    class_id: int
    class_name: str
    capacity: int
    occupied: int
    rows: List[ReportRow] = Field(default_factory=list)
