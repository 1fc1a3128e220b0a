# /academic-records/records/models/result_model.py

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

from ..core.exceptions import ErrorKind, RecordStoreError


class OperationResult(BaseModel):
    """
    The outcome of one request made through the service facade. Failures
    carry the error kind and a message meant for the person at the console.
    """
    success: bool
    message: str
    error: Optional[ErrorKind] = None
    data: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def ok(cls, message: str, **data) -> "OperationResult":
        return cls(success=True, message=message, data=data)

    @classmethod
    def from_error(cls, error: RecordStoreError) -> "OperationResult":
        return cls(success=False, message=error.message, error=error.kind)
