# /academic-records/records/models/user_model.py

from enum import IntEnum
from pydantic import BaseModel


class Role(IntEnum):
    """Access levels, ordered so that a higher value grants more."""
    STUDENT = 0
    PROFESSOR = 1
    ADMIN = 2


class Credential(BaseModel):
    """A login entry. Secrets are compared in clear text."""
    login: str
    secret: str
    role: Role
