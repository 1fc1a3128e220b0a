# /academic-records/records/db/models/snapshot_models.py

"""
SQLAlchemy models for the persisted snapshot.

Every slot of the in-memory store gets one row, keyed by its position, so
inactive slots survive a save/load cycle exactly like active ones. The
counters live in a single-row table.
"""

from sqlalchemy import Boolean, Column, Float, Integer, String

from ..base_class import Base


class ClassSlot(Base):
    __tablename__ = "class_slots"

    slot_index = Column(Integer, primary_key=True)
    id = Column(Integer, nullable=False, default=0)
    name = Column(String, nullable=False, default="")
    capacity = Column(Integer, nullable=False, default=0)
    occupied = Column(Integer, nullable=False, default=0)
    active = Column(Boolean, nullable=False, default=False)


class StudentSlot(Base):
    __tablename__ = "student_slots"

    slot_index = Column(Integer, primary_key=True)
    registration_id = Column(String, nullable=False, default="")
    name = Column(String, nullable=False, default="")
    class_id = Column(Integer, nullable=False, default=0)
    score_1 = Column(Float, nullable=False, default=0.0)
    score_2 = Column(Float, nullable=False, default=0.0)
    score_3 = Column(Float, nullable=False, default=0.0)
    average = Column(Float, nullable=False, default=0.0)
    active = Column(Boolean, nullable=False, default=False)


class StoreCounters(Base):
    __tablename__ = "store_counters"

    id = Column(Integer, primary_key=True)
    active_class_count = Column(Integer, nullable=False, default=0)
    active_student_count = Column(Integer, nullable=False, default=0)
