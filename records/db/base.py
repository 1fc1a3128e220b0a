# /academic-records/records/db/base.py

# Central registry for all SQLAlchemy models. Importing them here guarantees
# that Base.metadata knows every table before create_all runs.

from .base_class import Base

from .models.snapshot_models import ClassSlot, StudentSlot, StoreCounters
