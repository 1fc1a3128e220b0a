# /academic-records/records/db/base_class.py

from sqlalchemy.orm import declarative_base

# Every ORM model inherits from this Base so create_all sees it.
Base = declarative_base()
