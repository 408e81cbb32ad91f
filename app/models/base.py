# File: app/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Models must be imported before `create_all` runs (see app.db.init_db)
    so their tables are registered on Base.metadata.
    """
    pass
