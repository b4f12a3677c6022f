"""ORM Models: SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - All models imported here so Base.metadata is populated before
      create_all or alembic autogenerate runs
"""

from course_catalog.models.course import Course  # noqa: F401
