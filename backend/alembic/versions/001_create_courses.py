"""Create courses table.

Revision ID: 001_courses
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_courses"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "courses",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("topic", sa.String(100), nullable=False),
        sa.Column("release_date", sa.Date, nullable=False),
        sa.Column("author", sa.String(100), nullable=False),
    )
    op.create_index("ix_courses_title", "courses", ["title"])


def downgrade() -> None:
    op.drop_index("ix_courses_title", table_name="courses")
    op.drop_table("courses")
