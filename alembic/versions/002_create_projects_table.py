"""create projects (components) table

Revision ID: 002
Revises: 001
Create Date: 2026-10-16 09:10:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("uuid", sa.String(50), nullable=False),
        sa.Column("kee", sa.String(400), nullable=False),
        sa.Column("name", sa.String(2000), nullable=True),
        sa.Column("scope", sa.String(3), nullable=False),
        sa.Column("qualifier", sa.String(10), nullable=False),
        sa.Column("project_uuid", sa.String(50), nullable=False),
        sa.Column("module_uuid", sa.String(50), nullable=True),
        sa.Column("organization_uuid", sa.String(40), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_id", "projects", ["id"], unique=False)
    op.create_index("ix_projects_uuid", "projects", ["uuid"], unique=True)
    op.create_index("ix_projects_kee", "projects", ["kee"], unique=True)
    op.create_index("ix_projects_project_uuid", "projects", ["project_uuid"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_projects_project_uuid", table_name="projects")
    op.drop_index("ix_projects_kee", table_name="projects")
    op.drop_index("ix_projects_uuid", table_name="projects")
    op.drop_index("ix_projects_id", table_name="projects")
    op.drop_table("projects")
