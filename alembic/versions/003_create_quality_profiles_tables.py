"""create rules_profiles and project_qprofiles tables

Revision ID: 003
Revises: 002
Create Date: 2026-10-16 09:20:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "rules_profiles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("kee", sa.String(255), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("language", sa.String(20), nullable=False),
        sa.Column("organization_uuid", sa.String(40), nullable=False),
        sa.Column("parent_kee", sa.String(255), nullable=True),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("rules_updated_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_rules_profiles_id", "rules_profiles", ["id"], unique=False)
    op.create_index("ix_rules_profiles_kee", "rules_profiles", ["kee"], unique=True)
    op.create_index("ix_rules_profiles_language", "rules_profiles", ["language"], unique=False)
    op.create_index(
        "ix_rules_profiles_organization_uuid",
        "rules_profiles",
        ["organization_uuid"],
        unique=False,
    )

    op.create_table(
        "project_qprofiles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("project_uuid", sa.String(50), nullable=False),
        sa.Column("profile_key", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["profile_key"], ["rules_profiles.kee"]),
        sa.UniqueConstraint("project_uuid", "profile_key", name="uq_project_qprofiles"),
    )
    op.create_index("ix_project_qprofiles_id", "project_qprofiles", ["id"], unique=False)
    op.create_index(
        "ix_project_qprofiles_project_uuid",
        "project_qprofiles",
        ["project_uuid"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_project_qprofiles_project_uuid", table_name="project_qprofiles")
    op.drop_index("ix_project_qprofiles_id", table_name="project_qprofiles")
    op.drop_table("project_qprofiles")
    op.drop_index("ix_rules_profiles_organization_uuid", table_name="rules_profiles")
    op.drop_index("ix_rules_profiles_language", table_name="rules_profiles")
    op.drop_index("ix_rules_profiles_kee", table_name="rules_profiles")
    op.drop_index("ix_rules_profiles_id", table_name="rules_profiles")
    op.drop_table("rules_profiles")
