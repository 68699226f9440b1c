"""create rules table

Revision ID: 004
Revises: 003
Create Date: 2026-10-16 09:30:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "rules",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("plugin_name", sa.String(255), nullable=False),
        sa.Column("plugin_rule_key", sa.String(200), nullable=False),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("language", sa.String(20), nullable=True),
        sa.Column("status", sa.String(40), nullable=True),
        sa.Column("def_remediation_function", sa.String(20), nullable=True),
        sa.Column("def_remediation_gap_mult", sa.String(20), nullable=True),
        sa.Column("def_remediation_base_effort", sa.String(20), nullable=True),
        sa.Column("remediation_function", sa.String(20), nullable=True),
        sa.Column("remediation_gap_mult", sa.String(20), nullable=True),
        sa.Column("remediation_base_effort", sa.String(20), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("plugin_name", "plugin_rule_key", name="uq_rules_repo_key"),
    )
    op.create_index("ix_rules_id", "rules", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_rules_id", table_name="rules")
    op.drop_table("rules")
