"""create properties and loaded_templates tables

Revision ID: 005
Revises: 004
Create Date: 2026-10-16 09:40:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "005"
down_revision: Union[str, None] = "004"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "properties",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("prop_key", sa.String(512), nullable=False),
        sa.Column("text_value", sa.Text(), nullable=True),
        sa.Column("resource_id", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_properties_id", "properties", ["id"], unique=False)
    op.create_index("ix_properties_prop_key", "properties", ["prop_key"], unique=False)

    # Markers of templates and one-shot tasks already applied
    op.create_table(
        "loaded_templates",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("kee", sa.String(200), nullable=False),
        sa.Column("template_type", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_loaded_templates_id", "loaded_templates", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_loaded_templates_id", table_name="loaded_templates")
    op.drop_table("loaded_templates")
    op.drop_index("ix_properties_prop_key", table_name="properties")
    op.drop_index("ix_properties_id", table_name="properties")
    op.drop_table("properties")
