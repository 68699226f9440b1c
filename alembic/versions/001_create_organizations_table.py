"""create organizations table

Revision ID: 001
Revises:
Create Date: 2026-10-16 09:00:00.000000

"""

import uuid
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "organizations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("uuid", sa.String(40), nullable=False),
        sa.Column("kee", sa.String(32), nullable=False),
        sa.Column("name", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_organizations_id", "organizations", ["id"], unique=False)
    op.create_index("ix_organizations_uuid", "organizations", ["uuid"], unique=True)
    op.create_index("ix_organizations_kee", "organizations", ["kee"], unique=True)

    # Key of the default organization comes from settings (loaded by Alembic env.py)
    from app.core.config import settings

    op.execute(
        sa.text(
            "INSERT INTO organizations (uuid, kee, name) VALUES (:uuid, :kee, :name)"
        ).bindparams(
            uuid=str(uuid.uuid4()),
            kee=settings.default_organization_key,
            name="Default Organization",
        )
    )


def downgrade() -> None:
    op.drop_index("ix_organizations_kee", table_name="organizations")
    op.drop_index("ix_organizations_uuid", table_name="organizations")
    op.drop_index("ix_organizations_id", table_name="organizations")
    op.drop_table("organizations")
