"""create sales_rules table

Revision ID: 001
Revises:
Create Date: 2026-10-12 09:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create sales_rules table
    op.create_table(
        "sales_rules",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("country", sa.String(2), nullable=False),
        sa.Column("region", sa.String(100), nullable=True),
        sa.Column("sales_org", sa.String(50), nullable=False),
        sa.Column("sales_rep_email", sa.String(320), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_sales_rules_id", "sales_rules", ["id"], unique=False)
    op.create_index("ix_sales_rules_country", "sales_rules", ["country"], unique=False)
    # Lookup key. Not unique by itself: NULL regions never collide here,
    # see the partial unique indexes in 003.
    op.create_index(
        "ix_sales_rules_country_region",
        "sales_rules",
        ["country", "region"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_sales_rules_country_region", table_name="sales_rules")
    op.drop_index("ix_sales_rules_country", table_name="sales_rules")
    op.drop_index("ix_sales_rules_id", table_name="sales_rules")
    op.drop_table("sales_rules")
