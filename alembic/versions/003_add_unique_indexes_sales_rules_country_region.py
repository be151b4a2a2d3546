"""add partial unique indexes on country and region in sales_rules table

Revision ID: 003
Revises: 002
Create Date: 2026-10-19 10:00:00.000000

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
    # Regional rules: unique per (country, region)
    op.create_index(
        "uq_sales_rules_country_region",
        "sales_rules",
        ["country", "region"],
        unique=True,
        sqlite_where=sa.text("region IS NOT NULL"),
        postgresql_where=sa.text("region IS NOT NULL"),
    )
    # Country-wide rules: NULLs never collide in the index above,
    # so at most one NULL-region row per country is enforced separately
    op.create_index(
        "uq_sales_rules_country_null_region",
        "sales_rules",
        ["country"],
        unique=True,
        sqlite_where=sa.text("region IS NULL"),
        postgresql_where=sa.text("region IS NULL"),
    )


def downgrade() -> None:
    op.drop_index("uq_sales_rules_country_null_region", table_name="sales_rules")
    op.drop_index("uq_sales_rules_country_region", table_name="sales_rules")
