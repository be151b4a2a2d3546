"""add check constraint for country field in sales_rules table

Revision ID: 002
Revises: 001
Create Date: 2026-10-12 09:30:00.000000

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
    bind = op.get_bind()
    dialect_name = bind.dialect.name

    # Country codes are exactly two characters
    if dialect_name == "sqlite":
        # SQLite requires batch mode for adding constraints
        country_check = "LENGTH(country) = 2"
        with op.batch_alter_table("sales_rules", schema=None) as batch_op:
            batch_op.create_check_constraint(
                "ck_sales_rules_country_two_chars", country_check
            )
    else:
        country_check = "CHAR_LENGTH(country) = 2"
        op.create_check_constraint(
            "ck_sales_rules_country_two_chars", "sales_rules", country_check
        )


def downgrade() -> None:
    bind = op.get_bind()
    dialect_name = bind.dialect.name

    if dialect_name == "sqlite":
        with op.batch_alter_table("sales_rules", schema=None) as batch_op:
            batch_op.drop_constraint(
                "ck_sales_rules_country_two_chars", type_="check"
            )
    else:
        op.drop_constraint(
            "ck_sales_rules_country_two_chars", "sales_rules", type_="check"
        )
