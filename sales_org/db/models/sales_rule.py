from sqlalchemy import Column, Index, Integer, String, text

from sales_org.db.base import Base


class SalesRule(Base):
    __tablename__ = "sales_rules"
    # One rule per (country, region). A plain unique index treats NULLs as
    # distinct, so country-wide rules get their own index on country alone.
    __table_args__ = (
        Index(
            "uq_sales_rules_country_region",
            "country",
            "region",
            unique=True,
            sqlite_where=text("region IS NOT NULL"),
            postgresql_where=text("region IS NOT NULL"),
        ),
        Index(
            "uq_sales_rules_country_null_region",
            "country",
            unique=True,
            sqlite_where=text("region IS NULL"),
            postgresql_where=text("region IS NULL"),
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    country = Column(String(2), nullable=False, index=True)
    # NULL region applies to every region of the country
    region = Column(String(100), nullable=True)
    sales_org = Column(String(50), nullable=False)
    sales_rep_email = Column(String(320), nullable=False)
