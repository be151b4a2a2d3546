from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sales_org.db.models.sales_rule import SalesRule as SalesRuleModel
from sales_org.errors import DuplicateResourceError


def _region_matches(region: str | None):
    """Exact region predicate. None only matches NULL; "" is a distinct value."""
    if region is None:
        return SalesRuleModel.region.is_(None)
    return SalesRuleModel.region == region


def get_sales_rule_by_id(db: Session, rule_id: int) -> SalesRuleModel | None:
    """Get a sales rule by ID."""
    return db.query(SalesRuleModel).filter(SalesRuleModel.id == rule_id).first()


def get_sales_rule_by_country_region(
    db: Session, country: str, region: str | None, exclude_id: int | None = None
) -> SalesRuleModel | None:
    """Get the sales rule for an exact (country, region) pair.

    If duplicates exist the oldest rule (lowest id) is returned.
    """
    query = db.query(SalesRuleModel).filter(
        SalesRuleModel.country == country, _region_matches(region)
    )
    if exclude_id is not None:
        query = query.filter(SalesRuleModel.id != exclude_id)
    return query.order_by(SalesRuleModel.id).first()


def get_all_sales_rules_paginated(
    db: Session,
    page: int = 1,
    page_size: int = 100,
    country: str | None = None,
    region: str | None = None,
) -> tuple[list[SalesRuleModel], int]:
    """
    Get all sales rules with pagination and optional exact-match filters.

    Args:
        page: Page number (1-indexed)
        page_size: Number of items per page
        country: Optional filter by country code; empty means no filter
        region: Optional filter by region

    Returns:
        Tuple of (list of sales rules, total count)
    """
    query = db.query(SalesRuleModel)

    if country:
        query = query.filter(SalesRuleModel.country == country)

    if region is not None:
        query = query.filter(SalesRuleModel.region == region)

    total = query.count()
    skip = (page - 1) * page_size
    rules = (
        query.order_by(
            SalesRuleModel.country, SalesRuleModel.region, SalesRuleModel.id
        )
        .offset(skip)
        .limit(page_size)
        .all()
    )
    return rules, total


def _commit_or_duplicate(db: Session) -> None:
    """Commit, turning a unique-index violation into DuplicateResourceError."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if "unique" in str(exc.orig).lower():
            raise DuplicateResourceError(
                "A sales rule for this country and region already exists"
            ) from exc
        raise


def create_sales_rule(
    db: Session,
    country: str,
    sales_org: str,
    sales_rep_email: str,
    region: str | None = None,
) -> SalesRuleModel:
    """Create a new sales rule in the database. Pure data access - no business logic."""
    db_rule = SalesRuleModel(
        country=country,
        region=region,
        sales_org=sales_org,
        sales_rep_email=sales_rep_email,
    )
    db.add(db_rule)
    _commit_or_duplicate(db)
    db.refresh(db_rule)
    return db_rule


def update_sales_rule(
    db: Session, rule: SalesRuleModel, changes: dict[str, Any]
) -> SalesRuleModel:
    """Apply a partial change set to a loaded sales rule. Keys absent from ``changes`` are untouched."""
    for field, value in changes.items():
        setattr(rule, field, value)

    _commit_or_duplicate(db)
    db.refresh(rule)
    return rule


def delete_sales_rule(db: Session, rule: SalesRuleModel) -> None:
    """Delete a loaded sales rule. Pure data access - no business logic."""
    db.delete(rule)
    db.commit()
