import logging
from typing import Any

from sqlalchemy.orm import Session

import sales_org.repositories.sales_rule as sales_rule_repo
from sales_org.db.models.sales_rule import SalesRule as SalesRuleModel
from sales_org.domain.sales_rule_normalization import (
    normalize_country_code,
    normalize_sales_rule_changes,
)
from sales_org.errors import DomainValidationError, DuplicateResourceError, NotFoundError

logger = logging.getLogger(__name__)


def _ensure_unique(
    db: Session, country: str, region: str | None, exclude_id: int | None = None
) -> None:
    existing = sales_rule_repo.get_sales_rule_by_country_region(
        db, country, region, exclude_id=exclude_id
    )
    if existing:
        raise DuplicateResourceError(
            f'A sales rule for country "{country}" and region '
            f'"{region if region is not None else "null"}" already exists'
        )


def lookup_sales_rule(
    db: Session, country: str | None, region: str | None = None
) -> SalesRuleModel:
    """
    Resolve the sales rule for an exact (country, region) match.

    - A missing region matches only country-wide rules (region IS NULL);
      an empty string is looked up as-is
    - Read-only

    Raises:
        DomainValidationError: If country is missing or empty
        NotFoundError: If no rule matches
    """
    if not country:
        raise DomainValidationError("Country code is required")

    rule = sales_rule_repo.get_sales_rule_by_country_region(db, country, region)
    if not rule:
        region_label = region if region is not None else "null"
        logger.debug("Lookup miss for country=%s region=%s", country, region_label)
        raise NotFoundError(
            f'No sales rule found for country="{country}", region="{region_label}"'
        )
    return rule


def get_sales_rule(db: Session, rule_id: int) -> SalesRuleModel:
    """
    Get a sales rule by ID.

    Raises:
        NotFoundError: If the rule doesn't exist
    """
    rule = sales_rule_repo.get_sales_rule_by_id(db, rule_id)
    if not rule:
        raise NotFoundError("Sales rule not found")
    return rule


def list_sales_rules(
    db: Session,
    page: int = 1,
    page_size: int = 100,
    country: str | None = None,
    region: str | None = None,
) -> tuple[list[SalesRuleModel], int]:
    """List sales rules, paginated.

    The country filter is matched against the stored (uppercase) form; an
    empty country means no filter. Region is matched exactly, "" included.
    """
    country = normalize_country_code(country) if country else None
    return sales_rule_repo.get_all_sales_rules_paginated(
        db, page=page, page_size=page_size, country=country, region=region
    )


def create_sales_rule(db: Session, data: dict[str, Any]) -> SalesRuleModel:
    """
    Create a sales rule.

    - Normalizes the country code to uppercase before persisting
    - Enforces uniqueness of (country, region)

    Raises:
        DuplicateResourceError: If a rule for (country, region) already exists
    """
    data = normalize_sales_rule_changes(dict(data))
    country = data["country"]
    region = data.get("region")

    _ensure_unique(db, country, region)

    rule = sales_rule_repo.create_sales_rule(
        db,
        country=country,
        region=region,
        sales_org=data["sales_org"],
        sales_rep_email=data["sales_rep_email"],
    )
    logger.info(
        "Created sales rule %s: %s/%s -> %s",
        rule.id,
        rule.country,
        rule.region,
        rule.sales_org,
    )
    return rule


def update_sales_rule(
    db: Session, rule_id: int, changes: dict[str, Any]
) -> SalesRuleModel:
    """
    Update a sales rule with the fields present in ``changes``.

    - Validates the rule exists
    - Normalizes the country code to uppercase when it is being changed
    - Enforces uniqueness of (country, region) when either is changed

    Raises:
        NotFoundError: If the rule doesn't exist
        DuplicateResourceError: If the new (country, region) is already taken
    """
    rule = sales_rule_repo.get_sales_rule_by_id(db, rule_id)
    if not rule:
        raise NotFoundError("Sales rule not found")

    changes = normalize_sales_rule_changes(dict(changes))

    if "country" in changes or "region" in changes:
        final_country = changes.get("country", rule.country)
        final_region = changes["region"] if "region" in changes else rule.region
        _ensure_unique(db, final_country, final_region, exclude_id=rule_id)

    rule = sales_rule_repo.update_sales_rule(db, rule, changes)
    logger.info(
        "Updated sales rule %s (%s): %s/%s -> %s",
        rule.id,
        ", ".join(sorted(changes)) or "no changes",
        rule.country,
        rule.region,
        rule.sales_org,
    )
    return rule


def delete_sales_rule(db: Session, rule_id: int) -> None:
    """
    Delete a sales rule.

    Raises:
        NotFoundError: If the rule doesn't exist
    """
    rule = sales_rule_repo.get_sales_rule_by_id(db, rule_id)
    if not rule:
        raise NotFoundError("Sales rule not found")

    sales_rule_repo.delete_sales_rule(db, rule)
    logger.info("Deleted sales rule %s", rule_id)
