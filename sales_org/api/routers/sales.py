from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from sales_org.api.deps import get_db
from sales_org.schemas.common import ErrorResponse, PaginatedResponse
from sales_org.schemas.sales_rule import (
    LookupBody,
    LookupResponse,
    SalesRule,
    SalesRuleCreate,
    SalesRuleUpdate,
)
from sales_org.services.sales_rule import (
    create_sales_rule,
    delete_sales_rule,
    get_sales_rule,
    list_sales_rules,
    lookup_sales_rule,
    update_sales_rule,
)

router = APIRouter(prefix="/sales", tags=["sales"])


@router.post(
    "/lookup",
    response_model=LookupResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def lookup(body: LookupBody, db: Session = Depends(get_db)):
    """
    Resolve the sales organization and representative for a country/region.

    Matching is exact: without a region only country-wide rules match.
    Returns 400 when the country is missing and 404 when no rule matches.
    """
    rule = lookup_sales_rule(db, body.request.country, body.request.region)
    return LookupResponse.model_validate(rule)


@router.post(
    "/rules",
    response_model=SalesRule,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
def create_new_sales_rule(
    rule_data: SalesRuleCreate,
    db: Session = Depends(get_db),
):
    """
    Create a new sales rule. The country code is stored uppercase.
    """
    rule = create_sales_rule(db, rule_data.model_dump())
    return SalesRule.model_validate(rule)


@router.get("/rules", response_model=PaginatedResponse[SalesRule])
def get_all_sales_rules(
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: int = Query(100, ge=1, le=1000, description="Number of items per page"),
    country: str | None = Query(None, description="Filter by country code (exact, case-insensitive)"),
    region: str | None = Query(None, description="Filter by region (exact match)"),
    db: Session = Depends(get_db),
):
    """
    Get all sales rules with pagination.
    """
    rules, total = list_sales_rules(
        db, page=page, page_size=page_size, country=country, region=region
    )
    return PaginatedResponse[SalesRule].build(
        [SalesRule.model_validate(rule) for rule in rules],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/rules/{rule_id}", response_model=SalesRule)
def get_sales_rule_by_id(rule_id: int, db: Session = Depends(get_db)):
    rule = get_sales_rule(db, rule_id)
    return SalesRule.model_validate(rule)


@router.api_route(
    "/rules/{rule_id}", methods=["PUT", "PATCH"], response_model=SalesRule
)
def update_sales_rule_by_id(
    rule_id: int,
    rule_data: SalesRuleUpdate,
    db: Session = Depends(get_db),
):
    """
    Update a sales rule. Only the fields sent in the body are changed.
    """
    rule = update_sales_rule(db, rule_id, rule_data.model_dump(exclude_unset=True))
    return SalesRule.model_validate(rule)


@router.delete("/rules/{rule_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sales_rule_by_id(rule_id: int, db: Session = Depends(get_db)):
    delete_sales_rule(db, rule_id)
