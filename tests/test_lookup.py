import pytest
from sqlalchemy import text
from sqlalchemy.orm import Session

from sales_org.errors import DomainValidationError, NotFoundError
from sales_org.services.sales_rule import lookup_sales_rule


LOOKUP_URL = "/api/v1/sales/lookup"


# ============================================================================
# LOOKUP API TESTS
# ============================================================================


def test_lookup_country_wide_rule(client, db: Session, make_rule):
    """Test lookup without region returns the country-wide rule."""
    make_rule(country="FR", region=None, sales_org="S1", sales_rep_email="a@x.com")

    response = client.post(LOOKUP_URL, json={"request": {"country": "FR"}})

    assert response.status_code == 200
    assert response.json() == {"salesOrg": "S1", "salesRepEmail": "a@x.com"}


def test_lookup_explicit_null_region(client, db: Session, make_rule):
    """Test an explicit null region behaves like a missing one."""
    make_rule(country="FR", region=None, sales_org="S1", sales_rep_email="a@x.com")

    response = client.post(
        LOOKUP_URL, json={"request": {"country": "FR", "region": None}}
    )

    assert response.status_code == 200
    assert response.json()["salesOrg"] == "S1"


def test_lookup_with_region(client, db: Session, make_rule):
    """Test lookup with region picks the regional rule over the country-wide one."""
    make_rule(country="DE", region=None, sales_org="S-DE", sales_rep_email="de@x.com")
    make_rule(
        country="DE", region="BY", sales_org="S-BY", sales_rep_email="by@x.com"
    )

    response = client.post(
        LOOKUP_URL, json={"request": {"country": "DE", "region": "BY"}}
    )

    assert response.status_code == 200
    assert response.json() == {"salesOrg": "S-BY", "salesRepEmail": "by@x.com"}


def test_lookup_regional_rule_does_not_match_missing_region(
    client, db: Session, make_rule
):
    """Test null and a concrete region are distinct keys."""
    make_rule(country="FR", region="EU", sales_org="S1", sales_rep_email="a@x.com")

    response = client.post(LOOKUP_URL, json={"request": {"country": "FR"}})

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"
    assert 'country="FR"' in response.json()["detail"]
    assert 'region="null"' in response.json()["detail"]


def test_lookup_unknown_region_does_not_fall_back(client, db: Session, make_rule):
    """Test an unmatched region does not fall back to the country-wide rule."""
    make_rule(country="FR", region=None)

    response = client.post(
        LOOKUP_URL, json={"request": {"country": "FR", "region": "IDF"}}
    )

    assert response.status_code == 404
    assert 'region="IDF"' in response.json()["detail"]


def test_lookup_empty_region_is_not_null(client, db: Session, make_rule):
    """Test an empty string region is not treated as a missing region."""
    make_rule(country="FR", region=None)

    response = client.post(
        LOOKUP_URL, json={"request": {"country": "FR", "region": ""}}
    )

    assert response.status_code == 404


def test_lookup_empty_region_matches_empty_region_rule(
    client, db: Session, make_rule
):
    """Test an empty string region matches a rule stored with an empty region."""
    make_rule(country="FR", region="", sales_org="S-EMPTY")

    response = client.post(
        LOOKUP_URL, json={"request": {"country": "FR", "region": ""}}
    )

    assert response.status_code == 200
    assert response.json()["salesOrg"] == "S-EMPTY"


def test_lookup_not_found(client, db: Session):
    """Test lookup for a country without rules returns 404 naming the country."""
    response = client.post(LOOKUP_URL, json={"request": {"country": "JP"}})

    assert response.status_code == 404
    data = response.json()
    assert data["code"] == "NOT_FOUND"
    assert "JP" in data["detail"]


def test_lookup_is_case_sensitive(client, db: Session, make_rule):
    """Test lookup matches the country code exactly as given."""
    make_rule(country="FR", region=None)

    response = client.post(LOOKUP_URL, json={"request": {"country": "fr"}})

    assert response.status_code == 404


def test_lookup_missing_country(client, db: Session):
    """Test lookup without country returns 400."""
    response = client.post(LOOKUP_URL, json={"request": {"region": "EU"}})

    assert response.status_code == 400
    assert response.json() == {
        "detail": "Country code is required",
        "code": "VALIDATION_ERROR",
    }


@pytest.mark.parametrize(
    "body",
    [
        {"request": {"country": ""}},
        {"request": {"country": None}},
        {"request": {}},
        {"request": None},
        {},
    ],
)
def test_lookup_empty_country(client, db: Session, body):
    """Test every form of missing country returns 400."""
    response = client.post(LOOKUP_URL, json=body)

    assert response.status_code == 400
    assert response.json()["detail"] == "Country code is required"


def test_lookup_returns_only_org_and_email(client, db: Session, make_rule):
    """Test the lookup response omits id, country and region."""
    make_rule(country="ES", region="CAT", sales_org="S-CAT", sales_rep_email="c@x.com")

    response = client.post(
        LOOKUP_URL, json={"request": {"country": "ES", "region": "CAT"}}
    )

    assert response.status_code == 200
    assert set(response.json()) == {"salesOrg", "salesRepEmail"}


# ============================================================================
# LOOKUP SERVICE TESTS
# ============================================================================


def test_lookup_service_validates_before_querying(monkeypatch, db: Session):
    """Test a missing country fails before the repository is queried."""
    import sales_org.repositories.sales_rule as sales_rule_repo

    def fail(*args, **kwargs):
        raise AssertionError("repository must not be queried")

    monkeypatch.setattr(sales_rule_repo, "get_sales_rule_by_country_region", fail)

    with pytest.raises(DomainValidationError, match="Country code is required"):
        lookup_sales_rule(db, None)


def test_lookup_service_not_found(db: Session):
    with pytest.raises(NotFoundError) as exc_info:
        lookup_sales_rule(db, "PT", "NORTE")
    assert str(exc_info.value) == (
        'No sales rule found for country="PT", region="NORTE"'
    )


def test_lookup_service_duplicates_resolve_to_oldest(db: Session, make_rule):
    """Test duplicated rules from a database without the unique indexes resolve to the lowest id."""
    db.execute(text("DROP INDEX uq_sales_rules_country_null_region"))
    db.commit()

    first = make_rule(country="FR", region=None, sales_org="FIRST")
    make_rule(country="FR", region=None, sales_org="SECOND")

    rule = lookup_sales_rule(db, "FR")

    assert rule.id == first.id
    assert rule.sales_org == "FIRST"
