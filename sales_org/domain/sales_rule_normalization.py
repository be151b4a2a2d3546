from __future__ import annotations

from typing import Any

# Two ASCII letters, any case. Casing is canonicalized by the hook below,
# so request schemas accept "fr" as well as "FR".
COUNTRY_CODE_PATTERN = r"^[A-Za-z]{2}$"


def normalize_country_code(country: str) -> str:
    return country.upper()


def normalize_sales_rule_changes(changes: dict[str, Any]) -> dict[str, Any]:
    """Canonicalize a sales rule change set right before it is persisted.

    Applied to both creates and updates. When ``country`` is part of the
    change set it is rewritten to uppercase in place; every other key is left
    alone, and a change set without ``country`` passes through unchanged.

    The hook never rejects data: format checks on the country code belong to
    the request schemas.
    """
    country = changes.get("country")
    if country:
        changes["country"] = normalize_country_code(country)
    return changes
