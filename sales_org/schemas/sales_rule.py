from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from sales_org.domain.sales_rule_normalization import COUNTRY_CODE_PATTERN


class SalesRule(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    country: str
    region: str | None = None
    sales_org: str = Field(..., alias="salesOrg")
    sales_rep_email: str = Field(..., alias="salesRepEmail")


class SalesRuleCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    country: str = Field(..., pattern=COUNTRY_CODE_PATTERN)
    region: str | None = Field(None, max_length=100)
    sales_org: str = Field(..., alias="salesOrg", min_length=1, max_length=50)
    sales_rep_email: EmailStr = Field(..., alias="salesRepEmail")


class SalesRuleUpdate(BaseModel):
    """Partial update. Only the fields present in the request body are changed.

    ``region`` may be sent as null to turn the rule into a country-wide one;
    the other fields are required columns and cannot be cleared.
    """

    model_config = ConfigDict(populate_by_name=True)

    country: str | None = Field(None, pattern=COUNTRY_CODE_PATTERN)
    region: str | None = Field(None, max_length=100)
    sales_org: str | None = Field(
        None, alias="salesOrg", min_length=1, max_length=50
    )
    sales_rep_email: EmailStr | None = Field(None, alias="salesRepEmail")

    @field_validator("country", "sales_org", "sales_rep_email")
    @classmethod
    def reject_explicit_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class LookupRequest(BaseModel):
    # Both optional at the schema level: a missing country is reported as a
    # 400 by the lookup service rather than a 422 from request parsing.
    country: str | None = None
    region: str | None = None


class LookupBody(BaseModel):
    request: LookupRequest = Field(default_factory=LookupRequest)

    @field_validator("request", mode="before")
    @classmethod
    def null_request_is_empty(cls, v):
        # {"request": null} is a request without a country, not a malformed body
        if v is None:
            return {}
        return v


class LookupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    sales_org: str = Field(..., alias="salesOrg")
    sales_rep_email: str = Field(..., alias="salesRepEmail")
