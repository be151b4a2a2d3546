from sales_org.db.models.sales_rule import SalesRule

__all__ = ["SalesRule"]
