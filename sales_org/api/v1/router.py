from fastapi import APIRouter

from sales_org.api.routers import sales

api_router = APIRouter()

api_router.include_router(sales.router)
