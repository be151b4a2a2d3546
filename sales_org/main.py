import logging
from urllib.parse import urlparse

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from sales_org.api.exception_handlers import register_exception_handlers
from sales_org.api.v1.router import api_router
from sales_org.core.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(title="Sales Organization Service")

if settings.admin_ui_url:
    parsed = urlparse(settings.admin_ui_url)
    origin = f"{parsed.scheme}://{parsed.netloc}"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
def health():
    return {"status": "ok"}
