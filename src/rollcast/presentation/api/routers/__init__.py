from rollcast.presentation.api.routers.estimates import router as estimates_router
from rollcast.presentation.api.routers.forecast import router as forecast_router
from rollcast.presentation.api.routers.imports import router as imports_router
from rollcast.presentation.api.routers.transactions import (
    router as transactions_router,
)

__all__ = [
    "estimates_router",
    "forecast_router",
    "imports_router",
    "transactions_router",
]
