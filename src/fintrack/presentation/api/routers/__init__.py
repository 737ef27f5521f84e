from fintrack.presentation.api.routers.auth import router as auth_router
from fintrack.presentation.api.routers.categories import router as categories_router
from fintrack.presentation.api.routers.recurring import router as recurring_router
from fintrack.presentation.api.routers.stats import router as stats_router
from fintrack.presentation.api.routers.transactions import (
    router as transactions_router,
)

__all__ = [
    "auth_router",
    "categories_router",
    "recurring_router",
    "stats_router",
    "transactions_router",
]
