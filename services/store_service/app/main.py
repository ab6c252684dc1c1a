"""FastAPI application for the Store Service."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from libs.common.config import get_settings
from libs.common.error_handler import add_exception_handlers
from libs.common.middleware import add_observability_middleware
from services.store_service.routers import (
    admin_catalog_router,
    admin_users_router,
    admin_workouts_router,
    cart_router,
    catalog_router,
    orders_router,
    users_router,
    wishlist_router,
    workouts_router,
)


def create_app() -> FastAPI:
    """Create and configure the Store Service FastAPI app."""
    settings = get_settings()
    app = FastAPI(
        title="Gym Store Service",
        version="0.1.0",
        description=(
            "Storefront for gym products - catalog, cart, checkout, "
            "order delivery, wishlists and workout videos."
        ),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Structured logging + request tracing
    add_observability_middleware(app)

    # Consistent {"detail": ...} error bodies
    add_exception_handlers(app)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "store"}

    # Storefront routes
    app.include_router(catalog_router, prefix="/api")
    app.include_router(cart_router, prefix="/api")
    app.include_router(orders_router, prefix="/api")
    app.include_router(wishlist_router, prefix="/api")
    app.include_router(users_router, prefix="/api")
    app.include_router(workouts_router, prefix="/api")

    # Admin routes
    app.include_router(admin_catalog_router, prefix="/api/admin")
    app.include_router(admin_users_router, prefix="/api/admin")
    app.include_router(admin_workouts_router, prefix="/api/admin")

    return app


app = create_app()
