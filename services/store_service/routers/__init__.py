"""Store service routers package."""

from services.store_service.routers.admin_catalog import router as admin_catalog_router
from services.store_service.routers.admin_users import router as admin_users_router
from services.store_service.routers.cart import router as cart_router
from services.store_service.routers.catalog import router as catalog_router
from services.store_service.routers.orders import router as orders_router
from services.store_service.routers.users import router as users_router
from services.store_service.routers.wishlist import router as wishlist_router
from services.store_service.routers.workouts import admin_router as admin_workouts_router
from services.store_service.routers.workouts import router as workouts_router

__all__ = [
    "admin_catalog_router",
    "admin_users_router",
    "admin_workouts_router",
    "cart_router",
    "catalog_router",
    "orders_router",
    "users_router",
    "wishlist_router",
    "workouts_router",
]
