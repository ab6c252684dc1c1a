"""Store Service models package."""

from services.store_service.models.accounts import User
from services.store_service.models.catalog import Category, Product
from services.store_service.models.commerce import (
    Cart,
    CartItem,
    Order,
    OrderItem,
    StoreAuditLog,
    WishlistItem,
)
from services.store_service.models.content import Workout
from services.store_service.models.enums import (
    AddressType,
    AuditEntityType,
    OrderStatus,
    PaymentMethod,
    UserRole,
    VehicleType,
)

__all__ = [
    "AddressType",
    "AuditEntityType",
    "Cart",
    "CartItem",
    "Category",
    "Order",
    "OrderItem",
    "OrderStatus",
    "PaymentMethod",
    "Product",
    "StoreAuditLog",
    "User",
    "UserRole",
    "VehicleType",
    "WishlistItem",
    "Workout",
]
