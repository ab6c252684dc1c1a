"""Enum definitions for store service models."""

import enum


def enum_values(enum_cls):
    """Return persistent DB values for SAEnum mappings."""
    return [member.value for member in enum_cls]


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    USER = "user"
    DELIVERY_BOY = "delivery_boy"


class VehicleType(str, enum.Enum):
    BIKE = "bike"
    SCOOTER = "scooter"
    CAR = "car"


class OrderStatus(str, enum.Enum):
    PLACED = "placed"
    SHIPPED = "shipped"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentMethod(str, enum.Enum):
    CARD = "card"
    COD = "cod"
    UPI = "upi"
    TEST_CARD = "test_card"
    TEST_UPI = "test_upi"


class AddressType(str, enum.Enum):
    HOME = "home"
    WORK = "work"


class AuditEntityType(str, enum.Enum):
    PRODUCT = "product"
    ORDER = "order"
    USER = "user"
