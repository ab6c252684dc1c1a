"""Store catalog models: categories and products."""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from libs.common.datetime_utils import utc_now
from libs.db.base import Base
from libs.db.types import JSONType
from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy import Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship


class Category(Base):
    """Product categories (e.g., 'Dumbbells', 'Supplements', 'Apparel')."""

    __tablename__ = "store_categories"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )

    products = relationship("Product", back_populates="category")

    def __repr__(self):
        return f"<Category {self.name}>"


class Product(Base):
    """Catalog products.

    Not versioned: orders snapshot name, price and image at purchase time.
    """

    __tablename__ = "store_products"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, default=0, server_default="0")

    # Paths relative to the uploads directory, or inline data URIs
    images: Mapped[list] = mapped_column(JSONType, default=list)

    category_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("store_categories.id", ondelete="SET NULL"),
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    __table_args__ = (
        CheckConstraint("stock >= 0", name="product_stock_non_negative"),
        CheckConstraint("price >= 0", name="product_price_non_negative"),
    )

    category = relationship("Category", back_populates="products")

    @property
    def first_image(self) -> Optional[str]:
        return self.images[0] if self.images else None

    def __repr__(self):
        return f"<Product {self.name}>"
