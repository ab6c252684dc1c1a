"""Seed script for store test data.

Creates an admin account, a handful of categories and products, and a sample
workout video so the checkout and delivery flows can be tried end-to-end.

Usage:
    python -m services.store_service.seed_store_data
"""

import asyncio
from decimal import Decimal

from libs.db.config import AsyncSessionLocal
from services.store_service.models import (
    Category,
    Product,
    User,
    UserRole,
    Workout,
)
from sqlalchemy import func, select


async def seed_store_data():
    async with AsyncSessionLocal() as db:
        print("Seeding store data...")

        # Check if data already exists
        count = (await db.execute(select(func.count(Category.id)))).scalar()
        if count:
            print(f"Store data already exists ({count} categories). Skipping seed.")
            return

        # =========================================================================
        # 1. ADMIN
        # =========================================================================
        admin = User(
            fname="Store",
            lname="Admin",
            email="admin@gymstore.local",
            role=UserRole.ADMIN,
        )
        db.add(admin)

        # =========================================================================
        # 2. CATEGORIES
        # =========================================================================
        categories = {
            "weights": Category(name="Weights"),
            "supplements": Category(name="Supplements"),
            "accessories": Category(name="Accessories"),
        }
        db.add_all(categories.values())
        await db.flush()

        # =========================================================================
        # 3. PRODUCTS
        # =========================================================================
        products = [
            Product(
                name="Hex Dumbbell 10kg",
                description="Rubber-coated hex dumbbell with knurled grip.",
                price=Decimal("1499.00"),
                stock=40,
                images=["dumbbell-10kg.jpg"],
                category_id=categories["weights"].id,
            ),
            Product(
                name="Olympic Barbell 20kg",
                description="2.2m chrome barbell rated to 300kg.",
                price=Decimal("8999.00"),
                stock=8,
                images=["barbell-20kg.jpg"],
                category_id=categories["weights"].id,
            ),
            Product(
                name="Whey Protein 1kg",
                description="Chocolate whey concentrate, 30 servings.",
                price=Decimal("2199.00"),
                stock=60,
                images=["whey-1kg.jpg"],
                category_id=categories["supplements"].id,
            ),
            Product(
                name="Lifting Straps",
                description="Padded cotton straps, pair.",
                price=Decimal("399.00"),
                stock=120,
                images=["straps.jpg"],
                category_id=categories["accessories"].id,
            ),
        ]
        db.add_all(products)

        # =========================================================================
        # 4. WORKOUT VIDEOS
        # =========================================================================
        db.add(
            Workout(
                title="Beginner Full Body",
                description="A 30 minute dumbbell routine.",
                category="strength",
                video_url="/uploads/videos/beginner-full-body.mp4",
            )
        )

        await db.commit()
        print("=" * 60)
        print("Store data seeded successfully!")
        print("=" * 60)
        print(f"  Admin: {admin.email} ({admin.id})")
        print(f"  Categories: {len(categories)}")
        print(f"  Products: {len(products)}")
        print("=" * 60)


if __name__ == "__main__":
    asyncio.run(seed_store_data())
