"""
Seed data for development and testing.
Creates minimal initial data: organization, categories, items and a menu
for every weekday. No users: the first sign-up becomes the admin.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from lunch_api.models import Category, DayMenu, Item, Organization
from lunch_shared.config.constants import Weekday
from lunch_shared.config.logging import get_logger
from lunch_shared.infrastructure.db import safe_commit
from lunch_shared.utils.clock import local_date, start_of_day, utcnow, week_of

logger = get_logger(__name__)

DEFAULT_ORGANIZATION = "Demo Organization"

# Category name -> item names
CATALOG = {
    "soup": ["Tomato soup", "Chicken broth", "Mushroom cream"],
    "main": ["Grilled chicken", "Beef stroganoff", "Vegetable lasagna"],
    "dessert": ["Apple pie", "Chocolate mousse", "Fruit salad"],
}


def seed(db: Session) -> None:
    """
    Seed the database with initial data.
    Idempotent: only inserts if data doesn't exist.
    """
    if db.scalar(select(Organization.id).limit(1)):
        logger.info("Database already seeded, skipping")
        return

    logger.info("Seeding database")

    db.add(Organization(name=DEFAULT_ORGANIZATION))

    items_by_category: dict[str, list[Item]] = {}
    for category_name, item_names in CATALOG.items():
        category = Category(name=category_name)
        db.add(category)
        db.flush()
        items = [Item(name=name, category_id=category.id) for name in item_names]
        db.add_all(items)
        items_by_category[category_name] = items
    db.flush()

    # Menus take effect from the start of the current week
    monday = week_of(local_date(utcnow()))[0]
    published_at = start_of_day(monday)
    for day_id in sorted(Weekday.ALL):
        # Rotate one dish per course through the week
        items = [
            category_items[day_id % len(category_items)]
            for category_items in items_by_category.values()
        ]
        db.add(DayMenu(day_id=day_id, created_at=published_at, items=items))

    safe_commit(db)
    logger.info(
        "Database seeded",
        categories=len(CATALOG),
        day_menus=len(Weekday.ALL),
    )
