import logging
from flatshare.extension import db
from flatshare.models import ProductSuggestion

logger = logging.getLogger(__name__)

DEFAULT_PRODUCTS = [
    "Apples", "Bananas", "Bread", "Butter", "Cheese", "Coffee", "Dish soap",
    "Eggs", "Flour", "Garbage bags", "Milk", "Olive oil", "Pasta", "Potatoes",
    "Rice", "Salt", "Sugar", "Tea", "Toilet paper", "Tomatoes",
]


def seed(products=None):
    """Insert catalog products that are not in the table yet. Returns the number added."""
    products = DEFAULT_PRODUCTS if products is None else products
    existing = {name.lower() for (name,) in db.session.query(ProductSuggestion.name).all()}

    added = 0
    for name in products:
        if name.lower() in existing:
            continue
        db.session.add(ProductSuggestion(name=name))
        existing.add(name.lower())
        added += 1

    db.session.commit()
    if added:
        logger.info(f"Seeded {added} product suggestion(s)")
    return added
