# storefront/data/seed.py
import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from storefront.crud import product as crud_product
from storefront.db.upsert import dialect_insert
from storefront.models.product import Product
from storefront.models.user import generate_uuid

logger = logging.getLogger(__name__)

DEMO_PRODUCTS = [
    {
        "name": "Basic White Shirt",
        "description": "Basic cotton shirt in white, made for everyday wear.",
        "price": Decimal("69.90"),
        "image_url": "/products/camisa-basica-branca.jpg",
        "category": "basic",
        "stock": 100,
        "featured": True,
    },
    {
        "name": "Black Polo Shirt",
        "description": "Black polo shirt for casual and semi-formal occasions.",
        "price": Decimal("89.90"),
        "image_url": "/products/camisa-polo-preta.jpg",
        "category": "polo",
        "stock": 80,
        "featured": True,
    },
    {
        "name": "Slim Dress Shirt",
        "description": "Slim-fit dress shirt in fine cotton, suited to the office.",
        "price": Decimal("129.90"),
        "image_url": "/products/camisa-social-slim.jpg",
        "category": "dress",
        "stock": 50,
        "featured": True,
    },
    {
        "name": "Tropical Print Shirt",
        "description": "Shirt with a tropical print for relaxed occasions.",
        "price": Decimal("99.90"),
        "image_url": "/products/camisa-estampada.jpg",
        "category": "casual",
        "stock": 60,
        "featured": True,
    },
    {
        "name": "Denim Shirt",
        "description": "Light denim shirt for a modern, laid-back look.",
        "price": Decimal("119.90"),
        "image_url": "/products/camisa-jeans.jpg",
        "category": "casual",
        "stock": 45,
        "featured": False,
    },
    {
        "name": "Beige Linen Shirt",
        "description": "Beige linen shirt, cool and elegant for hot days.",
        "price": Decimal("149.90"),
        "image_url": "/products/camisa-linho.jpg",
        "category": "casual",
        "stock": 40,
        "featured": True,
    },
    {
        "name": "Red Plaid Shirt",
        "description": "Red and black plaid shirt, classic and versatile.",
        "price": Decimal("109.90"),
        "image_url": "/products/camisa-xadrez.jpg",
        "category": "casual",
        "stock": 55,
        "featured": False,
    },
    {
        "name": "Grey Henley Shirt",
        "description": "Grey henley-style shirt, casual and modern.",
        "price": Decimal("79.90"),
        "image_url": "/products/camisa-henley.jpg",
        "category": "casual",
        "stock": 60,
        "featured": False,
    },
    {
        "name": "Blue Oxford Shirt",
        "description": "Classic blue oxford shirt for many occasions.",
        "price": Decimal("119.90"),
        "image_url": "/products/camisa-oxford.jpg",
        "category": "dress",
        "stock": 70,
        "featured": True,
    },
    {
        "name": "Green Flannel Shirt",
        "description": "Green flannel shirt, warm and comfortable.",
        "price": Decimal("99.90"),
        "image_url": "/products/camisa-flanela.jpg",
        "category": "casual",
        "stock": 50,
        "featured": False,
    },
    {
        "name": "Basic Black Shirt",
        "description": "Basic cotton shirt in black, a wardrobe essential.",
        "price": Decimal("69.90"),
        "image_url": "/products/camisa-basica-preta.jpg",
        "category": "basic",
        "stock": 90,
        "featured": True,
    },
    {
        "name": "Striped Short Sleeve Shirt",
        "description": "Short sleeve striped shirt for warm days.",
        "price": Decimal("79.90"),
        "image_url": "/products/camisa-listrada.jpg",
        "category": "casual",
        "stock": 65,
        "featured": False,
    },
]


def seed_if_empty(db: Session) -> int:
    """
    Populates the demo catalog once. Returns the number of products inserted.

    The emptiness check skips the work on every later call; the unique
    product name plus ON CONFLICT DO NOTHING keeps two racing first calls
    from inserting duplicates.
    """
    before = crud_product.count_products(db)
    if before > 0:
        return 0

    rows = [{"id": generate_uuid(), **product} for product in DEMO_PRODUCTS]
    stmt = dialect_insert(db, Product).values(rows).on_conflict_do_nothing(index_elements=["name"])
    db.execute(stmt)
    db.commit()

    inserted = crud_product.count_products(db) - before
    logger.info(f"Catalog seeded with {inserted} demo products.")
    return inserted
