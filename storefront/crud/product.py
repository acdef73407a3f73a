# storefront/crud/product.py
from decimal import Decimal

from sqlalchemy.orm import Session

from storefront.models.product import Product


def get_product_by_id(db: Session, product_id: str) -> Product | None:
    return db.query(Product).filter(Product.id == product_id).first()


def get_products(db: Session) -> list[Product]:
    """Full scan of the catalog."""
    return db.query(Product).all()


def get_featured_products(db: Session, limit: int = 8) -> list[Product]:
    return db.query(Product).filter(Product.featured.is_(True)).limit(limit).all()


def get_products_by_category(db: Session, category: str) -> list[Product]:
    return db.query(Product).filter(Product.category == category).all()


def count_products(db: Session) -> int:
    return db.query(Product).count()


def create_product(
    db: Session,
    name: str,
    description: str,
    price: Decimal,
    image_url: str,
    category: str,
    stock: int = 0,
    featured: bool = False,
) -> Product:
    product = Product(
        name=name,
        description=description,
        price=price,
        image_url=image_url,
        category=category,
        stock=stock,
        featured=featured,
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product
