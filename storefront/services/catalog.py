# storefront/services/catalog.py

import logging

from sqlalchemy.orm import Session

from storefront.core.config import settings
from storefront.crud import product as crud_product
from storefront.schemas.product import Product

logger = logging.getLogger(__name__)


def get_product_by_id(db: Session, product_id: str) -> Product | None:
    db_product = crud_product.get_product_by_id(db, product_id)
    return Product.model_validate(db_product) if db_product else None


def get_products(
    db: Session,
    category: str | None = None,
    featured: bool = False,
    limit: int | None = None,
) -> list[Product]:
    """
    Lists the catalog. `featured` wins over `category`; with neither, the
    whole catalog is returned.
    """
    if featured:
        db_products = crud_product.get_featured_products(db, limit=limit or settings.FEATURED_DEFAULT_LIMIT)
    elif category:
        db_products = crud_product.get_products_by_category(db, category)
    else:
        db_products = crud_product.get_products(db)
    return [Product.model_validate(p) for p in db_products]
