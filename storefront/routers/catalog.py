# storefront/routers/catalog.py

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from storefront.core import locales
from storefront.dependencies import get_db
from storefront.schemas.product import ProductListResponse, ProductResponse
from storefront.services import catalog as catalog_service

router = APIRouter()


@router.get("/products", response_model=ProductListResponse)
def get_all_products(
    category: Optional[str] = Query(None, description="Exact category to filter by"),
    featured: bool = Query(False, description="Only featured products"),
    limit: Optional[int] = Query(None, ge=1, description="Cap for the featured listing"),
    db: Session = Depends(get_db),
):
    """
    Public catalog listing. The demo catalog is seeded at startup, not here.
    """
    products = catalog_service.get_products(db, category=category, featured=featured, limit=limit)
    return ProductListResponse(products=products)


@router.get("/products/{product_id}", response_model=ProductResponse)
def get_single_product(product_id: str, db: Session = Depends(get_db)):
    product = catalog_service.get_product_by_id(db, product_id)
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=locales.ERROR_PRODUCT_NOT_FOUND)
    return ProductResponse(product=product)
