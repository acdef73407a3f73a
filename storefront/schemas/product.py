# storefront/schemas/product.py
from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer

# Prices are stored as NUMERIC and rendered as JSON numbers
Money = Annotated[Decimal, PlainSerializer(lambda v: float(v), return_type=float, when_used="json")]


class Product(BaseModel):
    id: str
    name: str
    description: str
    price: Money
    image_url: str
    category: str
    stock: int
    featured: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProductResponse(BaseModel):
    product: Product


class ProductListResponse(BaseModel):
    products: List[Product]
