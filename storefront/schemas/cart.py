# storefront/schemas/cart.py
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from storefront.models.cart import MAX_CART_QUANTITY

from .product import Money, Product


# Request body for adding a product to the cart
class CartItemCreate(BaseModel):
    product_id: str = Field(..., min_length=1, alias="productId")
    quantity: int = Field(1, gt=0, le=MAX_CART_QUANTITY)

    model_config = ConfigDict(populate_by_name=True)


# Request body for overwriting a line's quantity; zero or less removes the line
class CartItemQuantityUpdate(BaseModel):
    product_id: str = Field(..., min_length=1, alias="productId")
    quantity: int = Field(..., le=MAX_CART_QUANTITY)

    model_config = ConfigDict(populate_by_name=True)


class CartItemResponse(BaseModel):
    id: str
    product_id: str
    quantity: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    # None when the product is no longer available
    product: Optional[Product] = None

    model_config = ConfigDict(from_attributes=True)


class CartResponse(BaseModel):
    items: List[CartItemResponse]
    count: int
    total: Money = Decimal("0.00")


class CartItemMutationResponse(BaseModel):
    success: bool
    message: str
    item: Optional[CartItemResponse] = None


class MutationResponse(BaseModel):
    success: bool
    message: str


class WishlistItemCreate(BaseModel):
    product_id: str = Field(..., min_length=1, alias="productId")

    model_config = ConfigDict(populate_by_name=True)


class WishlistItemResponse(BaseModel):
    id: str
    product_id: str
    created_at: Optional[datetime] = None
    product: Optional[Product] = None

    model_config = ConfigDict(from_attributes=True)


class WishlistResponse(BaseModel):
    items: List[WishlistItemResponse]


class WishlistItemMutationResponse(BaseModel):
    success: bool
    message: str
    item: Optional[WishlistItemResponse] = None


class WishlistContainsResponse(BaseModel):
    in_wishlist: bool = Field(alias="inWishlist")

    model_config = ConfigDict(populate_by_name=True)
