# storefront/services/cart.py

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from storefront.crud import cart as crud_cart
from storefront.crud import product as crud_product
from storefront.schemas.cart import (
    CartItemResponse, CartResponse, WishlistItemResponse, WishlistResponse
)
from storefront.schemas.user import UserCounters

logger = logging.getLogger(__name__)

# --- Cart ---

def get_user_cart(db: Session, user_id: str) -> CartResponse:
    """
    Cart lines with their products. Lines whose product is gone are kept
    with `product=None` and left out of the total.
    """
    items = [CartItemResponse.model_validate(i) for i in crud_cart.get_cart_items(db, user_id=user_id)]
    total = sum(
        (i.product.price * i.quantity for i in items if i.product is not None),
        Decimal("0.00"),
    )
    return CartResponse(items=items, count=len(items), total=total)


def get_available_stock(db: Session, user_id: str, product_id: str, quantity: int, increment: bool) -> int | None:
    """
    Returns the product's stock when the requested quantity would exceed it,
    otherwise None. With `increment`, the quantity already in the cart counts.
    """
    product = crud_product.get_product_by_id(db, product_id)
    if not product:
        return None

    requested = quantity
    if increment:
        existing = crud_cart.get_cart_item(db, user_id=user_id, product_id=product_id)
        if existing:
            requested += existing.quantity
    return product.stock if requested > product.stock else None


def add_to_cart(db: Session, user_id: str, product_id: str, quantity: int = 1) -> CartItemResponse | None:
    item = crud_cart.add_cart_item(db, user_id=user_id, product_id=product_id, quantity=quantity)
    if not item:
        return None
    logger.info(f"Cart of user {user_id}: product {product_id} now at quantity {item.quantity}.")
    return CartItemResponse.model_validate(item)


def update_cart_item_quantity(db: Session, user_id: str, product_id: str, quantity: int) -> CartItemResponse | None:
    item = crud_cart.set_cart_item_quantity(db, user_id=user_id, product_id=product_id, quantity=quantity)
    if not item:
        if quantity <= 0:
            logger.info(f"Cart of user {user_id}: product {product_id} removed via quantity {quantity}.")
        return None
    logger.info(f"Cart of user {user_id}: product {product_id} set to quantity {item.quantity}.")
    return CartItemResponse.model_validate(item)


def remove_from_cart(db: Session, user_id: str, product_id: str) -> bool:
    removed = crud_cart.remove_cart_item(db, user_id=user_id, product_id=product_id)
    if removed:
        logger.info(f"Cart of user {user_id}: product {product_id} removed.")
    return removed


def clear_cart(db: Session, user_id: str) -> bool:
    cleared = crud_cart.clear_cart(db, user_id=user_id)
    if cleared:
        logger.info(f"Cart of user {user_id} emptied.")
    return cleared

# --- Wishlist ---

def get_user_wishlist(db: Session, user_id: str) -> WishlistResponse:
    items = crud_cart.get_wishlist_items(db, user_id=user_id)
    return WishlistResponse(items=[WishlistItemResponse.model_validate(i) for i in items])


def add_to_wishlist(db: Session, user_id: str, product_id: str) -> WishlistItemResponse | None:
    item = crud_cart.add_wishlist_item(db, user_id=user_id, product_id=product_id)
    if not item:
        return None
    logger.info(f"Wishlist of user {user_id}: product {product_id} bookmarked.")
    return WishlistItemResponse.model_validate(item)


def remove_from_wishlist(db: Session, user_id: str, product_id: str) -> bool:
    removed = crud_cart.remove_wishlist_item(db, user_id=user_id, product_id=product_id)
    if removed:
        logger.info(f"Wishlist of user {user_id}: product {product_id} removed.")
    return removed


def is_in_wishlist(db: Session, user_id: str, product_id: str) -> bool:
    return crud_cart.is_in_wishlist(db, user_id=user_id, product_id=product_id)


def get_user_counters(db: Session, user_id: str) -> UserCounters:
    return UserCounters(
        cart_items_count=crud_cart.count_cart_items(db, user_id=user_id),
        wishlist_items_count=crud_cart.count_wishlist_items(db, user_id=user_id),
    )
