# storefront/routers/cart.py

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from storefront.core import locales
from storefront.core.config import settings
from storefront.dependencies import get_current_user_id, get_db
from storefront.schemas.cart import (
    CartItemCreate, CartItemMutationResponse, CartItemQuantityUpdate, CartResponse,
    MutationResponse, WishlistContainsResponse, WishlistItemCreate,
    WishlistItemMutationResponse, WishlistResponse,
)
from storefront.services import cart as cart_service

router = APIRouter()


def _ensure_stock(db: Session, user_id: str, product_id: str, quantity: int, increment: bool) -> None:
    """Refuses quantities above stock, only when CART_ENFORCE_STOCK is on."""
    if not settings.CART_ENFORCE_STOCK:
        return
    available = cart_service.get_available_stock(db, user_id, product_id, quantity, increment=increment)
    if available is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=locales.ERROR_NOT_ENOUGH_STOCK.format(available_quantity=available),
        )


# --- Cart endpoints ---

@router.get("/cart", response_model=CartResponse)
def get_cart(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Contents of the current user's cart."""
    return cart_service.get_user_cart(db, user_id)


@router.post("/cart", response_model=CartItemMutationResponse)
def add_cart_item(
    item_data: CartItemCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Adds the quantity to the product's line, creating the line if needed."""
    _ensure_stock(db, user_id, item_data.product_id, item_data.quantity, increment=True)

    item = cart_service.add_to_cart(db, user_id, item_data.product_id, item_data.quantity)
    if not item:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=locales.ERROR_CANNOT_ADD_TO_CART)
    return CartItemMutationResponse(success=True, message=locales.SUCCESS_ADDED_TO_CART, item=item)


@router.put("/cart", response_model=CartItemMutationResponse)
def update_cart_item(
    item_data: CartItemQuantityUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Overwrites a line's quantity. Zero or less removes the line.
    """
    if item_data.quantity > 0:
        _ensure_stock(db, user_id, item_data.product_id, item_data.quantity, increment=False)

    item = cart_service.update_cart_item_quantity(db, user_id, item_data.product_id, item_data.quantity)
    if not item and item_data.quantity > 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=locales.ERROR_CANNOT_UPDATE_CART_ITEM)

    message = locales.SUCCESS_CART_ITEM_UPDATED if item_data.quantity > 0 else locales.SUCCESS_ITEM_REMOVED_FROM_CART
    return CartItemMutationResponse(success=True, message=message, item=item)


@router.delete("/cart", response_model=MutationResponse)
def delete_cart_items(
    product_id: Optional[str] = Query(None, alias="productId"),
    clear: bool = Query(False),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Removes one product (`?productId=`) or empties the cart (`?clear=true`)."""
    if clear:
        success = cart_service.clear_cart(db, user_id)
        message = locales.SUCCESS_CART_CLEARED if success else locales.FAILURE_CART_NOT_CLEARED
        return MutationResponse(success=success, message=message)

    if product_id:
        success = cart_service.remove_from_cart(db, user_id, product_id)
        message = locales.SUCCESS_ITEM_REMOVED_FROM_CART if success else locales.FAILURE_ITEM_NOT_REMOVED_FROM_CART
        return MutationResponse(success=success, message=message)

    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=locales.ERROR_CART_TARGET_REQUIRED)


# --- Wishlist endpoints ---

@router.get("/wishlist", response_model=WishlistResponse)
def get_wishlist(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return cart_service.get_user_wishlist(db, user_id)


@router.post("/wishlist", response_model=WishlistItemMutationResponse)
def add_wishlist_item(
    item_data: WishlistItemCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Bookmarks a product. Repeating the call is harmless."""
    item = cart_service.add_to_wishlist(db, user_id, item_data.product_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=locales.ERROR_CANNOT_ADD_TO_WISHLIST)
    return WishlistItemMutationResponse(success=True, message=locales.SUCCESS_ADDED_TO_WISHLIST, item=item)


@router.delete("/wishlist", response_model=MutationResponse)
def remove_wishlist_item(
    product_id: str = Query(..., alias="productId", min_length=1),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    success = cart_service.remove_from_wishlist(db, user_id, product_id)
    if not success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=locales.ERROR_ITEM_NOT_IN_WISHLIST)
    return MutationResponse(success=True, message=locales.SUCCESS_REMOVED_FROM_WISHLIST)


@router.get("/wishlist/{product_id}", response_model=WishlistContainsResponse)
def check_wishlist_item(
    product_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return WishlistContainsResponse(in_wishlist=cart_service.is_in_wishlist(db, user_id, product_id))
