# storefront/crud/cart.py
import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from storefront.crud import product as crud_product
from storefront.db.upsert import dialect_insert
from storefront.models.cart import MAX_CART_QUANTITY, CartItem, WishlistItem
from storefront.models.user import generate_uuid

logger = logging.getLogger(__name__)

# --- Cart ---

def get_cart_items(db: Session, user_id: str) -> list[CartItem]:
    """All cart lines of the user, each with its product joined in."""
    return (
        db.query(CartItem)
        .filter(CartItem.user_id == user_id)
        .order_by(CartItem.created_at, CartItem.id)
        .all()
    )


def get_cart_item(db: Session, user_id: str, product_id: str) -> CartItem | None:
    return db.query(CartItem).filter_by(user_id=user_id, product_id=product_id).first()


def count_cart_items(db: Session, user_id: str) -> int:
    """Number of distinct lines in the cart."""
    return db.query(CartItem).filter(CartItem.user_id == user_id).count()


def add_cart_item(db: Session, user_id: str, product_id: str, quantity: int = 1) -> CartItem | None:
    """
    Adds `quantity` to the user's line for the product, creating the line
    if there is none. Insert-or-increment is one statement, so concurrent
    adds for the same pair cannot lose an update.
    """
    if quantity < 1 or quantity > MAX_CART_QUANTITY:
        logger.warning(f"Refusing to add quantity {quantity} of product {product_id} for user {user_id}.")
        return None

    if not crud_product.get_product_by_id(db, product_id):
        logger.warning(f"Cannot add unknown product {product_id} to cart of user {user_id}.")
        return None

    stmt = dialect_insert(db, CartItem).values(
        id=generate_uuid(),
        user_id=user_id,
        product_id=product_id,
        quantity=quantity,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=["user_id", "product_id"],
        set_={
            "quantity": CartItem.quantity + stmt.excluded.quantity,
            "updated_at": func.now(),
        },
        # The summed quantity must stay within MAX_CART_QUANTITY
        where=CartItem.quantity <= MAX_CART_QUANTITY - stmt.excluded.quantity,
    )
    result = db.execute(stmt)
    if result.rowcount == 0:
        db.rollback()
        logger.warning(f"Cart line of user {user_id} for product {product_id} would exceed {MAX_CART_QUANTITY}.")
        return None
    db.commit()
    return get_cart_item(db, user_id=user_id, product_id=product_id)


def set_cart_item_quantity(db: Session, user_id: str, product_id: str, quantity: int) -> CartItem | None:
    """
    Overwrites the quantity of an existing line. A quantity of zero or less
    removes the line and returns None; a missing line is a no-op.
    """
    if quantity <= 0:
        remove_cart_item(db, user_id=user_id, product_id=product_id)
        return None
    if quantity > MAX_CART_QUANTITY:
        logger.warning(f"Refusing quantity {quantity} of product {product_id} for user {user_id}.")
        return None

    updated = (
        db.query(CartItem)
        .filter_by(user_id=user_id, product_id=product_id)
        .update({"quantity": quantity, "updated_at": func.now()}, synchronize_session=False)
    )
    if not updated:
        db.rollback()
        return None

    db.commit()
    return get_cart_item(db, user_id=user_id, product_id=product_id)


def remove_cart_item(db: Session, user_id: str, product_id: str) -> bool:
    """Deletes one line. Returns whether a row was actually deleted."""
    deleted = (
        db.query(CartItem)
        .filter_by(user_id=user_id, product_id=product_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0


def clear_cart(db: Session, user_id: str) -> bool:
    """Deletes every line of the user's cart. Returns whether any were deleted."""
    deleted = db.query(CartItem).filter_by(user_id=user_id).delete(synchronize_session=False)
    db.commit()
    return deleted > 0

# --- Wishlist ---

def get_wishlist_items(db: Session, user_id: str) -> list[WishlistItem]:
    return (
        db.query(WishlistItem)
        .filter(WishlistItem.user_id == user_id)
        .order_by(WishlistItem.created_at, WishlistItem.id)
        .all()
    )


def get_wishlist_item(db: Session, user_id: str, product_id: str) -> WishlistItem | None:
    return db.query(WishlistItem).filter_by(user_id=user_id, product_id=product_id).first()


def count_wishlist_items(db: Session, user_id: str) -> int:
    return db.query(WishlistItem).filter(WishlistItem.user_id == user_id).count()


def add_wishlist_item(db: Session, user_id: str, product_id: str) -> WishlistItem | None:
    """Bookmarks a product. Adding it again returns the existing line unchanged."""
    if not crud_product.get_product_by_id(db, product_id):
        logger.warning(f"Cannot add unknown product {product_id} to wishlist of user {user_id}.")
        return None

    stmt = (
        dialect_insert(db, WishlistItem)
        .values(id=generate_uuid(), user_id=user_id, product_id=product_id)
        .on_conflict_do_nothing(index_elements=["user_id", "product_id"])
    )
    db.execute(stmt)
    db.commit()
    return get_wishlist_item(db, user_id=user_id, product_id=product_id)


def remove_wishlist_item(db: Session, user_id: str, product_id: str) -> bool:
    deleted = (
        db.query(WishlistItem)
        .filter_by(user_id=user_id, product_id=product_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0


def is_in_wishlist(db: Session, user_id: str, product_id: str) -> bool:
    """Checks whether a specific product is in the user's wishlist."""
    return get_wishlist_item(db, user_id=user_id, product_id=product_id) is not None
