# storefront/routers/user.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.dependencies import get_current_user_id, get_db
from storefront.schemas.user import UserCounters
from storefront.services import cart as cart_service

router = APIRouter()


@router.get("/users/me/counters", response_model=UserCounters)
def get_user_counters(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Badge counts for the navigation bar: cart lines and wishlist items."""
    return cart_service.get_user_counters(db, user_id)
