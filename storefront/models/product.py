# storefront/models/product.py
from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, String, Text, func, CheckConstraint

from storefront.db.session import Base
from storefront.models.user import generate_uuid


class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    # Unique so that seeding can use INSERT .. ON CONFLICT DO NOTHING
    name = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    image_url = Column(String, nullable=False)
    category = Column(String, index=True, nullable=False)
    stock = Column(Integer, nullable=False, default=0, server_default="0")
    featured = Column(Boolean, nullable=False, default=False, server_default="0")

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
    )
