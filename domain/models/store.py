"""
Grocery stores and the prices they charge for foods.
"""

from sqlalchemy import (
    Column,
    String,
    TIMESTAMP,
    ForeignKey,
    Numeric,
    Boolean,
    Uuid,
    UniqueConstraint,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class Store(Base):
    """Grocery store"""

    __tablename__ = "stores"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), unique=True, nullable=False)
    name_arabic = Column(String(255), nullable=False)
    logo_url = Column(String(500))
    website = Column(String(255))
    api_endpoint = Column(String(255))
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    prices = relationship(
        "FoodPrice", back_populates="store", cascade="all, delete-orphan"
    )


class FoodPrice(Base):
    """Price of a food at a store (one row per food/store pair)"""

    __tablename__ = "food_prices"
    __table_args__ = (
        UniqueConstraint("food_id", "store_id"),
        CheckConstraint("price >= 0", name="ck_food_prices_price_non_negative"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    food_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("foods.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    store_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("stores.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    price = Column(Numeric(10, 2), nullable=False)
    unit = Column(String(20), nullable=False, default="kg")
    last_updated = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), index=True
    )
    is_available = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    food = relationship("Food", back_populates="prices")
    store = relationship("Store", back_populates="prices")
