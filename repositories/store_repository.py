"""
Store Repository - Data access layer for stores and food prices
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Store, FoodPrice


class StoreRepository(BaseRepository[Store]):
    """Repository for store data access"""

    def __init__(self, db: Session):
        super().__init__(db, Store)

    def get_by_name(self, name: str) -> Optional[Store]:
        return self.db.query(Store).filter(Store.name == name).first()

    def list_stores(self, active_only: bool = False) -> List[Store]:
        query = self.db.query(Store)
        if active_only:
            query = query.filter(Store.is_active.is_(True))
        return query.order_by(Store.name).all()


class FoodPriceRepository(BaseRepository[FoodPrice]):
    """Repository for food price data access"""

    def __init__(self, db: Session):
        super().__init__(db, FoodPrice)

    def get_by_food_and_store(
        self, food_id: UUID, store_id: UUID
    ) -> Optional[FoodPrice]:
        return (
            self.db.query(FoodPrice)
            .filter(FoodPrice.food_id == food_id, FoodPrice.store_id == store_id)
            .first()
        )

    def list_for_store(self, store_id: UUID) -> List[FoodPrice]:
        return (
            self.db.query(FoodPrice)
            .filter(FoodPrice.store_id == store_id)
            .order_by(FoodPrice.price)
            .all()
        )

    def list_available_for_food(self, food_id: UUID) -> List[FoodPrice]:
        """Available prices at active stores, cheapest first"""
        return (
            self.db.query(FoodPrice)
            .join(Store, Store.id == FoodPrice.store_id)
            .filter(
                FoodPrice.food_id == food_id,
                FoodPrice.is_available.is_(True),
                Store.is_active.is_(True),
            )
            .order_by(FoodPrice.price.asc())
            .all()
        )
