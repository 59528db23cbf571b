from datetime import datetime, timezone
from typing import List, Tuple
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from app.exceptions import ConflictError, NotFoundError
from domain.models import Store, FoodPrice
from domain.schemas.store_schemas import StoreCreate, StoreUpdate, FoodPriceUpsert
from repositories import StoreRepository, FoodPriceRepository, FoodRepository

logger = logging.getLogger("smartbite.stores")

CLEARABLE_STORE_FIELDS = {"logo_url", "website", "api_endpoint"}


class StoreService:
    """Business logic for stores and the prices they charge"""

    @staticmethod
    def list_stores(db: Session, active_only: bool = False) -> List[Store]:
        return StoreRepository(db).list_stores(active_only=active_only)

    @staticmethod
    def get_store(db: Session, store_id: UUID) -> Store:
        store = StoreRepository(db).get_by_id(store_id)
        if not store:
            raise NotFoundError(f"Store {store_id} not found")
        return store

    @staticmethod
    def create_store(db: Session, payload: StoreCreate) -> Store:
        repo = StoreRepository(db)
        if repo.get_by_name(payload.name):
            raise ConflictError(
                f"Store '{payload.name}' already exists", code="STORE_EXISTS"
            )
        store = repo.create(Store(**payload.model_dump()))
        logger.info(f"store_created store_id={store.id} name={store.name}")
        return store

    @staticmethod
    def update_store(db: Session, store_id: UUID, payload: StoreUpdate) -> Store:
        repo = StoreRepository(db)
        store = StoreService.get_store(db, store_id)
        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or key in CLEARABLE_STORE_FIELDS
        }
        if "name" in changes:
            existing = repo.get_by_name(changes["name"])
            if existing and existing.id != store.id:
                raise ConflictError(
                    f"Store '{changes['name']}' already exists", code="STORE_EXISTS"
                )
        for key, value in changes.items():
            setattr(store, key, value)
        store = repo.update(store)
        logger.info(f"store_updated store_id={store.id}")
        return store

    @staticmethod
    def delete_store(db: Session, store_id: UUID) -> None:
        """Delete a store together with its prices."""
        store = StoreService.get_store(db, store_id)
        db.delete(store)
        db.commit()
        logger.info(f"store_deleted store_id={store_id}")

    @staticmethod
    def list_prices(db: Session, store_id: UUID) -> List[FoodPrice]:
        StoreService.get_store(db, store_id)
        return FoodPriceRepository(db).list_for_store(store_id)

    @staticmethod
    def upsert_price(
        db: Session, store_id: UUID, food_id: UUID, payload: FoodPriceUpsert
    ) -> Tuple[FoodPrice, bool]:
        """
        Create or replace the price of a food at a store.

        Returns a tuple of (FoodPrice, created_flag) so the caller can choose
        between 201 and 200.
        """
        StoreService.get_store(db, store_id)
        if not FoodRepository(db).exists(food_id):
            raise NotFoundError(f"Food {food_id} not found")

        price_repo = FoodPriceRepository(db)
        price = price_repo.get_by_food_and_store(food_id, store_id)
        created = price is None
        if created:
            price = FoodPrice(food_id=food_id, store_id=store_id)
            db.add(price)
        price.price = round(payload.price, 2)
        price.unit = payload.unit
        price.is_available = payload.is_available
        price.last_updated = datetime.now(timezone.utc)
        db.commit()
        db.refresh(price)

        logger.info(
            f"price_upserted store_id={store_id} food_id={food_id} "
            f"price={payload.price} created={created}"
        )
        return price, created

    @staticmethod
    def delete_price(db: Session, store_id: UUID, food_id: UUID) -> None:
        price = FoodPriceRepository(db).get_by_food_and_store(food_id, store_id)
        if not price:
            raise NotFoundError(
                f"No price for food {food_id} at store {store_id}"
            )
        db.delete(price)
        db.commit()
        logger.info(f"price_deleted store_id={store_id} food_id={food_id}")
