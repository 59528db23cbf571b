"""Store and food price routes"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_db, get_current_user
from api.responses import ERROR_RESPONSES, DeleteResponse
from domain.models import User
from domain.schemas.store_schemas import (
    StoreCreate,
    StoreUpdate,
    StoreResponse,
    FoodPriceUpsert,
    FoodPriceResponse,
)
from services.store_service import StoreService

router = APIRouter(prefix="/stores", tags=["Stores"], responses=ERROR_RESPONSES)
logger = logging.getLogger("smartbite.api.stores")


@router.get("", response_model=List[StoreResponse])
def list_stores(
    active_only: bool = Query(False), db: Session = Depends(get_db)
):
    stores = StoreService.list_stores(db, active_only=active_only)
    return [StoreResponse.model_validate(s) for s in stores]


@router.get("/{store_id}", response_model=StoreResponse)
def get_store(store_id: UUID, db: Session = Depends(get_db)):
    return StoreResponse.model_validate(StoreService.get_store(db, store_id))


@router.post("", response_model=StoreResponse, status_code=status.HTTP_201_CREATED)
def create_store(
    payload: StoreCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    store = StoreService.create_store(db, payload)
    return StoreResponse.model_validate(store)


@router.patch("/{store_id}", response_model=StoreResponse)
def update_store(
    store_id: UUID,
    payload: StoreUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    store = StoreService.update_store(db, store_id, payload)
    return StoreResponse.model_validate(store)


@router.delete("/{store_id}", response_model=DeleteResponse)
def delete_store(
    store_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete a store and all of its prices"""
    StoreService.delete_store(db, store_id)
    return DeleteResponse(deleted=str(store_id))


@router.get("/{store_id}/prices", response_model=List[FoodPriceResponse])
def list_store_prices(store_id: UUID, db: Session = Depends(get_db)):
    prices = StoreService.list_prices(db, store_id)
    return [FoodPriceResponse.model_validate(p) for p in prices]


@router.put(
    "/{store_id}/prices/{food_id}",
    response_model=FoodPriceResponse,
    responses={201: {"model": FoodPriceResponse, "description": "Price created"}},
)
def upsert_price(
    store_id: UUID,
    food_id: UUID,
    payload: FoodPriceUpsert,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create or replace the price of a food at this store"""
    price, created = StoreService.upsert_price(db, store_id, food_id, payload)
    resp = FoodPriceResponse.model_validate(price)
    if created:
        headers = {"Location": f"/stores/{store_id}/prices/{food_id}"}
        return Response(
            content=resp.model_dump_json(),
            status_code=status.HTTP_201_CREATED,
            media_type="application/json",
            headers=headers,
        )
    return resp


@router.delete("/{store_id}/prices/{food_id}", response_model=DeleteResponse)
def delete_price(
    store_id: UUID,
    food_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    StoreService.delete_price(db, store_id, food_id)
    return DeleteResponse(deleted=str(food_id))
