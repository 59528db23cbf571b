from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from app.exceptions import ConflictError, NotFoundError, ServiceValidationError
from domain.helpers import to_float
from domain.models import Food, FoodCategory
from domain.schemas.food_schemas import (
    FoodCategoryCreate,
    FoodCategoryUpdate,
    FoodCreate,
    FoodUpdate,
    FoodNutritionResponse,
    FoodPriceComparisonResponse,
    FoodPriceEntry,
    MacroPercentages,
    ServingNutrition,
)
from repositories import (
    FoodRepository,
    FoodCategoryRepository,
    FoodPriceRepository,
    MealFoodRepository,
)

logger = logging.getLogger("smartbite.foods")

# Optional food columns that may be cleared with an explicit null
CLEARABLE_FOOD_FIELDS = {"category_id", "description", "image_url", "recipe_instructions"}


class FoodService:
    """Business logic for the food catalog and its categories"""

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    @staticmethod
    def list_categories(db: Session, roots_only: bool = False) -> List[FoodCategory]:
        return FoodCategoryRepository(db).list_categories(roots_only=roots_only)

    @staticmethod
    def get_category(db: Session, category_id: UUID) -> FoodCategory:
        category = FoodCategoryRepository(db).get_by_id(category_id)
        if not category:
            raise NotFoundError(f"Food category {category_id} not found")
        return category

    @staticmethod
    def _check_parent(
        db: Session, parent_id: Optional[UUID], category_id: Optional[UUID] = None
    ) -> None:
        """Parent must exist and must not be the category itself or one of its descendants."""
        if parent_id is None:
            return
        repo = FoodCategoryRepository(db)
        parent = repo.get_by_id(parent_id)
        if not parent:
            raise ServiceValidationError(f"Parent category {parent_id} not found")
        node = parent
        while node is not None:
            if category_id is not None and node.id == category_id:
                raise ServiceValidationError(
                    "A category cannot be its own ancestor",
                    details={"parent_id": str(parent_id)},
                )
            node = node.parent

    @staticmethod
    def create_category(db: Session, payload: FoodCategoryCreate) -> FoodCategory:
        repo = FoodCategoryRepository(db)
        if repo.get_by_name(payload.name):
            raise ConflictError(
                f"Food category '{payload.name}' already exists",
                code="CATEGORY_EXISTS",
            )
        FoodService._check_parent(db, payload.parent_id)
        category = repo.create(FoodCategory(**payload.model_dump()))
        logger.info(f"category_created category_id={category.id} name={category.name}")
        return category

    @staticmethod
    def update_category(
        db: Session, category_id: UUID, payload: FoodCategoryUpdate
    ) -> FoodCategory:
        repo = FoodCategoryRepository(db)
        category = FoodService.get_category(db, category_id)
        changes = payload.model_dump(exclude_unset=True)

        new_name = changes.get("name")
        if new_name is not None:
            existing = repo.get_by_name(new_name)
            if existing and existing.id != category.id:
                raise ConflictError(
                    f"Food category '{new_name}' already exists",
                    code="CATEGORY_EXISTS",
                )
        if "parent_id" in changes:
            FoodService._check_parent(db, changes["parent_id"], category.id)

        for key, value in changes.items():
            if value is None and key not in ("description", "parent_id"):
                continue
            setattr(category, key, value)
        category = repo.update(category)
        logger.info(f"category_updated category_id={category.id}")
        return category

    @staticmethod
    def delete_category(db: Session, category_id: UUID) -> None:
        category = FoodService.get_category(db, category_id)
        if category.children:
            raise ConflictError(
                "Cannot delete a category that has subcategories",
                details={"children": len(category.children)},
                code="CATEGORY_HAS_CHILDREN",
            )
        db.delete(category)
        db.commit()
        logger.info(f"category_deleted category_id={category_id}")

    # ------------------------------------------------------------------
    # Foods
    # ------------------------------------------------------------------

    @staticmethod
    def list_foods(
        db: Session,
        search: Optional[str] = None,
        category: Optional[str] = None,
        exclude_allergen: Optional[str] = None,
        tag: Optional[str] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> Tuple[List[Food], int]:
        skip = (page - 1) * page_size
        return FoodRepository(db).search(
            search=search,
            category=category,
            exclude_allergen=exclude_allergen,
            tag=tag,
            skip=skip,
            limit=page_size,
        )

    @staticmethod
    def get_food(db: Session, food_id: UUID) -> Food:
        food = FoodRepository(db).get_by_id(food_id)
        if not food:
            raise NotFoundError(f"Food {food_id} not found")
        return food

    @staticmethod
    def _check_category_id(db: Session, category_id: Optional[UUID]) -> None:
        if category_id is not None and not FoodCategoryRepository(db).exists(category_id):
            raise ServiceValidationError(f"Food category {category_id} not found")

    @staticmethod
    def create_food(db: Session, payload: FoodCreate) -> Food:
        FoodService._check_category_id(db, payload.category_id)
        food = FoodRepository(db).create(Food(**payload.model_dump()))
        logger.info(f"food_created food_id={food.id} name={food.name}")
        return food

    @staticmethod
    def update_food(db: Session, food_id: UUID, payload: FoodUpdate) -> Food:
        food = FoodService.get_food(db, food_id)
        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or key in CLEARABLE_FOOD_FIELDS
        }
        if "category_id" in changes:
            FoodService._check_category_id(db, changes["category_id"])
        for key, value in changes.items():
            setattr(food, key, value)
        food = FoodRepository(db).update(food)
        logger.info(
            f"food_updated food_id={food.id} fields={','.join(sorted(changes))}"
        )
        return food

    @staticmethod
    def delete_food(db: Session, food_id: UUID) -> None:
        food = FoodService.get_food(db, food_id)
        in_use = MealFoodRepository(db).count_for_food(food_id)
        if in_use:
            raise ConflictError(
                "Food is used in meal plans and cannot be deleted",
                details={"meal_foods": in_use},
                code="FOOD_IN_USE",
            )
        db.delete(food)
        db.commit()
        logger.info(f"food_deleted food_id={food_id}")

    @staticmethod
    def get_nutrition(
        db: Session, food_id: UUID, serving_size: float = 100
    ) -> FoodNutritionResponse:
        """Nutrition for a serving plus the calorie share of each macro."""
        food = FoodService.get_food(db, food_id)
        nutrition = {
            key: round(value, 2)
            for key, value in food.nutrition_for_serving(serving_size).items()
        }
        percentages = {
            key: round(value, 2) for key, value in food.macro_percentages().items()
        }
        return FoodNutritionResponse(
            food_id=food.id,
            name=food.name,
            serving_size=serving_size,
            nutrition=ServingNutrition(**nutrition),
            macro_percentages=MacroPercentages(**percentages),
        )

    @staticmethod
    def compare_prices(db: Session, food_id: UUID) -> FoodPriceComparisonResponse:
        """Available prices at active stores, cheapest first."""
        food = FoodService.get_food(db, food_id)
        entries = [
            FoodPriceEntry(
                store_id=price.store_id,
                store_name=price.store.name,
                price=to_float(price.price),
                unit=price.unit,
                is_available=price.is_available,
                last_updated=price.last_updated,
            )
            for price in FoodPriceRepository(db).list_available_for_food(food_id)
        ]
        return FoodPriceComparisonResponse(
            food_id=food.id,
            food_name=food.name,
            prices=entries,
            cheapest=entries[0] if entries else None,
        )
