"""
Food Repository - Data access layer for the food catalog
"""

from typing import List, Optional, Tuple
from sqlalchemy import or_
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Food, FoodCategory


class FoodRepository(BaseRepository[Food]):
    """Repository for food data access"""

    def __init__(self, db: Session):
        super().__init__(db, Food)

    def search(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        exclude_allergen: Optional[str] = None,
        tag: Optional[str] = None,
        skip: int = 0,
        limit: int = 20,
    ) -> Tuple[List[Food], int]:
        """
        Search foods and return one page plus the total match count.

        Name/category filters run in SQL. Allergen and tag filters look inside
        JSON lists, so they are applied in Python before paging.
        """
        query = self.db.query(Food)
        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                or_(Food.name.ilike(pattern), Food.name_arabic.ilike(pattern))
            )
        if category:
            query = query.filter(Food.category == category)
        query = query.order_by(Food.name)

        if exclude_allergen or tag:
            foods = query.all()
            if exclude_allergen:
                foods = [f for f in foods if not f.contains_allergen(exclude_allergen)]
            if tag:
                wanted = tag.strip().lower()
                foods = [f for f in foods if wanted in (f.tags or [])]
            return foods[skip : skip + limit], len(foods)

        total = query.count()
        return query.offset(skip).limit(limit).all(), total


class FoodCategoryRepository(BaseRepository[FoodCategory]):
    """Repository for food category data access"""

    def __init__(self, db: Session):
        super().__init__(db, FoodCategory)

    def get_by_name(self, name: str) -> Optional[FoodCategory]:
        return self.db.query(FoodCategory).filter(FoodCategory.name == name).first()

    def list_categories(self, roots_only: bool = False) -> List[FoodCategory]:
        query = self.db.query(FoodCategory)
        if roots_only:
            query = query.filter(FoodCategory.parent_id.is_(None))
        return query.order_by(FoodCategory.name).all()
