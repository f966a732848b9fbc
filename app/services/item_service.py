# app/services/item_service.py
from typing import Dict, Any

from sqlalchemy.orm import Session

from app.domain.errors import ValidationError
from app.repos.item_repo import ItemRepo


class ItemService:
    def __init__(self, db: Session):
        self.repo = ItemRepo(db)

    def list_items(self, page: int = 1, limit: int = 10) -> Dict[str, Any]:
        if page < 1 or limit < 1:
            raise ValidationError("page and limit must be positive integers")

        offset = (page - 1) * limit
        return {
            "items": self.repo.list_items(offset, limit),
            "pagination": {
                "page": page,
                "limit": limit,
                "total": self.repo.count_items(),
            },
        }
