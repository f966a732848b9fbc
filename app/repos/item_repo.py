# app/repos/item_repo.py
from typing import List

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from app.data.models import ItemModel


class ItemRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_item(self, item_id: int) -> ItemModel | None:
        return self.db.execute(
            select(ItemModel).where(
                ItemModel.id == item_id,
                ItemModel.deleted_at.is_(None),
            )
        ).scalar_one_or_none()

    def list_items(self, offset: int, limit: int) -> List[ItemModel]:
        stmt = (
            select(ItemModel)
            .where(ItemModel.deleted_at.is_(None))
            .order_by(ItemModel.id)
            .offset(offset)
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars())

    def count_items(self) -> int:
        return self.db.execute(
            select(func.count(ItemModel.id)).where(ItemModel.deleted_at.is_(None))
        ).scalar_one()
