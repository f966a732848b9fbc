# app/repos/order_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.data.models import OrderModel, OrderItemModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def _with_items(self):
        return select(OrderModel).options(
            selectinload(OrderModel.items).selectinload(OrderItemModel.item)
        )

    def create_order(self, order: OrderModel) -> OrderModel:
        # bez commita, zamowienie commituje sie razem z usunieciem koszyka
        self.db.add(order)
        self.db.flush()
        return order

    def add_order_item(self, order_item: OrderItemModel) -> OrderItemModel:
        self.db.add(order_item)
        self.db.flush()
        return order_item

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.execute(
            self._with_items().where(OrderModel.id == order_id)
        ).scalar_one_or_none()

    def list_orders_by_user(self, user_id: int) -> List[OrderModel]:
        stmt = (
            self._with_items()
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
        )
        return list(self.db.execute(stmt).scalars())

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
