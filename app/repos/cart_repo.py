# app/repos/cart_repo.py
from typing import List

from sqlalchemy import select, delete
from sqlalchemy.orm import Session, selectinload

from app.data.models import CartModel, CartItemModel


class CartRepo:
    """
    Dostep do koszykow. Metody zapisujace robia tylko flush,
    commit/rollback decyduje serwis (jedna transakcja na use case).
    """

    def __init__(self, db: Session):
        self.db = db

    def get_cart_by_user(self, user_id: int, with_items: bool = False) -> CartModel | None:
        stmt = select(CartModel).where(CartModel.user_id == user_id)
        if with_items:
            stmt = stmt.options(
                selectinload(CartModel.items).selectinload(CartItemModel.item)
            )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_carts(self) -> List[CartModel]:
        stmt = (
            select(CartModel)
            .options(
                selectinload(CartModel.user),
                selectinload(CartModel.items).selectinload(CartItemModel.item),
            )
            .order_by(CartModel.id)
        )
        return list(self.db.execute(stmt).scalars())

    def create_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.flush()
        return cart

    def get_cart_item(self, cart_id: int, item_id: int) -> CartItemModel | None:
        return self.db.execute(
            select(CartItemModel).where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.item_id == item_id,
            )
        ).scalar_one_or_none()

    def add_cart_item(self, cart_item: CartItemModel) -> CartItemModel:
        self.db.add(cart_item)
        self.db.flush()
        return cart_item

    def delete_cart(self, cart_id: int) -> bool:
        # najpierw pozycje, potem koszyk; False gdy koszyka juz nie ma
        self.db.execute(delete(CartItemModel).where(CartItemModel.cart_id == cart_id))
        result = self.db.execute(delete(CartModel).where(CartModel.id == cart_id))
        return result.rowcount == 1

    def refresh(self, obj):
        self.db.refresh(obj)

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
