# app/services/order_service.py
from typing import List

from sqlalchemy.orm import Session

from app.data.models import OrderModel, OrderItemModel, UserModel, ORDER_STATUS_PENDING
from app.domain.errors import NotFoundError, ValidationError
from app.repos.cart_repo import CartRepo
from app.repos.order_repo import OrderRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien.
    Separacja od CartService, ale checkout czyta i usuwa koszyk w tej samej sesji.
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)
        self.carts = CartRepo(db)

    def create_order(self, user: UserModel) -> OrderModel:
        """
        Use Case: Tworzenie zamowienia z koszyka.

        1. Pobiera koszyk z pozycjami i aktualnymi cenami
        2. Oblicza total
        3. Tworzy zamowienie (status pending) i pozycje z cena z tej chwili
        4. Usuwa koszyk

        Kroki 3-4 ida w jednej transakcji: albo wszystko, albo nic.
        """
        cart = self.carts.get_cart_by_user(user.id, with_items=True)

        if not cart:
            raise NotFoundError("Cart not found")

        if not cart.items:
            raise ValidationError("Cart is empty")

        cart_id = cart.id
        lines = [(ci.item_id, ci.quantity, ci.item.price) for ci in cart.items]
        total = sum(price * quantity for _, quantity, price in lines)

        try:
            order = self.repo.create_order(
                OrderModel(
                    user_id=user.id,
                    total=total,
                    status=ORDER_STATUS_PENDING,
                )
            )

            for item_id, quantity, price in lines:
                self.repo.add_order_item(
                    OrderItemModel(
                        order_id=order.id,
                        item_id=item_id,
                        quantity=quantity,
                        price=price,
                    )
                )

            # 0 usunietych wierszy = ktos inny juz zrobil checkout tego koszyka
            if not self.carts.delete_cart(cart_id):
                raise NotFoundError("Cart not found")

            self.repo.commit()

        except Exception:
            self.repo.rollback()
            logger.error(f"Checkout failed for user {user.id}, cart {cart_id} rolled back")
            raise

        logger.info(f"Order {order.id} created for user {user.id}, total {total:.2f}")

        return self.repo.get_order(order.id)

    def list_orders(self, user: UserModel) -> List[OrderModel]:
        """Use Case: Zamowienia usera, najnowsze pierwsze."""
        return self.repo.list_orders_by_user(user.id)
