from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.data.models import CartModel, CartItemModel, UserModel
from app.domain.errors import ConflictError, NotFoundError, ValidationError
from app.repos.cart_repo import CartRepo
from app.repos.item_repo import ItemRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y dla koszyka.
    commands (add_item) modyfikuja stan, query (get_cart, list_carts) tylko odczyt
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.items = ItemRepo(db)

    #query - odczyt
    def get_cart(self, user: UserModel) -> CartModel:
        cart = self.repo.get_cart_by_user(user.id, with_items=True)

        if not cart:
            raise NotFoundError("Cart not found")

        return cart

    def list_carts(self) -> List[CartModel]:
        return self.repo.list_carts()

    #commands
    def add_item(self, user: UserModel, item_id: int, quantity: int) -> CartItemModel:
        if quantity < 1:
            raise ValidationError("Quantity must be at least 1")

        item = self.items.get_item(item_id)
        if not item:
            raise NotFoundError("Item not found")

        # find -> insert/merge to read-modify-write, duplikaty blokuja
        # unique na carts.user_id i cart_items(cart_id, item_id)
        try:
            cart = self.repo.get_cart_by_user(user.id)
            if not cart:
                cart = self.repo.create_cart(CartModel(user_id=user.id))
                logger.info(f"Created cart {cart.id} for user {user.id}")

            cart_item = self.repo.get_cart_item(cart.id, item_id)

            if cart_item:
                logger.info(
                    f"Item {item_id} already in cart {cart.id}, increasing quantity "
                    f"from {cart_item.quantity} to {cart_item.quantity + quantity}"
                )
                cart_item.quantity += quantity
                self.repo.add_cart_item(cart_item)
            else:
                logger.info(f"Adding item {item_id} to cart {cart.id}")
                cart_item = self.repo.add_cart_item(
                    CartItemModel(
                        cart_id=cart.id,
                        item_id=item_id,
                        quantity=quantity,
                    )
                )

            self.repo.commit()

        except IntegrityError:
            self.repo.rollback()
            logger.warning(f"Concurrent cart modification for user {user.id}, item {item_id}")
            raise ConflictError("Cart was modified concurrently, please retry")

        self.repo.refresh(cart_item)
        return cart_item
