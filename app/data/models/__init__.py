#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from app.data.models.user import UserModel
from app.data.models.item import ItemModel
from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.data.models.order import OrderModel, ORDER_STATUS_PENDING
from app.data.models.order_item import OrderItemModel

__all__ = [
    "UserModel",
    "ItemModel",
    "CartModel",
    "CartItemModel",
    "OrderModel",
    "OrderItemModel",
    "ORDER_STATUS_PENDING",
]
