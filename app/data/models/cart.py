#app/data/models/cart.py
from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship

from app.data.database import Base
from app.data.models._mixins import TimestampMixin


class CartModel(TimestampMixin, Base):
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True)
    #unique = max jeden koszyk na usera, takze przy rownoleglych insertach
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)

    user = relationship("UserModel")
    items = relationship(
        "CartItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartItemModel.id",
    )
