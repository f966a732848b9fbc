from sqlalchemy import Column, Integer, ForeignKey, Float
from sqlalchemy.orm import relationship

from app.data.database import Base


class OrderItemModel(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    item_id = Column(Integer, ForeignKey("items.id"), nullable=False, index=True)

    quantity = Column(Integer, nullable=False)
    #cena z momentu zamowienia, zmiana ceny w katalogu jej nie rusza
    price = Column(Float, nullable=False)

    order = relationship("OrderModel", back_populates="items")
    item = relationship("ItemModel")
