from sqlalchemy import Column, Integer, String, Float, DateTime, CheckConstraint

from app.data.database import Base
from app.data.models._mixins import TimestampMixin


class ItemModel(TimestampMixin, Base):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(String, nullable=False, default="")
    price = Column(Float, nullable=False)

    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    __table_args__ = (CheckConstraint("price >= 0", name="ck_item_price_non_negative"),)
