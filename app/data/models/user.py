from sqlalchemy import Column, Integer, String, DateTime

from app.data.database import Base
from app.data.models._mixins import TimestampMixin


class UserModel(TimestampMixin, Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String(100), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)

    #bcrypt hash, nigdy plaintext
    password = Column(String(255), nullable=False)
    #jeden aktywny token na usera, nowy login nadpisuje
    token = Column(String(64), nullable=True, index=True)

    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)
