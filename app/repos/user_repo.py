from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models import UserModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def _active(self):
        return select(UserModel).where(UserModel.deleted_at.is_(None))

    def get_user(self, user_id: int) -> UserModel | None:
        return self.db.execute(
            self._active().where(UserModel.id == user_id)
        ).scalar_one_or_none()

    def get_by_username(self, username: str) -> UserModel | None:
        return self.db.execute(
            self._active().where(UserModel.username == username)
        ).scalar_one_or_none()

    def get_by_token(self, token: str) -> UserModel | None:
        return self.db.execute(
            self._active().where(UserModel.token == token)
        ).scalar_one_or_none()

    def list_users(self) -> List[UserModel]:
        return list(self.db.execute(self._active().order_by(UserModel.id)).scalars())

    def create_user(self, user: UserModel) -> UserModel:
        # IntegrityError (username/email) leci wyzej, serwis robi rollback
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update_token(self, user: UserModel, token: str) -> UserModel:
        user.token = token
        self.db.commit()
        self.db.refresh(user)
        return user

    def rollback(self):
        self.db.rollback()
