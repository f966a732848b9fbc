from typing import List, Tuple

from passlib.exc import MissingBackendError, InternalBackendError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.data.models import UserModel
from app.domain.errors import ConflictError, InternalFailure, UnauthorizedError
from app.domain.schemas import UserCreate, UserLogin
from app.repos.user_repo import UserRepo
from app.services.auth_service import AuthService, pwd_context
from app.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session, auth_service: AuthService | None = None):
        self.repo = UserRepo(db)
        self.auth = auth_service or AuthService(db)

    def register(self, payload: UserCreate) -> UserModel:
        try:
            hashed = pwd_context.hash(payload.password)
        except (ValueError, MissingBackendError, InternalBackendError) as e:
            logger.error(f"Password hashing failed: {type(e).__name__}")
            raise InternalFailure("Failed to hash password") from e

        user = UserModel(
            username=payload.username,
            email=payload.email,
            password=hashed,
        )

        # unikalnosc pilnuje baza (constraint), nie pre-check, zeby nie bylo wyscigu
        try:
            created = self.repo.create_user(user)
        except IntegrityError:
            self.repo.rollback()
            raise ConflictError("Username or email already exists")

        logger.info(f"Registered user {created.id} ({created.username})")
        return created

    def login(self, payload: UserLogin) -> Tuple[str, UserModel]:
        user = self.repo.get_by_username(payload.username)

        if user is None:
            #ten sam koszt czasowy co prawdziwa weryfikacja
            pwd_context.dummy_verify()
            raise UnauthorizedError("Invalid credentials")

        if not pwd_context.verify(payload.password, user.password):
            raise UnauthorizedError("Invalid credentials")

        token = self.auth.issue_token(user)
        logger.info(f"User {user.id} logged in")
        return token, user

    def list_users(self) -> List[UserModel]:
        return self.repo.list_users()
