# app/services/auth_service.py
import secrets

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from app.data.models import UserModel
from app.repos.user_repo import UserRepo
from app.utils.settings import BCRYPT_ROUNDS
from app.utils.logging import get_logger

logger = get_logger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


def generate_token(user_id: int) -> str:
    # prefix z id usera tylko do debugowania, autoryzacja = rownosc z tokenem w bazie
    return f"{user_id}_{secrets.token_hex(16)}"


def parse_bearer(authorization: str | None) -> str | None:
    """Zwraca token z naglowka "Bearer <token>" albo None."""
    if not authorization:
        return None

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        return None

    return parts[1]


class AuthService:
    """
    Sesje: jeden aktywny token na usera.
    issue_token nadpisuje poprzedni token, wiec wczesniejsza sesja przestaje dzialac.
    """

    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def issue_token(self, user: UserModel) -> str:
        token = generate_token(user.id)
        self.repo.update_token(user, token)

        logger.info(f"Issued new session token for user {user.id}")
        return token

    def resolve_token(self, token: str | None) -> UserModel | None:
        if not token:
            return None
        return self.repo.get_by_token(token)
