# app/api/deps.py
from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.data.models import UserModel
from app.services.auth_service import AuthService, parse_bearer

# jeden komunikat dla brak naglowka / zly format / nieznany token
UNAUTHORIZED_DETAIL = "Invalid or missing credentials"


def get_current_user(
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> UserModel:
    user = AuthService(db).resolve_token(parse_bearer(authorization))

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHORIZED_DETAIL,
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user
