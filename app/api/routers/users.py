from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.errors import ServiceError
from app.domain.schemas import (
    UserCreate,
    UserLogin,
    UserOut,
    UserCreatedOut,
    LoginOut,
    UserListOut,
)
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserCreatedOut, status_code=201)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        user = service.register(payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return {
        "message": "User created successfully",
        "user": UserOut.model_validate(user),
    }


@router.post("/login", response_model=LoginOut)
def login_user(payload: UserLogin, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        token, user = service.login(payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return {
        "message": "Login successful",
        "token": token,
        "user": UserOut.model_validate(user),
    }


@router.get("", response_model=UserListOut)
def list_users(db: Session = Depends(get_db)):
    users = UserService(db).list_users()
    return {"users": [UserOut.model_validate(u) for u in users]}
