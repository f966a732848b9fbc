#app/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.data.database import get_db
from app.data.models import UserModel
from app.domain.errors import ServiceError
from app.domain.schemas import (
    CartItemIn,
    CartItemOut,
    CartItemAddedOut,
    CartOut,
    CartEnvelopeOut,
    CartWithUserOut,
    CartListOut,
)
from app.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["carts"])


@router.post("", response_model=CartItemAddedOut)
def add_to_cart(
    payload: CartItemIn,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = CartService(db)
    try:
        cart_item = svc.add_item(user, payload.item_id, payload.quantity)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return {
        "message": "Item added to cart",
        "cart_item": CartItemOut.model_validate(cart_item),
    }


@router.get("", response_model=CartEnvelopeOut)
def get_cart(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = CartService(db)
    try:
        cart = svc.get_cart(user)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return {"cart": CartOut.model_validate(cart)}


@router.get("/all", response_model=CartListOut)
def list_carts(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    carts = CartService(db).list_carts()
    return {"carts": [CartWithUserOut.model_validate(c) for c in carts]}
