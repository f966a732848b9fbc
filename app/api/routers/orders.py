# app/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.data.database import get_db
from app.data.models import UserModel
from app.domain.errors import ServiceError
from app.domain.schemas import OrderOut, OrderCreatedOut, OrderListOut
from app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderCreatedOut, status_code=201)
def create_order(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Tworzy zamowienie z koszyka zalogowanego usera i usuwa koszyk.
    """
    svc = OrderService(db)
    try:
        order = svc.create_order(user)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return {
        "message": "Order created successfully",
        "order": OrderOut.model_validate(order),
    }


@router.get("", response_model=OrderListOut)
def list_orders(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Zamowienia usera, najnowsze pierwsze.
    """
    orders = OrderService(db).list_orders(user)
    return {"orders": [OrderOut.model_validate(o) for o in orders]}
