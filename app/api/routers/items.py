# app/api/routers/items.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.errors import ServiceError
from app.domain.schemas import ItemOut, ItemPageOut
from app.services.item_service import ItemService

router = APIRouter(prefix="/items", tags=["items"])


@router.get("", response_model=ItemPageOut)
def list_items(
    page: int = Query(1),
    limit: int = Query(10),
    db: Session = Depends(get_db),
):
    try:
        result = ItemService(db).list_items(page=page, limit=limit)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return {
        "items": [ItemOut.model_validate(i) for i in result["items"]],
        "pagination": result["pagination"],
    }
