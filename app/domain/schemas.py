# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr
from typing import List
from datetime import datetime


class UserCreate(BaseModel):
    """Schema dla rejestracji uzytkownika."""

    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, description="Haslo (min. 6 znakow)")


class UserLogin(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserOut(BaseModel):
    """Publiczny widok uzytkownika, bez hasla i tokena."""

    id: int
    username: str
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserCreatedOut(BaseModel):
    message: str
    user: UserOut


class LoginOut(BaseModel):
    message: str
    token: str
    user: UserOut


class UserListOut(BaseModel):
    users: List[UserOut]


class ItemOut(BaseModel):
    id: int
    name: str
    description: str
    price: float
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PaginationOut(BaseModel):
    page: int
    limit: int
    total: int


class ItemPageOut(BaseModel):
    items: List[ItemOut]
    pagination: PaginationOut


class CartItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    item_id: int = Field(..., gt=0, description="ID produktu (musi byc > 0)")
    quantity: int = Field(..., ge=1, description="Ilosc produktu (min. 1)")


class CartItemOut(BaseModel):
    id: int
    cart_id: int
    item_id: int
    quantity: int
    item: ItemOut

    model_config = ConfigDict(from_attributes=True)


class CartItemAddedOut(BaseModel):
    message: str
    cart_item: CartItemOut


class CartOut(BaseModel):
    id: int
    user_id: int
    items: List[CartItemOut]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CartWithUserOut(CartOut):
    user: UserOut


class CartEnvelopeOut(BaseModel):
    cart: CartOut


class CartListOut(BaseModel):
    carts: List[CartWithUserOut]


class OrderItemOut(BaseModel):
    id: int
    order_id: int
    item_id: int
    quantity: int
    price: float
    item: ItemOut

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    """Schema dla zamowienia (response)."""

    id: int
    user_id: int
    total: float
    status: str
    items: List[OrderItemOut]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderCreatedOut(BaseModel):
    message: str
    order: OrderOut


class OrderListOut(BaseModel):
    orders: List[OrderOut]
