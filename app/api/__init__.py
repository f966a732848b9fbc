# app/api/__init__.py
from fastapi import FastAPI
from app.api.routers import users, carts, orders, items, health


def register_routers(app: FastAPI):
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(items.router)
    app.include_router(carts.router)
    app.include_router(orders.router)
