# app/data/seed.py
from sqlalchemy import select, func
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from app.data.database import Base, build_session_factory
from app.data.models import ItemModel
from app.utils.retry import db_retry
from app.utils.logging import get_logger

logger = get_logger(__name__)

CATALOG = [
    {"name": "Laptop", "description": "High-performance laptop", "price": 999.99},
    {"name": "Mouse", "description": "Wireless mouse", "price": 29.99},
    {"name": "Keyboard", "description": "Mechanical keyboard", "price": 79.99},
    {"name": "Monitor", "description": "4K monitor", "price": 299.99},
    {"name": "Headphones", "description": "Noise-canceling headphones", "price": 199.99},
]


def seed_items(db: Session) -> int:
    # only seed if empty
    count = db.execute(select(func.count(ItemModel.id))).scalar_one()
    if count:
        return 0

    db.add_all([ItemModel(**data) for data in CATALOG])
    db.commit()

    logger.info(f"Seeded catalog with {len(CATALOG)} items")
    return len(CATALOG)


@db_retry()
def create_tables(engine: Engine):
    Base.metadata.create_all(bind=engine)


def init_db(engine: Engine, seed: bool = True):
    logger.info(f"Initializing database, tables: {list(Base.metadata.tables.keys())}")
    create_tables(engine)

    if not seed:
        return

    db = build_session_factory(engine)()
    try:
        seed_items(db)
    finally:
        db.close()
