# app/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.api import register_routers
from app.data.database import build_engine, build_session_factory
from app.data.seed import init_db
from app.utils.settings import HOST, PORT, SEED_CATALOG
from app.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(engine: Engine | None = None, seed: bool = SEED_CATALOG) -> FastAPI:
    """
    Fabryka aplikacji. Silnik bazy przychodzi z zewnatrz (testy daja sqlite in-memory),
    domyslnie budowany z DATABASE_URL.
    """
    engine = engine or build_engine()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine, seed=seed)
        logger.info(f"Database ready ({engine.url.render_as_string(hide_password=True)})")
        yield

    app = FastAPI(
        title="E-commerce Service",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.session_factory = build_session_factory(engine)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(SQLAlchemyError)
    async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    register_routers(app)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
