# main.py
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from livingroom.core.config import settings
from livingroom.core.database import Base, engine
from livingroom.core.errors import (
    APIError,
    api_error_handler,
    database_error_handler,
    unhandled_error_handler,
    validation_error_handler,
)
from livingroom.api.endpoints import addresses, admin_menu, admin_orders, auth, catering, menu, orders
from livingroom.models import sql_models  # noqa: F401  (registers the tables on Base)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s", settings.PROJECT_NAME)
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Ordering, tracking, catering and admin API for The Living Room Cafe",
    version="1.0",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(APIError, api_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(SQLAlchemyError, database_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.include_router(menu.router, prefix="/api", tags=["Menu"])
app.include_router(orders.router, prefix="/api", tags=["Orders"])
app.include_router(auth.router, prefix="/api", tags=["Auth"])
app.include_router(addresses.router, prefix="/api/addresses", tags=["Addresses"])
app.include_router(catering.router, prefix="/api/catering-inquiry", tags=["Catering"])
app.include_router(admin_orders.router, prefix="/api/admin", tags=["Admin"])
app.include_router(admin_menu.router, prefix="/api/admin", tags=["Admin"])


@app.get("/")
def read_root():
    return {"status": "The Living Room Cafe API online"}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
