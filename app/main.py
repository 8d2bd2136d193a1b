"""FastAPI application entrypoint. No business logic; only wiring, middleware and error rendering."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.database import SessionLocal, init_db
from app.core.errors import AppError, ConsentRequired, StorageError, ValidationError
from app.services.mailer import build_mail_transport
from app.services.users import seed_superadmin

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    if settings.DB_AUTO_CREATE:
        init_db()
    db = SessionLocal()
    try:
        seed_superadmin(db, settings)
    finally:
        db.close()
    app.state.mail_transport = build_mail_transport(settings)
    logger.info(
        "Startup complete",
        extra={"environment": settings.APP_ENV, "mail_backend": settings.MAIL_BACKEND},
    )
    yield
    app.state.mail_transport.close()


app = FastAPI(
    title="Idea Graveyard API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CLIENT_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(error: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content={"error": error.message, "code": error.code},
    )


@app.exception_handler(AppError)
async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    if any(err.get("type") == ConsentRequired.code for err in exc.errors()):
        return _error_response(ConsentRequired())
    error = ValidationError()
    return JSONResponse(
        status_code=error.status_code,
        content={
            "error": error.message,
            "code": error.code,
            "details": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(SQLAlchemyError)
async def handle_storage_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Unexpected database error on %s %s", request.method, request.url.path)
    return _error_response(StorageError())


app.include_router(v1_router, prefix=settings.API_PREFIX)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
