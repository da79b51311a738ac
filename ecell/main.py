# ecell/main.py
import logging
import time
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import SQLAlchemyError

from ecell.core.config import settings
from ecell.core.errors import AppError, StorageError, ValidationError
from ecell.api.router import api_router
from ecell.db.session import engine
from ecell.db.base import Base

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Em dev cria as tabelas; no shutdown libera o pool de conexões."""
    if (settings.ENVIRONMENT or "").lower().strip() == "dev":
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


app = FastAPI(title="E-Cell Backend", lifespan=lifespan)

origins = settings.cors_origin_list or [
    "http://localhost:3000",
    "http://localhost:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],  # Authorization, Content-Type etc.
)


@app.middleware("http")
async def log_requests(request: Request, call_next: Callable) -> Response:
    start = time.perf_counter()
    response = await call_next(request)
    if request.url.path.startswith(settings.API_PREFIX):
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("%s %s %s in %.0fms", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


# --- erros -> {"success": false, "message": ...} ---
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if isinstance(exc, StorageError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # 404 de rota inexistente, 405 de método errado etc.
    body = {"success": False, "message": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    err = ValidationError.from_pydantic(exc.errors())
    return JSONResponse(status_code=err.status_code, content=err.to_body())


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    err = StorageError(repr(exc))
    return JSONResponse(status_code=err.status_code, content=err.to_body())


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


app.include_router(api_router, prefix=settings.API_PREFIX)
