# labor_api/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from labor_api.domain.integrity.errors import (
    BlockedDeletionError,
    ConflictError,
    NotFoundError,
    RecordNotFoundError,
    RuleViolation,
    ValidationError,
)
from labor_api.infrastructure.config import get_settings
from labor_api.infrastructure.log import configure_logging

_STATUS_BY_VIOLATION: tuple[tuple[type[RuleViolation], int], ...] = (
    (RecordNotFoundError, 404),
    (NotFoundError, 400),
    (ConflictError, 409),
    (BlockedDeletionError, 409),
    (ValidationError, 400),
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from labor_api.infrastructure.duckdb_connection import get_connection
    configure_logging(get_settings().log_level)
    get_connection()  # fail fast on a bad DUCKDB_PATH or schema
    yield


app = FastAPI(
    title="Labor Relations Registry API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.exception_handler(RuleViolation)
async def rule_violation_handler(request: Request, exc: RuleViolation) -> JSONResponse:
    status = next((code for kind, code in _STATUS_BY_VIOLATION if isinstance(exc, kind)), 400)
    return JSONResponse(
        status_code=status,
        content={"detail": exc.message, "code": exc.code, **exc.details()},
    )


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

from labor_api.interfaces.api.routes.contractor_routes import router as contractor_router  # noqa: E402
from labor_api.interfaces.api.routes.health_routes import router as health_router  # noqa: E402
from labor_api.interfaces.api.routes.monitoring_routes import router as monitoring_router  # noqa: E402
from labor_api.interfaces.api.routes.negotiation_routes import router as negotiation_router  # noqa: E402
from labor_api.interfaces.api.routes.principal_routes import router as principal_router  # noqa: E402
from labor_api.interfaces.api.routes.role_routes import router as role_router  # noqa: E402
from labor_api.interfaces.api.routes.union_routes import router as union_router  # noqa: E402

app.include_router(health_router, prefix="/api")
app.include_router(principal_router, prefix="/api")
app.include_router(contractor_router, prefix="/api")
app.include_router(union_router, prefix="/api")
app.include_router(negotiation_router, prefix="/api")
app.include_router(monitoring_router, prefix="/api")
app.include_router(role_router, prefix="/api")
