# app/main.py

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from app.api.middleware import CorrelationIdMiddleware, RequestScopeMiddleware
from app.api.routers import comments_admin, health, users_admin
from app.config.logging import configure_logging
from app.config.settings import get_settings
from app.domain.exceptions import DomainError, NotFoundError

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
)

# Middleware order: last added runs first (outermost). Request flow: CorrelationId -> RequestScope.
app.add_middleware(RequestScopeMiddleware)
app.add_middleware(CorrelationIdMiddleware)


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(request, exc: DomainError):
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request, exc: Exception):
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Routers: /health, /admin/comments, /admin/users
app.include_router(health.router)
app.include_router(comments_admin.router, prefix="/admin")
app.include_router(users_admin.router, prefix="/admin")
