"""
MealBoard FastAPI Application
Serves the meal plan calendar, saved recipes and the shopping list.
"""

from contextlib import asynccontextmanager
import logging

import anyio
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.middleware import (
    RequestLoggingMiddleware,
    general_exception_handler,
    http_exception_handler,
    service_exception_handler,
    validation_exception_handler,
)
from api.routes import health, meal_plans, recipes, shopping
from app.config import settings
from app.exceptions import ServiceValidationError
from domain.models import init_database

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("mealboard.main")

ROUTERS = (health.router, meal_plans.router, recipes.router, shopping.router)


async def create_schema_with_retry(attempts: int, delay_sec: float) -> None:
    """Create the tables, waiting for the database to accept connections."""
    for attempt in range(1, attempts + 1):
        try:
            # create_all is blocking; keep it off the event loop
            await anyio.to_thread.run_sync(init_database)
            _logger.info("Database schema ready (attempt %d)", attempt)
            return
        except Exception as exc:
            if attempt == attempts:
                _logger.error("Database initialization failed after %d attempts: %s", attempt, exc)
                raise
            _logger.warning(
                "Database init attempt %d/%d failed: %s; retrying in %.1fs",
                attempt, attempts, exc, delay_sec,
            )
            await anyio.sleep(delay_sec)


@asynccontextmanager
async def lifespan(app: FastAPI):
    _logger.info(
        "Starting %s %s (%s)", settings.app_name, settings.app_version, settings.environment.value
    )
    await create_schema_with_retry(settings.db_init_attempts, settings.db_init_delay_sec)
    yield
    _logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    docs_enabled = not settings.is_production()
    prefix = settings.api_prefix

    application = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url=f"{prefix}/openapi.json" if docs_enabled else None,
        docs_url=f"{prefix}/docs" if docs_enabled else None,
        redoc_url=f"{prefix}/redoc" if docs_enabled else None,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    application.add_middleware(RequestLoggingMiddleware)

    # NotFoundError and ForbiddenError resolve to the ServiceValidationError handler
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(ServiceValidationError, service_exception_handler)
    application.add_exception_handler(Exception, general_exception_handler)

    for router in ROUTERS:
        application.include_router(router, prefix=prefix)

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
