import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .caching.cache_context import CacheContext
from .config import Settings, settings
from .exceptions import StorageError
from .logging_config import configure_logging
from .repositories.cached_department_repository import CachedDepartmentRepository
from .repositories.cached_employee_repository import CachedEmployeeRepository
from .repositories.department_repository import DepartmentRepository
from .repositories.employee_repository import EmployeeRepository
from .routers.api import router
from .services.database_service import DatabaseService
from .services.report_service import ReportService
from .services.statistics_service import CacheStatisticsReporter

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Settings = settings,
    database: Optional[DatabaseService] = None,
    cache_context: Optional[CacheContext] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to build the database and caches from
        database: Pre-built database service (tests); built from settings if omitted
        cache_context: Pre-built cache context (tests); built from settings if omitted

    Returns:
        Configured FastAPI app
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events"""
        configure_logging(app_settings.log_level)
        logger.info(f"Starting {app_settings.app_name} v{app_settings.app_version}...")

        db = database or DatabaseService.from_settings(app_settings)
        db.connect()
        db.initialize_schema()
        logger.info(f"Database contains {db.employee_count():,} employees")

        caches = cache_context or CacheContext.from_settings(app_settings)
        caches.initialize()

        employee_store = CachedEmployeeRepository(
            store=EmployeeRepository(db),
            employee_cache=caches.employee_cache,
            search_cache=caches.search_cache,
        )
        department_store = CachedDepartmentRepository(
            store=DepartmentRepository(db),
            department_cache=caches.department_cache,
            department_list_cache=caches.department_list_cache,
        )
        reporter = CacheStatisticsReporter(caches)

        # Store in app state
        app.state.database_service = db
        app.state.cache_context = caches
        app.state.employee_store = employee_store
        app.state.department_store = department_store
        app.state.report_service = ReportService(employee_store, department_store)
        app.state.statistics_reporter = reporter

        logger.info(f"{app_settings.app_name} ready")

        yield

        # Shutdown
        logger.info(f"Shutting down {app_settings.app_name}...")
        caches.close(reporter)
        db.disconnect()

    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.app_version,
        description="Employee and department lookups behind a cache-aside data-access layer",
        lifespan=lifespan
    )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        payload = exc.to_dict()
        payload["detail"] = exc.message
        return JSONResponse(status_code=503, content=payload)

    # Include routers
    app.include_router(router)

    @app.get("/health")
    def health_check(request: Request):
        """Health check endpoint"""
        database_ok = request.app.state.database_service.ping()
        return {
            "status": "healthy" if database_ok else "degraded",
            "database_ready": database_ok,
            "cache_ready": request.app.state.cache_context.is_initialized,
        }

    return app


# Create FastAPI app
app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "employee_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
