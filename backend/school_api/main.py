"""FastAPI application factory and composition.

`create_app` builds the engine from settings, creates tables, installs
the request-logging middleware and error handlers, and mounts each router
exactly once. Resource routers sit behind the bearer-token dependency;
`/auth`, `/`, `/health` and `/docs` are public.

Endpoints implemented:
- POST /auth/register, POST /auth/login, GET /auth/me
- POST|GET /students, GET|PUT|DELETE /students/{id}
- POST|DELETE /students/{id}/courses/{course_id}
- POST|GET /teachers, GET|PUT|DELETE /teachers/{id}
- POST|GET /courses, GET|PUT|DELETE /courses/{id}
"""

import json
import logging
import time
import uuid
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from sqlalchemy.exc import SQLAlchemyError

from .auth import require_token
from .config import Settings
from .database import build_engine, create_db_and_tables
from .repositories import NotFoundError
from .routes import auth_routes, course_routes, student_routes, teacher_routes

logger = logging.getLogger("school_api.api")


def _request_log(request: Request, req_id: str, started: float, **extra) -> str:
    fields = {
        "request_id": req_id,
        "path": request.url.path,
        "method": request.method,
        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
        "client": request.client.host if request.client else "unknown",
    }
    fields.update(extra)
    return json.dumps(fields, ensure_ascii=True)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)

    engine = build_engine(settings.DATABASE_URL)
    create_db_and_tables(engine)

    app = FastAPI(title="School API")
    app.state.settings = settings
    app.state.engine = engine

    if settings.ALLOW_DEV_CORS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
        request.state.request_id = req_id
        started = time.perf_counter()
        response: Response
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("request_failed %s", _request_log(request, req_id, started))
            raise
        response.headers["X-Request-ID"] = req_id
        logger.info("request_done %s", _request_log(request, req_id, started, status_code=response.status_code))
        return response

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"message": "Not found"})

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: Exception):
        logger.error("storage_error %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    # the SQLite driver raises this itself, unwrapped, for ints beyond 64 bits
    app.add_exception_handler(OverflowError, storage_error_handler)

    @app.get("/", response_class=PlainTextResponse)
    def home():
        return "Welcome to School API!"

    @app.get("/health")
    def health():
        """Lightweight health check for uptime monitoring."""
        return {"status": "ok"}

    protected = [Depends(require_token)]
    app.include_router(auth_routes.router, prefix="/auth", tags=["Auth"])
    app.include_router(student_routes.router, prefix="/students", tags=["Students"], dependencies=protected)
    app.include_router(teacher_routes.router, prefix="/teachers", tags=["Teachers"], dependencies=protected)
    app.include_router(course_routes.router, prefix="/courses", tags=["Courses"], dependencies=protected)

    logger.info("School API ready (env=%s, database=%s)", settings.ENV, engine.url.render_as_string(hide_password=True))
    return app
