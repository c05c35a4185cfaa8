from contextlib import asynccontextmanager
import logging
import os
import time

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from workforce.core.errors import WorkforceError
from workforce.core.logging import configure_logging
from workforce import models  # noqa: F401
from workforce.routers.attendance import router as attendance_router
from workforce.routers.auth import router as auth_router
from workforce.routers.departments import router as departments_router
from workforce.routers.employees import router as employees_router
from workforce.routers.leave import router as leave_router
from workforce.routers.overtime import router as overtime_router
from workforce.routers.profiles import router as profiles_router
from workforce.routers.projects import router as projects_router
from workforce.routers.reports import router as reports_router
from workforce.routers.tasks import router as tasks_router
from workforce.routers.time_sessions import router as time_sessions_router
from workforce.routers.work_hours import router as work_hours_router

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    yield


app = FastAPI(
    title="Workforce Hub",
    version=VERSION,
    lifespan=lifespan,
)


# Registered before log_requests, so the request log wraps it and records the 500.
@app.middleware("http")
async def catch_unhandled_exceptions(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception(
            "Unhandled exception",
            extra={"method": request.method, "path": request.url.path},
        )
        return JSONResponse(status_code=500, content={"message": "Internal server error"})


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "%s %s", request.method, request.url.path,
        extra={
            "status_code": response.status_code,
            "duration_ms": round((time.perf_counter() - started) * 1000, 1),
        },
    )
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"message": "Invalid request data", "errors": errors})


@app.exception_handler(WorkforceError)
async def workforce_exception_handler(request: Request, exc: WorkforceError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


api_router = APIRouter(prefix=os.getenv("API_PREFIX", "/api"))
api_router.include_router(auth_router)
api_router.include_router(profiles_router)
api_router.include_router(departments_router)
api_router.include_router(employees_router)
api_router.include_router(tasks_router)
api_router.include_router(work_hours_router)
api_router.include_router(time_sessions_router)
api_router.include_router(projects_router)
api_router.include_router(leave_router)
api_router.include_router(attendance_router)
api_router.include_router(overtime_router)
api_router.include_router(reports_router)

app.include_router(api_router)


@app.get("/")
def root():
    return {"status": "Workforce Hub running"}


@app.get("/health")
def health():
    return {
        "status": "ok",
        "version": VERSION,
    }
