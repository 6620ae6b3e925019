"""Roster & Attendance Ledger web service."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from roster.core.config import settings
from roster.core.database import create_db_and_tables
from roster.core.errors import DuplicateNoOp, ErrorCode, RosterError
from roster.core.scheduler import shutdown_scheduler, start_scheduler
from roster.routes import actions, attendance, locations, participants, teams

# Configure logging
settings.log_dir.mkdir(parents=True, exist_ok=True)
log_file = settings.log_dir / "latest.log"

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    filename=str(log_file),
)
logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.VALIDATION_ERROR: 422,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.DUPLICATE_NO_OP: 304,
    ErrorCode.STORAGE_ERROR: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    # Startup
    logger.info("Starting Roster Ledger application")
    create_db_and_tables()
    start_scheduler()
    yield
    # Shutdown
    shutdown_scheduler()
    logger.info("Roster Ledger application shut down")


app = FastAPI(
    title=settings.app_name,
    description="Rosters of locations, teams and participants with attendance per action",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for external access
origins = (
    ["*"]
    if settings.allowed_origins == "*"
    else [o.strip() for o in settings.allowed_origins.split(",")]
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(locations.router)
app.include_router(teams.router)
app.include_router(participants.router)
app.include_router(actions.router)
app.include_router(attendance.router)


def error_body(code: str, message: str, **extra) -> dict:
    return {"error": {"code": code, "message": message, **extra}}


@app.exception_handler(DuplicateNoOp)
async def duplicate_handler(request: Request, exc: DuplicateNoOp):
    """Existing attendance: 304 without a body, pointing at the stored record."""
    return Response(
        status_code=ERROR_STATUS[exc.code],
        headers={"Content-Location": f"/attendance/{exc.attendance_id}"},
    )


@app.exception_handler(RosterError)
async def roster_error_handler(request: Request, exc: RosterError):
    status_code = ERROR_STATUS[exc.code]
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status_code,
        content=error_body(exc.code.value, exc.message),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content=error_body(
            ErrorCode.VALIDATION_ERROR.value,
            "Request failed validation",
            details=jsonable_encoder(exc.errors()),
        ),
    )


@app.get("/ping", response_class=PlainTextResponse)
async def ping():
    """Liveness probe."""
    return "pong"


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}
