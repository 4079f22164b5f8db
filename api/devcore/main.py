import logging
from datetime import datetime, timezone

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from devcore.config import get_settings, settings
from devcore.notifications import NotificationConfigError
from devcore.response import error_response
from devcore.routers import auth, system

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


app = FastAPI(
    title="devcore",
    description="Session cookie policy and owner notifications for web dev projects.",
    version=API_VERSION,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# CORS
_cors_origins = (
    [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    if settings.cors_origins
    else ["*"]
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Exception Handlers ---


@app.exception_handler(NotificationConfigError)
async def notification_config_exception_handler(request: Request, exc: NotificationConfigError):
    if exc.status_code >= 500:
        logger.error("Notification service misconfigured: %s", exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.status_code, exc.message),
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.status_code, exc.detail),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        clean = {k: v for k, v in err.items() if k != "ctx"}
        if "msg" in clean:
            clean["msg"] = str(clean["msg"])
        errors.append(clean)
    return JSONResponse(
        status_code=422,
        content=error_response(422, "Validation error", details=errors),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=error_response(500, "Internal server error"),
    )


# --- Routes ---

api_v1 = APIRouter(prefix="/v1")
api_v1.include_router(auth.router)
api_v1.include_router(system.router)
app.include_router(api_v1)


@app.get("/", summary="API root")
async def root():
    return {"name": get_settings().app_name, "status": "ok", "version": API_VERSION}


@app.get("/health", summary="Health check")
async def health_ping():
    current = get_settings()
    configured = bool(current.forge_api_url and current.forge_api_key)
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": API_VERSION,
        "checks": {"notifications": "configured" if configured else "unconfigured"},
    }
