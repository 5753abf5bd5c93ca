import logging
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.config import settings

# Setup Logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Job catalog and labor estimates for auto repair shops",
    docs_url="/docs",
    redoc_url="/redoc",
)

# --------------------------------------------------------------------------
# CORS Middleware
# --------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --------------------------------------------------------------------------
# Database Lifecycle
# --------------------------------------------------------------------------
from app.core.database import init_db, close_db

@app.on_event("startup")
async def on_startup():
    try:
        logger.info("Connecting to Database...")
        await init_db()
        logger.info("Database Connection Successful!")
    except Exception as e:
        # Estimates still work without the database; jobs lookups will 500
        logger.error(f"Database Connection FAILED: {e}")


@app.on_event("shutdown")
async def on_shutdown():
    close_db()

# --------------------------------------------------------------------------
# API Routers
# --------------------------------------------------------------------------
from app.api.v1 import api_router, API_V1_PREFIX, JOBS_PREFIX

app.include_router(api_router, prefix=API_V1_PREFIX)

# --------------------------------------------------------------------------
# Exception Handlers (JSON bodies in each endpoint's error shape)
# --------------------------------------------------------------------------
def _uses_jobs_envelope(request: Request) -> bool:
    return request.url.path.startswith(f"{API_V1_PREFIX}{JOBS_PREFIX}")


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)

    if _uses_jobs_envelope(request):
        content = {"error": "Method not allowed"}
    else:
        allowed = (exc.headers or {}).get("Allow", "")
        content = {
            "status": "error",
            "message": f"Method not allowed. Use {allowed}." if allowed else "Method not allowed."
        }

    return JSONResponse(status_code=405, content=content, headers=exc.headers)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error at {request.url.path}")

    if _uses_jobs_envelope(request):
        content = {"error": "Internal server error"}
    else:
        content = {"status": "error", "message": "Internal server error"}

    return JSONResponse(status_code=500, content=content)

# --------------------------------------------------------------------------
# Basic Routes
# --------------------------------------------------------------------------
@app.get("/")
async def root():
    return {
        "message": f"{settings.APP_NAME} is running",
        "version": settings.APP_VERSION,
        "docs": "/docs"
    }

@app.get("/health")
async def health_check():
    return {"status": "healthy"}
