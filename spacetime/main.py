from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pathlib import Path
from sqlalchemy.exc import SQLAlchemyError
import time

from spacetime.routers import memories, upload
from spacetime.config import settings
from spacetime.database import Base, engine
from spacetime.exceptions import SpacetimeError
from spacetime.models import memory  # noqa: F401  registers the memories table
from spacetime.spacetime_logger import logger

app = FastAPI(
    title="Spacetime",
    description="Memories journaling API with media uploads",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    docs_url="/api/docs" if settings.DEBUG else None,
    redoc_url="/api/redoc" if settings.DEBUG else None,
)

logger.info(f"Server starting... Version: {settings.APP_VERSION}, Debug: {settings.DEBUG}")

# Web and mobile client dev servers
allowed_origins = [
    "http://localhost:3000",
    "http://localhost:8081",
    "http://localhost:3333",
]

if settings.CORS_ORIGINS:
    allowed_origins.extend(settings.CORS_ORIGINS.split(","))

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["Content-Type", "Authorization"],
    max_age=3600,
)

@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    log_dict = {
        "request": {
            "url": request.url,
            "method": request.method,
        }
    }
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    log_dict["status"] = response.status_code
    log_dict["process Time"] = process_time
    logger.info(log_dict)
    return response

@app.exception_handler(SpacetimeError)
async def spacetime_error_handler(request: Request, exc: SpacetimeError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

async def internal_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})

# Any other failure is a generic 500 with no detail
app.add_exception_handler(SQLAlchemyError, internal_error_handler)
app.add_exception_handler(OSError, internal_error_handler)
app.add_exception_handler(Exception, internal_error_handler)

app.include_router(memories.router)
app.include_router(upload.router)

upload_dir = Path(settings.UPLOAD_DIR)
upload_dir.mkdir(parents=True, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=upload_dir), name="uploads")

@app.get("/health")
async def root():
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "message": "Spacetime API is running"
    }

@app.on_event("startup")
async def startup_event():
    Base.metadata.create_all(bind=engine)
    mode = "authenticated" if settings.AUTH_ENABLED else "open (no auth, no ownership checks)"
    logger.info(f"Application startup complete, memories routes running in {mode} mode")

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")
