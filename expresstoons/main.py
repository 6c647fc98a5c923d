"""Main FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from expresstoons import __version__
from expresstoons.config import settings
from expresstoons.routers import studio_router
from expresstoons.routers.studio import error_detail
from expresstoons.services.session import get_session, close_session


STATIC_DIR = Path(__file__).parent / "static"


# Configure loguru
logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    level=settings.log_level,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(f"Starting ExpressToons v{__version__}")
    logger.info(f"Server running on {settings.host}:{settings.port}")
    logger.info(f"Model: {settings.model} via {settings.gemini_base_api}")
    logger.info(f"Proxy: {settings.proxy or 'None'}")
    logger.info(f"Timeout: {f'{settings.timeout}s' if settings.timeout else 'client default'}")

    await get_session()

    yield

    logger.info("Shutting down...")
    await close_session()
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="ExpressToons",
    description="Generate single-panel cartoons and edit images with Gemini",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers
app.include_router(studio_router, tags=["Studio"])


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed form fields in the same envelope as every other error."""
    message = "; ".join(
        f"{error['loc'][-1]}: {error['msg']}" for error in exc.errors()
    )
    logger.warning(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=400,
        content={"detail": error_detail(400, message, "INVALID_ARGUMENT")},
    )


@app.get("/", include_in_schema=False)
async def index() -> FileResponse:
    """Serve the browser UI."""
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/health", tags=["Health"])
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


def run():
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "expresstoons.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
