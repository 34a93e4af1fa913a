"""
pagecms - Main Application Entry Point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pagecms.api import pages, sections
from pagecms.core.config import get_settings
from pagecms.core.database import AsyncSessionLocal, close_db, init_db
from pagecms.middleware.security import setup_security_middleware
from pagecms.services.exceptions import ContentServiceError
from pagecms.services.page_service import PageService
from pagecms.services.section_errors import SectionValidationError

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"Starting {settings.app_name} {settings.app_version}...")
    logger.info(f"Debug mode: {settings.debug}")
    await init_db()
    async with AsyncSessionLocal() as session:
        created = await PageService(session).initialize_fixed_pages()
    logger.info(f"Database initialized ({len(created)} fixed pages created)")
    yield
    logger.info(f"Shutting down {settings.app_name}...")
    await close_db()
    logger.info("Database connections closed")


app = FastAPI(
    title="pagecms API",
    description="Multi-language content backend for fixed site pages",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
setup_security_middleware(app)


# ============== Exception Handlers ==============


@app.exception_handler(SectionValidationError)
async def section_validation_error_handler(request: Request, exc: SectionValidationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.response.to_payload()})


@app.exception_handler(ContentServiceError)
async def content_service_error_handler(request: Request, exc: ContentServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Include routers
cms_prefix = f"{settings.api_prefix}/cms"
app.include_router(pages.router, prefix=cms_prefix, tags=["Pages"])
app.include_router(sections.router, prefix=cms_prefix, tags=["Sections"])


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.app_version}


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pagecms.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
