"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from deposit_report.config import Config
from deposit_report.datasources import DataSource, HttpReportDataSource
from deposit_report.export import ExcelArtifactWriter
from deposit_report.services import ExportService, PageFetcher
from deposit_report.api import router
from deposit_report.api.dependencies import set_datasource, set_export_service

logger = logging.getLogger(__name__)


def create_app(
    config: Config | None = None,
    datasource: DataSource | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.
    
    Args:
        config: Application configuration. If None, loads from environment.
        datasource: Report data source. If None, uses the HTTP report API.
        
    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = Config.from_env()
    
    # Create datasource
    if datasource is None:
        datasource = HttpReportDataSource(
            api_url=config.report_api_url,
            timeout=config.request_timeout,
        )
    
    export_service = ExportService(
        fetcher=PageFetcher(datasource, page_size=config.page_size),
        writer=ExcelArtifactWriter(config.export_dir),
        max_pages=config.max_export_pages,
    )
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown."""
        # Startup
        logger.info("Starting Deposit Report API")
        logger.info(f"Using report API: {config.report_api_url}")
        logger.info(f"Writing exports to: {config.export_dir}")
        
        set_datasource(datasource)
        set_export_service(export_service)
        
        yield
        
        # Shutdown
        logger.info("Shutting down...")
        await datasource.close()
    
    app = FastAPI(
        title="Deposit Report API",
        description="Paginated deposit report browsing and full Excel export",
        version="1.0.0",
        lifespan=lifespan,
    )
    
    # Include API routes
    app.include_router(router)
    
    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}
    
    return app
