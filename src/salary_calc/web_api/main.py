"""
FastAPI Application
==================
Main entry point for the SalaryCalc site.

Run with:
    uvicorn salary_calc.web_api.main:app --reload
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from salary_calc import __version__
from salary_calc.policy import CalculatorConfig
from salary_calc.web_api.config import Settings, settings as default_settings
from salary_calc.web_api.routers import health, pages, widget
from salary_calc.web_api.templating import templates

logger = logging.getLogger(__name__)


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Render the 404 page; other HTTP errors keep FastAPI's default body."""
    if exc.status_code != 404:
        return await http_exception_handler(request, exc)
    site_name = request.app.state.settings.SITE_NAME
    return templates.TemplateResponse(
        request,
        "404.html",
        {
            "title": f"Page Not Found | {site_name}",
            "meta_description": "Page not found",
            "current_path": request.url.path,
            "site_name": site_name,
        },
        status_code=404,
    )


async def server_error_handler(request: Request, exc: Exception):
    """Log the failure and answer with a generic page."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return HTMLResponse("Something went wrong!", status_code=500)


def create_app(
    settings: Optional[Settings] = None,
    calculator: Optional[CalculatorConfig] = None,
) -> FastAPI:
    """Build the application with its configuration attached to ``app.state``."""
    settings = settings or default_settings
    calculator = calculator or CalculatorConfig(related_limit=settings.RELATED_RATES_LIMIT)

    app = FastAPI(
        title="SalaryCalc",
        description="Hourly wage to salary conversion pages",
        version=__version__,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )
    app.state.settings = settings
    app.state.calculator = calculator

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.add_exception_handler(Exception, server_error_handler)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(widget.router, prefix="/api", tags=["Widget"])
    app.include_router(pages.router, tags=["Pages"])

    return app


app = create_app()


# For running directly: python -m salary_calc.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
