"""
Health Check Router
==================
Endpoints for health checks and readiness probes.
"""
from fastapi import APIRouter, Request

from salary_calc import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check(request: Request):
    """
    Readiness check endpoint.
    Ready once the calculator configuration has been attached at startup.
    """
    config = getattr(request.app.state, "calculator", None)
    if config is None:
        return {"status": "starting"}
    return {"status": "ready", "catalog_size": len(config.catalog)}
