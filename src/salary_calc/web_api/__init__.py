"""
SalaryCalc Web App
==================
FastAPI application serving the calculator landing pages and the
interactive-calculator JSON endpoint.

Quick Start:
    uvicorn salary_calc.web_api.main:app --reload
"""
from .main import app, create_app

__all__ = ["app", "create_app"]
