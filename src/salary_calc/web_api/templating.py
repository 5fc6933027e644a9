"""Jinja2 environment shared by the page routers and error handlers."""

from __future__ import annotations

from pathlib import Path

from fastapi.templating import Jinja2Templates

from salary_calc.content.formatting import display_rate, format_currency
from salary_calc.core.slugs import page_path

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
templates.env.trim_blocks = True
templates.env.lstrip_blocks = True

# Custom filters
templates.env.filters["currency"] = format_currency
templates.env.filters["rate"] = display_rate
templates.env.filters["rate_url"] = page_path
