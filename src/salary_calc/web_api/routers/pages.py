"""
Pages Router
============
HTML pages: home, static policy pages and the generated salary pages.
"""
import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import RedirectResponse

from salary_calc.content.generator import generate
from salary_calc.core.converter import convert
from salary_calc.core.links import build_job_search_url
from salary_calc.core.related import find_related
from salary_calc.core.slugs import page_path, parse_slug
from salary_calc.core.widget import recalculate
from salary_calc.model import ScheduleMode
from salary_calc.policy import CalculatorConfig
from salary_calc.web_api.config import Settings
from salary_calc.web_api.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter()

# Rate pre-filled in the home-page quick calculator.
QUICK_CALCULATOR_RATE = 25


def _config(request: Request) -> CalculatorConfig:
    return request.app.state.calculator


def _settings(request: Request) -> Settings:
    return request.app.state.settings


def _render(request: Request, name: str, **context):
    context.setdefault("site_name", _settings(request).SITE_NAME)
    return templates.TemplateResponse(request, name, context)


@router.get("/")
async def home(request: Request):
    """Home page with the quick calculator and popular rates."""
    config = _config(request)
    site_name = _settings(request).SITE_NAME
    popular = [
        {
            "rate": rate,
            "salaries": convert(rate, mode=ScheduleMode.FIXED, schedule=config.schedule),
            "url": page_path(rate),
        }
        for rate in config.popular_rates
    ]
    return _render(
        request,
        "index.html",
        title=f"Salary Calculator - Convert Hourly Wage to Annual Salary | {site_name}",
        meta_description=(
            "Free salary calculator to convert hourly wages to yearly, monthly, weekly "
            "income. Calculate your annual salary from $10 to $100 per hour."
        ),
        popular_rates=popular,
        quick=recalculate(QUICK_CALCULATOR_RATE, defaults=config.schedule),
        all_rates=config.catalog,
    )


@router.get("/about/")
async def about(request: Request):
    site_name = _settings(request).SITE_NAME
    return _render(
        request,
        "about.html",
        title=f"About Us | {site_name} - Salary Calculator",
        meta_description=(
            f"Learn about {site_name} - our mission, expertise, and how we help workers "
            "understand their earning potential."
        ),
    )


@router.get("/privacy-policy/")
async def privacy_policy(request: Request):
    site_name = _settings(request).SITE_NAME
    return _render(
        request,
        "privacy.html",
        title=f"Privacy Policy | {site_name}",
        meta_description=f"{site_name} privacy policy - how we collect, use, and protect your information.",
    )


@router.get("/cookie-policy/")
async def cookie_policy(request: Request):
    site_name = _settings(request).SITE_NAME
    return _render(
        request,
        "cookies.html",
        title=f"Cookie Policy | {site_name}",
        meta_description=f"{site_name} cookie policy - what cookies we use and how to manage them.",
    )


@router.get("/salary-calculator/{slug}/")
async def salary_page(request: Request, slug: str):
    """
    Generated salary page.

    - **slug**: e.g. ``30-dollar-per-hour``, ``80k-a-year-is-how-much-an-hour``,
      ``50000-dollars-per-year``, ``4000-dollars-per-month``,
      ``1500-a-week-is-how-much-a-year``
    """
    config = _config(request)
    settings = _settings(request)

    match = parse_slug(slug, schedule=config.schedule)
    if match is None:
        logger.debug(f"No slug pattern matched: {slug!r}")
        raise HTTPException(status_code=404, detail="Page not found")

    salaries = convert(match.hourly_rate, mode=ScheduleMode.FIXED, schedule=config.schedule)
    content = generate(match.hourly_rate, match.unit, site_name=settings.SITE_NAME)
    if salaries is None or content is None:
        raise HTTPException(status_code=404, detail="Page not found")

    related = find_related(match.hourly_rate, config.catalog, config.related_limit)

    return _render(
        request,
        "calculator.html",
        title=content.title,
        meta_description=content.meta_description,
        rate=content.display_rate,
        salaries=salaries,
        content=content,
        related_rates=related,
        widget=recalculate(match.hourly_rate, defaults=config.schedule),
        job_search_url=build_job_search_url(match.hourly_rate, settings.JOB_SEARCH_BASE_URL),
    )


@router.get("/salary-calculator/{slug}")
async def salary_page_redirect(slug: str):
    """Permanent redirect to the trailing-slash form."""
    return RedirectResponse(url=f"/salary-calculator/{slug}/", status_code=301)
