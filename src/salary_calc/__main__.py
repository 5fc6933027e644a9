"""CLI entry-point for salary_calc.

Usage:
    python -m salary_calc convert <rate> [--hours-per-day N] [--days-per-week N]
                                         [--weeks-per-year N] [--mode fixed|custom] [--json]
    python -m salary_calc slug <slug> [--json]
    python -m salary_calc page <slug> [--json]
    python -m salary_calc serve [--host HOST] [--port PORT] [--reload]
"""

from __future__ import annotations

import argparse
import logging
import sys

from salary_calc import __version__
from salary_calc.content.formatting import format_currency
from salary_calc.content.generator import generate
from salary_calc.core.converter import convert
from salary_calc.core.links import build_job_search_url
from salary_calc.core.related import find_related
from salary_calc.core.slugs import parse_slug
from salary_calc.model import ScheduleMode
from salary_calc.model.breakdown import PERIODS
from salary_calc.utils.exit_codes import ExitCode
from salary_calc.utils.json_norm import stable_json_dumps

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="salary-calc",
        description="Convert hourly wages to salaries and preview landing pages.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="command")

    conv_p = sub.add_parser("convert", help="Convert an hourly rate to period amounts.")
    conv_p.add_argument("rate", help="Hourly rate, e.g. 30 or 24.5")
    conv_p.add_argument("--hours-per-day", type=float, default=8)
    conv_p.add_argument("--days-per-week", type=float, default=5)
    conv_p.add_argument("--weeks-per-year", type=float, default=52)
    conv_p.add_argument(
        "--mode",
        choices=[m.value for m in ScheduleMode],
        default=ScheduleMode.CUSTOM.value,
        help="fixed: standard 2080 h/year page figures; custom: use the schedule flags.",
    )
    conv_p.add_argument("--json", action="store_true", help="Emit JSON.")

    slug_p = sub.add_parser("slug", help="Interpret a /salary-calculator/<slug>/ segment.")
    slug_p.add_argument("slug")
    slug_p.add_argument("--json", action="store_true", help="Emit JSON.")

    page_p = sub.add_parser("page", help="Print the generated copy for a slug.")
    page_p.add_argument("slug")
    page_p.add_argument("--json", action="store_true", help="Emit JSON.")

    serve_p = sub.add_parser("serve", help="Run the web app with uvicorn.")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)
    serve_p.add_argument("--reload", action="store_true")

    return p


# ── convert ─────────────────────────────────────────────────────────


def _handle_convert(args: argparse.Namespace) -> int:
    result = convert(
        args.rate,
        args.hours_per_day,
        args.days_per_week,
        args.weeks_per_year,
        mode=ScheduleMode(args.mode),
    )
    if result is None:
        print(f"error: rate does not convert to finite amounts: {args.rate!r}", file=sys.stderr)
        return ExitCode.NO_RESULT

    if args.json:
        sys.stdout.write(stable_json_dumps({"mode": args.mode, "breakdown": result}))
        return ExitCode.SUCCESS

    print(f"{'hourly':<10}{format_currency(result.hourly)}")
    for period in PERIODS:
        print(f"{period:<10}{format_currency(result.amount(period))}")
    return ExitCode.SUCCESS


# ── slug / page ─────────────────────────────────────────────────────


def _handle_slug(args: argparse.Namespace) -> int:
    match = parse_slug(args.slug)
    if match is None:
        print(f"no match: {args.slug}", file=sys.stderr)
        return ExitCode.NO_RESULT

    payload = {
        "slug": args.slug,
        "hourly_rate": match.hourly_rate,
        "unit": match.unit,
        "related_rates": find_related(match.hourly_rate),
        "job_search_url": build_job_search_url(match.hourly_rate),
    }
    if args.json:
        sys.stdout.write(stable_json_dumps(payload))
        return ExitCode.SUCCESS

    print(f"hourly rate: {match.hourly_rate:.4f}")
    print(f"unit:        {match.unit.value}")
    print(f"related:     {', '.join(f'{r:g}' for r in payload['related_rates'])}")
    print(f"jobs:        {payload['job_search_url']}")
    return ExitCode.SUCCESS


def _handle_page(args: argparse.Namespace) -> int:
    match = parse_slug(args.slug)
    content = generate(match.hourly_rate, match.unit) if match else None
    if content is None:
        print(f"no match: {args.slug}", file=sys.stderr)
        return ExitCode.NO_RESULT

    if args.json:
        sys.stdout.write(stable_json_dumps(content.to_dict()))
        return ExitCode.SUCCESS

    print(content.title)
    print()
    print(content.intro)
    for section in content.sections.values():
        print()
        print(f"## {section.title}")
        print(section.content)
    return ExitCode.SUCCESS


# ── serve ───────────────────────────────────────────────────────────


def _handle_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from salary_calc.web_api.config import settings

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = args.host or settings.HOST
    port = args.port or settings.PORT
    logger.info(f"Serving on http://{host}:{port}")
    uvicorn.run(
        "salary_calc.web_api.main:app",
        host=host,
        port=port,
        reload=args.reload,
    )
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point. Returns an exit code (0 = result, 1 = no result, 2 = error)."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    handlers = {
        "convert": _handle_convert,
        "slug": _handle_slug,
        "page": _handle_page,
        "serve": _handle_serve,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help(sys.stderr)
        return ExitCode.ERROR
    return int(handler(args))


if __name__ == "__main__":
    raise SystemExit(main())
