"""
Widget Router
=============
JSON endpoint behind the interactive calculator.
"""
from typing import Optional

from fastapi import APIRouter

from salary_calc.core.widget import recalculate
from salary_calc.web_api.schemas.convert import (
    BreakdownModel,
    ConvertResponse,
    ScheduleModel,
)

router = APIRouter()


@router.get("/convert", response_model=ConvertResponse)
async def convert_rate(
    rate: Optional[str] = None,
    hours_per_day: Optional[str] = None,
    days_per_week: Optional[str] = None,
    weeks_per_year: Optional[str] = None,
):
    """
    Recalculate the widget figures.

    Values arrive exactly as typed; blank, unparsable or zero fields fall
    back to 0 (rate) or the standard 8 h / 5 d / 52 wk schedule.
    """
    result = recalculate(rate, hours_per_day, days_per_week, weeks_per_year)
    return ConvertResponse(
        schedule=ScheduleModel(
            hours_per_day=result.schedule.hours_per_day,
            days_per_week=result.schedule.days_per_week,
            weeks_per_year=result.schedule.weeks_per_year,
        ),
        breakdown=BreakdownModel(**result.breakdown.to_dict()),
        display=result.display,
        detail_url=result.detail_url,
    )
