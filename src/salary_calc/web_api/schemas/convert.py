"""
Convert Schemas
===============
Response model for the interactive calculator endpoint.
"""
from pydantic import BaseModel, Field
from typing import Dict


class ScheduleModel(BaseModel):
    """Schedule actually used after defaults were applied"""

    hours_per_day: float = Field(default=8)
    days_per_week: float = Field(default=5)
    weeks_per_year: float = Field(default=52)


class BreakdownModel(BaseModel):
    """Raw period amounts"""

    hourly: float = Field(default=0.0)
    daily: float = Field(default=0.0)
    weekly: float = Field(default=0.0)
    biweekly: float = Field(default=0.0)
    monthly: float = Field(default=0.0)
    yearly: float = Field(default=0.0)


class ConvertResponse(BaseModel):
    """Response from a widget recalculation"""

    schedule: ScheduleModel
    breakdown: BreakdownModel
    display: Dict[str, str] = Field(default_factory=dict, description="Whole-dollar strings per period")
    detail_url: str = Field(..., description="Landing page for the rounded rate")

    class Config:
        json_schema_extra = {
            "example": {
                "schedule": {"hours_per_day": 8, "days_per_week": 5, "weeks_per_year": 52},
                "breakdown": {
                    "hourly": 30,
                    "daily": 240,
                    "weekly": 1200,
                    "biweekly": 2400,
                    "monthly": 5200,
                    "yearly": 62400
                },
                "display": {
                    "daily": "$240",
                    "weekly": "$1,200",
                    "biweekly": "$2,400",
                    "monthly": "$5,200",
                    "yearly": "$62,400"
                },
                "detail_url": "/salary-calculator/30-dollar-per-hour/"
            }
        }
