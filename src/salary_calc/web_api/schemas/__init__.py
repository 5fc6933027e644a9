"""
Pydantic Schemas
===============
Response models for the JSON endpoints.
"""
from .convert import ConvertResponse, ScheduleModel, BreakdownModel

__all__ = ["ConvertResponse", "ScheduleModel", "BreakdownModel"]
