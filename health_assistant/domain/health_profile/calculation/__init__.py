"""Calculation services for the health profile."""

from .body_fat_service import (
    BmiBodyFatService,
    USNavyBodyFatService,
    bmi_category,
    compute_bfp,
    us_navy_category,
)
from .calorie_service import CalorieService
from .macro_service import MacroService

__all__ = [
    "BmiBodyFatService",
    "USNavyBodyFatService",
    "CalorieService",
    "MacroService",
    "bmi_category",
    "compute_bfp",
    "us_navy_category",
]
