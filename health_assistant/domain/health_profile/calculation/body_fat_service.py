"""Body fat percentage estimation (US Navy and BMI methods)."""

import math
from typing import Dict, Optional, Tuple

import structlog

from ..core.entities.user_record import UserRecord
from ..core.ports.calculators import IBodyFatCalculator
from ..core.value_objects.bfp_method import BfpMethod
from ..core.value_objects.body_fat import (
    HIGH,
    LOW,
    NORMAL,
    VERY_HIGH,
    BodyFatResult,
)
from ..core.value_objects.gender import Gender

logger = structlog.get_logger(__name__)

AGE_OUT_OF_RANGE_NOTE = (
    "The body fat category cannot be determined because you are outside "
    "of the permitted age range."
)

# (min_age, max_age, (low, normal, high)) upper bounds, compared with "<"
_US_NAVY_THRESHOLDS: Dict[Gender, Tuple[Tuple[int, int, Tuple[float, float, float]], ...]] = {
    Gender.FEMALE: (
        (20, 39, (21, 33, 39)),
        (40, 59, (23, 34, 40)),
        (60, 79, (24, 36, 42)),
    ),
    Gender.MALE: (
        (20, 39, (8, 20, 25)),
        (40, 59, (11, 22, 28)),
        (60, 79, (13, 25, 30)),
    ),
}

_BMI_THRESHOLDS = (18.5, 25.0, 30.0)


def _level(value: float, thresholds: Tuple[float, float, float]) -> str:
    low, normal, high = thresholds
    if value < low:
        return LOW
    if value < normal:
        return NORMAL
    if value < high:
        return HIGH
    return VERY_HIGH


def us_navy_category(bfp: float, gender: Gender, age: int) -> Optional[str]:
    """Classify a US Navy body fat percentage.

    Args:
        bfp: Untruncated body fat percentage
        gender: Gender of the user
        age: Age in years

    Returns:
        Category label such as "USNavy: Normal", or None when the age is
        outside 20-79

    Example:
        >>> us_navy_category(20.0, Gender.MALE, 30)
        'USNavy: High'
    """
    for min_age, max_age, thresholds in _US_NAVY_THRESHOLDS[gender]:
        if min_age <= age <= max_age:
            return BfpMethod.US_NAVY.label(_level(bfp, thresholds))
    return None


def bmi_category(bmi: float) -> str:
    """Classify a BMI value (independent of gender and age).

    Example:
        >>> bmi_category(22.86)
        'Bmi: Normal'
    """
    return BfpMethod.BMI.label(_level(bmi, _BMI_THRESHOLDS))


class USNavyBodyFatService(IBodyFatCalculator):
    """Estimate body fat with the US Navy circumference method.

    Formula (all measurements in cm):
        Women: 495 / (1.29579 - 0.35004·log10(waist + hip - neck)
                      + 0.22100·log10(height)) - 450
        Men:   495 / (1.03240 - 0.19077·log10(waist - neck)
                      + 0.15456·log10(height)) - 450

    The category depends on gender and a 20-39 / 40-59 / 60-79 age band.
    Measurements must keep the log arguments positive; violations surface
    as the ValueError raised by math.log10.
    """

    def raw_percent(self, record: UserRecord, gender: Gender) -> float:
        if gender is Gender.FEMALE:
            return (
                495.0
                / (
                    1.29579
                    - 0.35004 * math.log10(record.waist + record.hip - record.neck)
                    + 0.22100 * math.log10(record.height)
                )
                - 450.0
            )
        return (
            495.0
            / (
                1.0324
                - 0.19077 * math.log10(record.waist - record.neck)
                + 0.15456 * math.log10(record.height)
            )
            - 450.0
        )

    def calculate(self, record: UserRecord) -> BodyFatResult:
        gender = Gender.match(record.gender)
        if gender is None:
            logger.warning(
                "Unsupported gender for body fat estimation",
                name=record.name,
                gender=record.gender,
            )
            return BodyFatResult(
                percent=0,
                note=f"The gender '{record.gender}' is not supported.",
            )

        bfp = self.raw_percent(record, gender)
        category = us_navy_category(bfp, gender, record.age)
        if category is None:
            logger.info(AGE_OUT_OF_RANGE_NOTE, name=record.name, age=record.age)
            return BodyFatResult(percent=int(bfp), note=AGE_OUT_OF_RANGE_NOTE)

        return BodyFatResult(percent=int(bfp), category=category)


class BmiBodyFatService(IBodyFatCalculator):
    """Use Body Mass Index as a body fat stand-in.

    Formula:
        BMI = weight(kg) × 10000 / height(cm)²

    Categories: <18.5 Low, <25 Normal, <30 High, otherwise Very High.
    """

    def calculate(self, record: UserRecord) -> BodyFatResult:
        bmi = (record.weight * 100 * 100) / (record.height * record.height)
        return BodyFatResult(percent=int(bmi), category=bmi_category(bmi))


_CALCULATORS: Dict[BfpMethod, IBodyFatCalculator] = {
    BfpMethod.BMI: BmiBodyFatService(),
    BfpMethod.US_NAVY: USNavyBodyFatService(),
}


def compute_bfp(method: BfpMethod, record: UserRecord) -> BodyFatResult:
    """Run one body fat method and write the result onto the record.

    Args:
        method: Estimation method
        record: Record to update in place

    Returns:
        BodyFatResult: The values written, with any informational note
    """
    result = _CALCULATORS[BfpMethod(method)].calculate(record)
    record.apply_body_fat(result)
    return result
