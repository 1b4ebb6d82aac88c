"""CalorieService - daily calorie target lookup."""

from typing import Dict, Optional, Tuple

import structlog

from ..core.entities.user_record import UserRecord
from ..core.ports.calculators import ICalorieEstimator
from ..core.value_objects.gender import Gender
from ..core.value_objects.lifestyle import Lifestyle

logger = structlog.get_logger(__name__)

# Age brackets
YOUNG_ADULT = "19-30"
ADULT = "31-50"
SENIOR = "51+"

_CALORIE_TABLE: Dict[Tuple[Gender, str, Lifestyle], int] = {
    (Gender.MALE, YOUNG_ADULT, Lifestyle.SEDENTARY): 2400,
    (Gender.MALE, YOUNG_ADULT, Lifestyle.MODERATE): 2800,
    (Gender.MALE, YOUNG_ADULT, Lifestyle.ACTIVE): 3000,
    (Gender.MALE, ADULT, Lifestyle.SEDENTARY): 2200,
    (Gender.MALE, ADULT, Lifestyle.MODERATE): 2600,
    (Gender.MALE, ADULT, Lifestyle.ACTIVE): 3000,
    (Gender.MALE, SENIOR, Lifestyle.SEDENTARY): 2000,
    (Gender.MALE, SENIOR, Lifestyle.MODERATE): 2400,
    (Gender.MALE, SENIOR, Lifestyle.ACTIVE): 2800,
    (Gender.FEMALE, YOUNG_ADULT, Lifestyle.SEDENTARY): 2000,
    (Gender.FEMALE, YOUNG_ADULT, Lifestyle.MODERATE): 2200,
    (Gender.FEMALE, YOUNG_ADULT, Lifestyle.ACTIVE): 2400,
    (Gender.FEMALE, ADULT, Lifestyle.SEDENTARY): 1800,
    (Gender.FEMALE, ADULT, Lifestyle.MODERATE): 2000,
    (Gender.FEMALE, ADULT, Lifestyle.ACTIVE): 2200,
    (Gender.FEMALE, SENIOR, Lifestyle.SEDENTARY): 1600,
    (Gender.FEMALE, SENIOR, Lifestyle.MODERATE): 1800,
    (Gender.FEMALE, SENIOR, Lifestyle.ACTIVE): 2200,
}


def age_bracket(age: int) -> Optional[str]:
    """Map an age to its calorie bracket, None below 19."""
    if 19 <= age <= 30:
        return YOUNG_ADULT
    if 31 <= age <= 50:
        return ADULT
    if age > 50:
        return SENIOR
    return None


class CalorieService(ICalorieEstimator):
    """Estimate the daily calorie intake that maintains current weight.

    Pure lookup keyed by gender, age bracket (19-30, 31-50, over 50) and
    lifestyle. An unsupported gender is reported and yields 0. Ages under
    19 and unknown lifestyles have no table entry and also yield 0, without
    a report.
    """

    def calculate(self, gender: str, age: int, lifestyle: str) -> int:
        """Look up the daily calorie target.

        Example:
            >>> CalorieService().calculate("male", 25, "moderate")
            2800
        """
        parsed_gender = Gender.match(gender)
        if parsed_gender is None:
            logger.warning(
                "Intake calories could not be processed for unsupported gender",
                gender=gender,
            )
            return 0

        bracket = age_bracket(age)
        parsed_lifestyle = Lifestyle.match(lifestyle)
        if bracket is None or parsed_lifestyle is None:
            return 0
        return _CALORIE_TABLE[(parsed_gender, bracket, parsed_lifestyle)]

    def apply(self, record: UserRecord) -> int:
        """Compute and store the record's daily calorie target."""
        record.daily_calories = self.calculate(record.gender, record.age, record.lifestyle)
        return record.daily_calories
