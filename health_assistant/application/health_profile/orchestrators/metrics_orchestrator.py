"""MetricsOrchestrator - coordinates the calculation services."""

from dataclasses import dataclass
from typing import Optional

from health_assistant.domain.health_profile.calculation.body_fat_service import (
    compute_bfp,
)
from health_assistant.domain.health_profile.calculation.calorie_service import (
    CalorieService,
)
from health_assistant.domain.health_profile.calculation.macro_service import (
    MacroService,
)
from health_assistant.domain.health_profile.core.entities.user_record import UserRecord
from health_assistant.domain.health_profile.core.value_objects.bfp_method import (
    BfpMethod,
)
from health_assistant.domain.health_profile.core.value_objects.body_fat import (
    BodyFatResult,
)
from health_assistant.domain.health_profile.core.value_objects.macro_split import (
    MacroSplit,
)


@dataclass(frozen=True)
class MetricsCalculations:
    """Result of enriching one record."""

    body_fat: BodyFatResult
    daily_calories: int
    macro_split: MacroSplit


class MetricsOrchestrator:
    """
    Runs the full metrics pipeline on a record, in place.

    Flow:
    1. Body fat percentage and category with the selected method
    2. Daily calorie target from gender, age and lifestyle
    3. Macro breakdown of the calorie target
    """

    def __init__(
        self,
        calorie_service: Optional[CalorieService] = None,
        macro_service: Optional[MacroService] = None,
    ):
        self._calorie_service = calorie_service or CalorieService()
        self._macro_service = macro_service or MacroService()

    def body_fat(self, method: BfpMethod, record: UserRecord) -> BodyFatResult:
        return compute_bfp(method, record)

    def daily_calories(self, record: UserRecord) -> int:
        return self._calorie_service.apply(record)

    def meal_prep(self, record: UserRecord) -> MacroSplit:
        return self._macro_service.apply(record)

    def enrich(self, method: BfpMethod, record: UserRecord) -> MetricsCalculations:
        """
        Compute every derived field of the record.

        Args:
            method: Body fat method to run
            record: Record updated in place

        Returns:
            MetricsCalculations with the values written
        """
        body_fat = self.body_fat(method, record)
        daily_calories = self.daily_calories(record)
        macro_split = self.meal_prep(record)

        return MetricsCalculations(
            body_fat=body_fat,
            daily_calories=daily_calories,
            macro_split=macro_split,
        )
