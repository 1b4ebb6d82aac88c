"""Calculator ports - interfaces for body fat, calorie and macro calculations."""

from abc import ABC, abstractmethod

from ..entities.user_record import UserRecord
from ..value_objects.body_fat import BodyFatResult
from ..value_objects.macro_split import MacroSplit


class IBodyFatCalculator(ABC):
    """Port for body fat percentage estimation."""

    @abstractmethod
    def calculate(self, record: UserRecord) -> BodyFatResult:
        """Estimate body fat percentage and category.

        Args:
            record: User record with raw measurements

        Returns:
            BodyFatResult: Truncated percentage and category
        """
        pass


class ICalorieEstimator(ABC):
    """Port for daily calorie target estimation."""

    @abstractmethod
    def calculate(self, gender: str, age: int, lifestyle: str) -> int:
        """Look up the daily calorie target.

        Returns:
            int: Calories per day, 0 when no target applies
        """
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient distribution calculation."""

    @abstractmethod
    def calculate(self, daily_calories: float) -> MacroSplit:
        """Split daily calories into carbs/protein/fat grams."""
        pass
