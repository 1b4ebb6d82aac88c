"""Lifestyle value object - self-reported activity tier."""

from enum import Enum
from typing import Optional


class Lifestyle(str, Enum):
    """Activity tier driving the daily calorie target.

    - SEDENTARY: little or no exercise
    - MODERATE: light exercise/sports 1-3 days a week
    - ACTIVE: hard exercise/sports 3-5 days a week
    """

    SEDENTARY = "sedentary"
    MODERATE = "moderate"
    ACTIVE = "active"

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional["Lifestyle"]:
        """Parse free text into a Lifestyle.

        "moderately" is accepted as an alias of "moderate".

        Returns:
            Lifestyle or None if the value is not supported
        """
        if text is None:
            return None
        value = text.strip().lower()
        if value == "moderately":
            value = cls.MODERATE.value
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def match(cls, value: Optional[str]) -> Optional["Lifestyle"]:
        """Exact lookup of a stored lifestyle value, None if unsupported."""
        for lifestyle in cls:
            if lifestyle.value == value:
                return lifestyle
        return None
