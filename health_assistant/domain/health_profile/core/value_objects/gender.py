"""Gender value object."""

from enum import Enum
from typing import Optional


class Gender(str, Enum):
    """Biological sex used by the body fat and calorie tables."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional["Gender"]:
        """Parse free text into a Gender.

        Args:
            text: Raw input, case and surrounding whitespace ignored

        Returns:
            Gender or None if the value is not supported

        Example:
            >>> Gender.parse(" Female ")
            <Gender.FEMALE: 'female'>
        """
        if text is None:
            return None
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None

    @classmethod
    def match(cls, value: Optional[str]) -> Optional["Gender"]:
        """Exact lookup of a stored gender value, None if unsupported."""
        for gender in cls:
            if gender.value == value:
                return gender
        return None
