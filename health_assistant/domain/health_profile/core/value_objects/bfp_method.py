"""BfpMethod value object - body fat estimation method selector."""

from enum import Enum
from typing import Optional


class BfpMethod(str, Enum):
    """Body fat percentage estimation method.

    Values are the selectors accepted by the population statistics
    queries ("bmi" and "USArmy"). Each method labels its categories with
    its own prefix, e.g. "Bmi: Normal" or "USNavy: Normal".
    """

    BMI = "bmi"
    US_NAVY = "USArmy"

    @property
    def label_prefix(self) -> str:
        prefixes = {
            BfpMethod.BMI: "Bmi",
            BfpMethod.US_NAVY: "USNavy",
        }
        return prefixes[self]

    def label(self, level: str) -> str:
        """Build a category label for this method.

        Example:
            >>> BfpMethod.BMI.label("High")
            'Bmi: High'
        """
        return f"{self.label_prefix}: {level}"

    @property
    def normal_label(self) -> str:
        return self.label("Normal")

    @classmethod
    def parse(cls, selector: Optional[str]) -> Optional["BfpMethod"]:
        """Resolve a method selector.

        Returns:
            BfpMethod, or None for None, "all" and unknown selectors
        """
        if selector is None:
            return None
        if isinstance(selector, BfpMethod):
            return selector
        for method in cls:
            if method.value.lower() == selector.strip().lower():
                return method
        return None
