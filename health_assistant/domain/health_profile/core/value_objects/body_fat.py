"""BodyFatResult value object."""

from dataclasses import dataclass
from typing import Optional

# Category levels, lowest first
LOW = "Low"
NORMAL = "Normal"
HIGH = "High"
VERY_HIGH = "Very High"


@dataclass(frozen=True)
class BodyFatResult:
    """Outcome of a body fat computation.

    Attributes:
        percent: Body fat percentage truncated toward zero
        category: Category label (e.g. "USNavy: Normal"), None when it
            cannot be determined
        note: Human-readable message for non-fatal outcomes
    """

    percent: int
    category: Optional[str] = None
    note: Optional[str] = None

    @property
    def is_classified(self) -> bool:
        return self.category is not None
