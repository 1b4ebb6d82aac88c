"""Value objects for the health profile domain."""

from .bfp_method import BfpMethod
from .body_fat import BodyFatResult
from .gender import Gender
from .lifestyle import Lifestyle
from .macro_split import MacroSplit

__all__ = [
    "BfpMethod",
    "BodyFatResult",
    "Gender",
    "Lifestyle",
    "MacroSplit",
]
