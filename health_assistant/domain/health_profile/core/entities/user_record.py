"""UserRecord entity - one person's measurements and derived metrics."""

from dataclasses import dataclass
from typing import Optional

from ..value_objects.body_fat import BodyFatResult
from ..value_objects.gender import Gender
from ..value_objects.lifestyle import Lifestyle
from ..value_objects.macro_split import MacroSplit


@dataclass
class UserRecord:
    """Raw anthropometric data plus the metrics computed from it.

    Records are mutated in place by the calculators. Derived fields stay at
    their zero/None defaults until a body fat method has been run, so a
    record freshly parsed from storage only carries raw attributes.

    Attributes:
        name: Roster key (not required to be unique)
        gender: "male" or "female"; other values are kept as-is and yield
            zero/unset results when computed
        age: Age in years
        weight: Body weight in kg
        height: Height in cm
        waist: Waist circumference in cm
        neck: Neck circumference in cm
        hip: Hip circumference in cm, only meaningful for females
        lifestyle: "sedentary", "moderate" or "active"
    """

    name: str
    gender: str
    age: int
    weight: float
    height: float
    waist: float
    neck: float
    hip: float = 0.0
    lifestyle: str = ""

    # derived
    body_fat_percent: int = 0
    body_fat_category: Optional[str] = None
    daily_calories: int = 0
    carbs_g: float = 0.0
    protein_g: float = 0.0
    fat_g: float = 0.0

    @classmethod
    def create(
        cls,
        name: str,
        gender: str,
        age: int,
        weight: float,
        height: float,
        waist: float,
        neck: float,
        lifestyle: str,
        hip: float = 0.0,
    ) -> "UserRecord":
        """Create a record from collected input.

        Name, gender and lifestyle are trimmed and lowercased, and "moderately"
        becomes "moderate". Unsupported genders and lifestyles are kept. Hip is
        dropped to 0.0 for anyone but females.

        Example:
            >>> UserRecord.create("  John ", "Male", 30, 80, 180, 90, 40, "active").name
            'john'
        """
        parsed_gender = Gender.parse(gender)
        gender = parsed_gender.value if parsed_gender else gender.strip().lower()
        parsed_lifestyle = Lifestyle.parse(lifestyle)
        lifestyle = parsed_lifestyle.value if parsed_lifestyle else lifestyle.strip().lower()
        return cls(
            name=name.strip().lower(),
            gender=gender,
            age=int(age),
            weight=float(weight),
            height=float(height),
            waist=float(waist),
            neck=float(neck),
            hip=float(hip) if gender == Gender.FEMALE.value else 0.0,
            lifestyle=lifestyle,
        )

    @property
    def is_female(self) -> bool:
        return self.gender == Gender.FEMALE.value

    def has_body_fat(self) -> bool:
        """Whether a body fat category has been assigned."""
        return self.body_fat_category is not None

    def apply_body_fat(self, result: BodyFatResult) -> None:
        self.body_fat_percent = result.percent
        self.body_fat_category = result.category

    def apply_macros(self, split: MacroSplit) -> None:
        self.carbs_g = split.carbs_g
        self.protein_g = split.protein_g
        self.fat_g = split.fat_g

    def macro_split(self) -> MacroSplit:
        return MacroSplit(
            carbs_g=self.carbs_g,
            protein_g=self.protein_g,
            fat_g=self.fat_g,
        )
