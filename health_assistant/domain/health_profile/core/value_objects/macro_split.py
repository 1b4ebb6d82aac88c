"""MacroSplit value object - macronutrient distribution."""

from dataclasses import dataclass

CARBS_KCAL_PER_G = 4.0
PROTEIN_KCAL_PER_G = 4.0
FAT_KCAL_PER_G = 9.0


@dataclass(frozen=True)
class MacroSplit:
    """Daily macronutrient targets in grams.

    Attributes:
        carbs_g: Carbohydrates in grams
        protein_g: Protein in grams
        fat_g: Fat in grams
    """

    carbs_g: float
    protein_g: float
    fat_g: float

    def total_calories(self) -> float:
        """Calculate total calories from macronutrients.

        Returns:
            float: carbs×4 + protein×4 + fat×9

        Example:
            >>> MacroSplit(carbs_g=250.0, protein_g=150.0, fat_g=400 / 9).total_calories()
            2000.0
        """
        return (
            self.carbs_g * CARBS_KCAL_PER_G
            + self.protein_g * PROTEIN_KCAL_PER_G
            + self.fat_g * FAT_KCAL_PER_G
        )
