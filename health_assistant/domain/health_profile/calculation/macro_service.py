"""MacroService - macronutrient breakdown of the daily calorie target."""

from ..core.entities.user_record import UserRecord
from ..core.ports.calculators import IMacroCalculator
from ..core.value_objects.macro_split import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    MacroSplit,
)

CARBS_SHARE = 0.50
PROTEIN_SHARE = 0.30
FAT_SHARE = 0.20


class MacroService(IMacroCalculator):
    """Split daily calories into macronutrient grams.

    Shares of calories:
        - Carbohydrates: 50% (4 kcal/g)
        - Protein: 30% (4 kcal/g)
        - Fat: 20% (9 kcal/g)

    Values are not rounded.
    """

    def calculate(self, daily_calories: float) -> MacroSplit:
        """Calculate macro distribution.

        Example:
            >>> split = MacroService().calculate(2000)
            >>> split.carbs_g, split.protein_g
            (250.0, 150.0)
        """
        return MacroSplit(
            carbs_g=daily_calories * CARBS_SHARE / CARBS_KCAL_PER_G,
            protein_g=daily_calories * PROTEIN_SHARE / PROTEIN_KCAL_PER_G,
            fat_g=daily_calories * FAT_SHARE / FAT_KCAL_PER_G,
        )

    def apply(self, record: UserRecord) -> MacroSplit:
        """Compute macros from the record's daily calories and store them.

        Only meaningful once daily_calories has been computed.
        """
        split = self.calculate(record.daily_calories)
        record.apply_macros(split)
        return split
