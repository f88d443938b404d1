"""Nutrition domain models."""

from dataclasses import dataclass, field

MACRO_FIELDS = ("calories", "protein", "carbs", "fat", "fiber")

VITAMIN_FIELDS = (
    "vitamin_a",
    "vitamin_c",
    "vitamin_d",
    "vitamin_b6",
    "vitamin_e",
    "vitamin_k",
    "thiamin",
    "vitamin_b12",
    "riboflavin",
    "folate",
    "niacin",
    "choline",
    "pantothenic_acid",
    "biotin",
    "carotenoids",
)

MINERAL_FIELDS = (
    "calcium",
    "chloride",
    "chromium",
    "copper",
    "fluoride",
    "iodine",
    "iron",
    "magnesium",
    "manganese",
    "molybdenum",
    "phosphorus",
    "potassium",
    "selenium",
    "sodium",
    "zinc",
)

MICRONUTRIENT_FIELDS = VITAMIN_FIELDS + MINERAL_FIELDS


@dataclass(frozen=True)
class NutrientTotals:
    """Absolute nutrient amounts for a portion, meal or day."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    micronutrients: dict[str, float] = field(default_factory=dict)

    def __add__(self, other: "NutrientTotals") -> "NutrientTotals":
        merged = dict(self.micronutrients)
        for key, value in other.micronutrients.items():
            merged[key] = merged.get(key, 0.0) + value
        return NutrientTotals(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
            fiber=self.fiber + other.fiber,
            micronutrients=merged,
        )

    @property
    def vitamins(self) -> dict[str, float]:
        """Vitamin subset of the micronutrient totals."""
        return {k: v for k, v in self.micronutrients.items() if k in VITAMIN_FIELDS}

    @property
    def minerals(self) -> dict[str, float]:
        """Mineral subset of the micronutrient totals."""
        return {k: v for k, v in self.micronutrients.items() if k in MINERAL_FIELDS}


@dataclass(frozen=True)
class FoodSummary:
    """Summary information about a food from FDC."""

    fdc_id: int
    description: str
    brand_owner: str | None
    brand_name: str | None
    data_type: str | None
    gtin_upc: str | None = None


@dataclass(frozen=True)
class FoodDetails:
    """Full FDC food details with a per-100g nutrient profile."""

    summary: FoodSummary
    nutrients: NutrientTotals
    serving_size: float | None
    serving_unit: str | None
