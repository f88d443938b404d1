"""Nutrient scaling and diary aggregation."""

from collections.abc import Iterable

from fitness_tracker.domain.foods import FoodEntry, FoodItem, MealType
from fitness_tracker.domain.nutrition import MICRONUTRIENT_FIELDS, NutrientTotals


def scale_nutrients(food: FoodItem, quantity: float) -> NutrientTotals:
    """Scale a per-serving profile to an absolute amount for ``quantity``.

    ``food.serving_size`` must be positive; foods are validated on creation.
    Micronutrients are only scaled when the food carries them.
    """
    factor = quantity / food.serving_size
    return NutrientTotals(
        calories=food.calories * factor,
        protein=food.protein * factor,
        carbs=food.carbs * factor,
        fat=food.fat * factor,
        fiber=food.fiber * factor,
        micronutrients={
            key: value * factor
            for key, value in food.micronutrients.items()
            if key in MICRONUTRIENT_FIELDS and value is not None
        },
    )


def entry_totals(entry: FoodEntry) -> NutrientTotals:
    """Return the stored snapshot of an entry as NutrientTotals."""
    return NutrientTotals(
        calories=entry.total_calories,
        protein=entry.total_protein,
        carbs=entry.total_carbs,
        fat=entry.total_fat,
        fiber=entry.total_fiber,
        micronutrients=dict(entry.total_micronutrients),
    )


def sum_entries(
    entries: Iterable[FoodEntry],
    date: str | None = None,
    meal_type: MealType | None = None,
) -> NutrientTotals:
    """Sum entry totals, optionally restricted to a day key and meal type."""
    total = NutrientTotals()
    for entry in entries:
        if date is not None and entry.date != date:
            continue
        if meal_type is not None and entry.meal_type != meal_type:
            continue
        total = total + entry_totals(entry)
    return total


def percentage_of(value: float, target: float) -> float:
    """Return value as a percentage of target, 0 when there is no target."""
    if target == 0:
        return 0.0
    return value / target * 100
