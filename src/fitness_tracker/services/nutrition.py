"""Nutrition lookups against USDA FoodData Central."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fitness_tracker.adapters.fdc_client import FdcClient
from fitness_tracker.domain.nutrition import FoodDetails, FoodSummary, NutrientTotals
from fitness_tracker.services.cache import Cache

_MACRO_NUTRIENT_IDS = {
    1008: "calories",
    1003: "protein",
    1005: "carbs",
    1004: "fat",
    1079: "fiber",
}

_MICRO_NUTRIENT_IDS = {
    1106: "vitamin_a",
    1162: "vitamin_c",
    1114: "vitamin_d",
    1175: "vitamin_b6",
    1109: "vitamin_e",
    1185: "vitamin_k",
    1165: "thiamin",
    1178: "vitamin_b12",
    1166: "riboflavin",
    1177: "folate",
    1167: "niacin",
    1180: "choline",
    1170: "pantothenic_acid",
    1176: "biotin",
    1107: "carotenoids",
    1087: "calcium",
    1088: "chloride",
    1096: "chromium",
    1098: "copper",
    1099: "fluoride",
    1100: "iodine",
    1089: "iron",
    1090: "magnesium",
    1101: "manganese",
    1102: "molybdenum",
    1091: "phosphorus",
    1092: "potassium",
    1103: "selenium",
    1093: "sodium",
    1095: "zinc",
}

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class NutritionService:
    """Service for FDC lookups with caching."""

    fdc_client: FdcClient
    cache: Cache
    search_ttl_seconds: int = 3600
    food_ttl_seconds: int = 86400
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search(self, query: str, limit: int = 5) -> list[FoodSummary]:
        """Search FDC foods with caching."""
        cache_key = f"fdc:search:{query.lower()}:{limit}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(query, page_size=limit),
            action="search",
        )
        foods = [_parse_summary(food) for food in payload.get("foods", [])]
        self.cache.set(cache_key, foods, ttl_seconds=self.search_ttl_seconds)
        if self.debug:
            _logger.info("FDC search: query=%s results=%s", query, len(foods))
        return foods

    async def find_by_barcode(self, barcode: str) -> FoodSummary | None:
        """Return the branded FDC food whose GTIN/UPC matches barcode."""
        wanted = _normalize_barcode(barcode)
        if not wanted:
            return None
        for summary in await self.search(wanted, limit=10):
            if summary.gtin_upc and _normalize_barcode(summary.gtin_upc) == wanted:
                return summary
        return None

    async def get_food(self, fdc_id: int) -> FoodDetails:
        """Retrieve food details with a per-100g nutrient profile."""
        cache_key = f"fdc:food:{fdc_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FoodDetails):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.get_food(fdc_id),
            action=f"get_food:{fdc_id}",
        )
        serving_size = payload.get("servingSize")
        details = FoodDetails(
            summary=_parse_summary(payload),
            nutrients=_extract_nutrients(payload.get("foodNutrients", [])),
            serving_size=(
                float(serving_size) if isinstance(serving_size, int | float) else None
            ),
            serving_unit=payload.get("servingSizeUnit"),
        )
        self.cache.set(cache_key, details, ttl_seconds=self.food_ttl_seconds)
        if self.debug:
            _logger.info("FDC food: fdc_id=%s", fdc_id)
        return details

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                if self.debug:
                    _logger.warning(
                        "FDC %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        _status_code_from_exception(exc),
                        exc,
                    )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _parse_summary(food: dict[str, object]) -> FoodSummary:
    return FoodSummary(
        fdc_id=int(food["fdcId"]),
        description=str(food.get("description", "")),
        brand_owner=food.get("brandOwner"),
        brand_name=food.get("brandName"),
        data_type=food.get("dataType"),
        gtin_upc=food.get("gtinUpc"),
    )


def _normalize_barcode(value: str) -> str:
    return "".join(ch for ch in value if ch.isdigit()).lstrip("0")


def _extract_nutrients(food_nutrients: list[dict[str, object]]) -> NutrientTotals:
    """Map FDC nutrient rows onto macro and micronutrient fields."""
    macros = dict.fromkeys(_MACRO_NUTRIENT_IDS.values(), 0.0)
    micros: dict[str, float] = {}
    for nutrient in food_nutrients:
        nutrient_info = nutrient.get("nutrient") or {}
        nutrient_id = nutrient_info.get("id") or nutrient.get("nutrientId")
        amount = nutrient.get("amount", nutrient.get("value"))
        if amount is None:
            continue
        if nutrient_id in _MACRO_NUTRIENT_IDS:
            macros[_MACRO_NUTRIENT_IDS[nutrient_id]] = float(amount)
        elif nutrient_id in _MICRO_NUTRIENT_IDS:
            micros[_MICRO_NUTRIENT_IDS[nutrient_id]] = float(amount)
    return NutrientTotals(
        calories=macros["calories"],
        protein=macros["protein"],
        carbs=macros["carbs"],
        fat=macros["fat"],
        fiber=macros["fiber"],
        micronutrients=micros,
    )
