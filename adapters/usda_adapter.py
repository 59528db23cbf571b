"""
USDA FoodData Central adapter.

API guide: https://fdc.nal.usda.gov/api-guide/

Search uses POST with a JSON body; details use GET /food/{fdcId}. A
module-level client is created on startup (``connect``) and closed on
shutdown (``close``); ``get_client`` lazily builds one from settings.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional
import logging

import httpx

from app.config import settings
from app.exceptions import NotFoundError, UpstreamServiceError

logger = logging.getLogger("smartbite.usda")

# Standard FDC nutrient ids with a name fragment used when the id is absent
NUTRIENT_IDS = {
    "calories": (1008, "energy"),
    "protein": (1003, "protein"),
    "carbs": (1005, "carbohydrate"),
    "fat": (1004, "total lipid"),
    "fiber": (1079, "fiber"),
    "sugar": (2000, "sugars"),
    "sodium": (1093, "sodium"),
}

DEFAULT_SERVING_SIZE = "100g"


def _round_half_up(value: float, digits: int) -> float:
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _nutrient_fields(entry: Dict[str, Any]) -> tuple:
    """Normalize the search shape and the detail shape of a foodNutrients entry."""
    nested = entry.get("nutrient") or {}
    nutrient_id = entry.get("nutrientId", nested.get("id"))
    name = entry.get("nutrientName") or nested.get("name") or ""
    unit = entry.get("unitName") or nested.get("unitName") or ""
    amount = entry.get("value", entry.get("amount"))
    return nutrient_id, name.lower(), unit.lower(), amount


def find_nutrient_amount(
    nutrients: List[Dict[str, Any]], nutrient_id: int, name: Optional[str] = None
) -> float:
    """Amount of a nutrient by FDC id, falling back to a name match (kJ energy skipped)."""
    by_name = None
    for entry in nutrients:
        entry_id, entry_name, unit, amount = _nutrient_fields(entry)
        if amount is None:
            continue
        if entry_id == nutrient_id:
            return float(amount)
        if by_name is None and name and name.lower() in entry_name and unit != "kj":
            by_name = float(amount)
    return by_name if by_name is not None else 0.0


def format_serving_size(food: Dict[str, Any]) -> str:
    size = food.get("servingSize")
    if size in (None, ""):
        return DEFAULT_SERVING_SIZE
    if isinstance(size, (int, float)):
        unit = food.get("servingSizeUnit") or "g"
        return f"{size:g}{unit}"
    return str(size)


def convert_to_nutrition(
    food: Dict[str, Any], fallback_name: str = "Unknown Food"
) -> Dict[str, Any]:
    """
    Convert an FDC food (search hit or detail record) to simplified nutrition.

    Calories are rounded to an int, everything else to one decimal.
    """
    nutrients = food.get("foodNutrients") or []
    values = {
        key: find_nutrient_amount(nutrients, nutrient_id, name)
        for key, (nutrient_id, name) in NUTRIENT_IDS.items()
    }
    result = {
        "fdc_id": food.get("fdcId"),
        "name": food.get("description") or food.get("foodDescription") or fallback_name,
        "calories": int(_round_half_up(values["calories"], 0)),
        "serving_size": format_serving_size(food),
    }
    for key in ("protein", "carbs", "fat", "fiber", "sugar", "sodium"):
        result[key] = _round_half_up(values[key], 1)
    return result


class UsdaClient:
    """Thin synchronous client for the FoodData Central REST API"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = settings.usda_base_url,
        timeout: float = settings.usda_timeout_sec,
        data_types: Optional[List[str]] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.data_types = data_types or list(settings.usda_data_types)
        self._http = http_client or httpx.Client(timeout=timeout, follow_redirects=True)
        if not self.api_key:
            logger.warning("USDA_API_KEY not configured; food analysis will be unavailable")

    def close(self) -> None:
        self._http.close()

    def _require_key(self) -> str:
        if not self.api_key:
            raise UpstreamServiceError(
                "USDA API key not configured", code="USDA_NOT_CONFIGURED"
            )
        return self.api_key

    def _request(self, method: str, path: str, **kwargs) -> Any:
        params = dict(kwargs.pop("params", None) or {})
        params["api_key"] = self._require_key()
        url = f"{self.base_url}{path}"
        try:
            response = self._http.request(method, url, params=params, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.error(
                "USDA API error: %s - %s", status_code, exc.response.text[:500]
            )
            raise UpstreamServiceError(
                f"USDA API error: {exc.response.reason_phrase or status_code}",
                details={"upstream_status": status_code},
            ) from exc
        except httpx.RequestError as exc:
            logger.error("USDA API request failed: %s", exc)
            raise UpstreamServiceError(f"USDA API request failed: {exc}") from exc
        except ValueError as exc:
            logger.error("USDA API returned invalid JSON: %s", exc)
            raise UpstreamServiceError("USDA API returned an invalid response") from exc

    def search_foods(self, query: str, page_size: int = 10) -> Dict[str, Any]:
        """Search foods by name; returns the raw FDC search payload."""
        body = {
            "query": query,
            "pageSize": page_size,
            "dataType": self.data_types,
            "sortBy": "fdcId",
            "sortOrder": "desc",
        }
        logger.info("Searching USDA API for: %s", query)
        data = self._request("POST", "/foods/search", json=body)
        if not isinstance(data, dict):
            raise UpstreamServiceError("USDA API returned unexpected response")
        logger.info("Found %d results from USDA", len(data.get("foods") or []))
        return data

    def get_food_details(self, fdc_id: int) -> Dict[str, Any]:
        """Fetch the full record for one FDC id."""
        logger.info("Fetching USDA food details for FDC ID: %s", fdc_id)
        try:
            data = self._request("GET", f"/food/{fdc_id}")
        except UpstreamServiceError as exc:
            if (exc.details or {}).get("upstream_status") == 404:
                raise NotFoundError(f"USDA food {fdc_id} not found") from exc
            raise
        if not isinstance(data, dict):
            raise UpstreamServiceError("USDA API returned unexpected response")
        return data

    def search_and_get_nutrition(self, food_name: str) -> Optional[Dict[str, Any]]:
        """
        Search for a food and return nutrition for the best (first) match.

        Returns None when FDC has no match. Upstream failures raise
        UpstreamServiceError.
        """
        results = self.search_foods(food_name, settings.usda_search_page_size)
        foods = results.get("foods") or []
        if not foods:
            logger.warning("No USDA results found for: %s", food_name)
            return None

        best_match = foods[0]
        food_data = best_match
        if best_match.get("fdcId") and not best_match.get("foodNutrients"):
            food_data = self.get_food_details(best_match["fdcId"])

        nutrition = convert_to_nutrition(food_data, fallback_name=food_name)
        logger.info("USDA lookup successful for: %s", food_name)
        return {
            "source": "usda",
            "food_name": nutrition["name"],
            "nutrition": nutrition,
            "raw_data": food_data,
        }


_client: Optional[UsdaClient] = None


def connect(api_key: Optional[str], base_url: str, timeout: float) -> UsdaClient:
    """Initialize the module-level client (called from app lifespan)."""
    global _client
    close()
    _client = UsdaClient(api_key=api_key, base_url=base_url, timeout=timeout)
    logger.info("USDA client ready for %s", base_url)
    return _client


def get_client() -> UsdaClient:
    global _client
    if _client is None:
        _client = UsdaClient(
            api_key=settings.usda_api_key,
            base_url=settings.usda_base_url,
            timeout=settings.usda_timeout_sec,
        )
    return _client


def set_client(client: Optional[UsdaClient]) -> None:
    """Swap the module-level client (used by tests)."""
    global _client
    _client = client


def close() -> None:
    global _client
    try:
        if _client is not None:
            _client.close()
            logger.info("USDA client closed")
    finally:
        _client = None
