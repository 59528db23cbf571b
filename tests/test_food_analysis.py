"""
Tests for the /food-analysis endpoints backed by USDA FoodData Central.
"""

import json

import httpx
import pytest

from adapters import usda_adapter
from adapters.usda_adapter import UsdaClient
from domain.schemas.analysis_schemas import FullPipelineResponse, Macronutrients
from services.food_analysis_service import FoodAnalysisService
from test_fixtures import API, assert_error, client
from usda_payloads import CHICKEN_DETAIL, CHICKEN_SEARCH_HIT, RICE_SEARCH_HIT


def install_usda(handler, api_key="test-key"):
    usda_adapter.set_client(
        UsdaClient(
            api_key=api_key,
            base_url="https://fdc.test/fdc/v1",
            http_client=httpx.Client(transport=httpx.MockTransport(handler)),
        )
    )


def search_returns(*foods):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"foods": list(foods)})

    return handler


# =============================================================================
# FULL PIPELINE
# =============================================================================


def test_full_pipeline_shape():
    install_usda(search_returns(RICE_SEARCH_HIT))

    response = client.post(f"{API}/food-analysis/full-pipeline", json={"dishName": "rice"})

    assert response.status_code == 200
    body = response.json()
    assert body["source"] == "usda"
    assert body["foodName"] == RICE_SEARCH_HIT["description"]
    assert body["totalCalories"] == 130
    assert body["macronutrients"] == {"protein": 2.7, "carbohydrates": 28.2, "fat": 0.3}
    assert body["nutrients"] == [
        {"name": "Fiber", "value": 0.4, "unit": "g"},
        {"name": "Sugar", "value": 0.1, "unit": "g"},
        {"name": "Sodium", "value": 1.0, "unit": "mg"},
    ]
    assert body["ingredients"] == [
        {
            "name": RICE_SEARCH_HIT["description"],
            "category": "main",
            "quantity": 1,
            "unit": "100g",
        }
    ]
    assert body["allergens"] == []
    assert body["dietCompatibility"] == {}
    assert body["labels"] == []
    assert body["_usdaData"]["fdcId"] == 169756


def test_full_pipeline_sends_whole_numbers_for_calories_and_quantity():
    """JSON must carry 130 and 1, not 130.0 and 1.0"""
    install_usda(search_returns(RICE_SEARCH_HIT))

    response = client.post(f"{API}/food-analysis/full-pipeline", json={"dishName": "rice"})

    assert response.status_code == 200
    assert '"totalCalories":130,' in response.text
    assert '"quantity":1,' in response.text
    assert isinstance(response.json()["totalCalories"], int)


def test_full_pipeline_fetches_details_for_bare_hit():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/foods/search"):
            return httpx.Response(200, json={"foods": [CHICKEN_SEARCH_HIT]})
        assert request.url.path.endswith("/food/2646170")
        return httpx.Response(200, json=CHICKEN_DETAIL)

    install_usda(handler)

    response = client.post(
        f"{API}/food-analysis/full-pipeline",
        json={"dishName": "chicken breast", "dietTypes": ["keto"]},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["totalCalories"] == 106
    assert body["macronutrients"]["protein"] == 22.5


def test_full_pipeline_no_match():
    install_usda(search_returns())
    response = client.post(f"{API}/food-analysis/full-pipeline", json={"dishName": "qwertyuiop"})
    assert_error(response, 404, "NO_USDA_MATCH")


def test_full_pipeline_upstream_failure():
    install_usda(lambda request: httpx.Response(500, text="Internal Server Error"))
    response = client.post(f"{API}/food-analysis/full-pipeline", json={"dishName": "rice"})
    error = assert_error(response, 503, "UPSTREAM_UNAVAILABLE")
    assert error["details"] == {"upstream_status": 500}


def test_full_pipeline_connection_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    install_usda(handler)
    response = client.post(f"{API}/food-analysis/full-pipeline", json={"dishName": "rice"})
    assert_error(response, 503, "UPSTREAM_UNAVAILABLE")


def test_full_pipeline_without_api_key():
    install_usda(search_returns(RICE_SEARCH_HIT), api_key=None)
    response = client.post(f"{API}/food-analysis/full-pipeline", json={"dishName": "rice"})
    assert_error(response, 503, "USDA_NOT_CONFIGURED")


@pytest.mark.parametrize("payload", [{"dishName": "a"}, {"dishName": "  "}, {}])
def test_full_pipeline_rejects_bad_dish_name(payload):
    install_usda(search_returns(RICE_SEARCH_HIT))
    response = client.post(f"{API}/food-analysis/full-pipeline", json=payload)
    assert_error(response, 400, "VALIDATION_ERROR")


def test_full_pipeline_uses_service(monkeypatch):
    """Route passes the cleaned dish name and diet types to the service"""
    seen = {}

    def fake_analysis(dish_name, diet_types=None):
        seen["dish"] = dish_name
        seen["diets"] = diet_types
        return FullPipelineResponse(
            source="usda",
            food_name=dish_name,
            total_calories=180,
            macronutrients=Macronutrients(protein=8, carbohydrates=25, fat=5),
            nutrients=[],
            ingredients=[],
            allergens=[],
            diet_compatibility={},
            labels=[],
        )

    monkeypatch.setattr(
        FoodAnalysisService, "full_pipeline_analysis", staticmethod(fake_analysis)
    )

    response = client.post(
        f"{API}/food-analysis/full-pipeline",
        json={"dishName": "  Kabsa  ", "dietTypes": ["halal"]},
    )

    assert response.status_code == 200
    assert seen == {"dish": "Kabsa", "diets": ["halal"]}
    body = response.json()
    assert body["foodName"] == "Kabsa"
    assert body["_usdaData"] == {}


# =============================================================================
# SEARCH AND DETAIL
# =============================================================================


def test_search_returns_simplified_nutrition():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"foods": [RICE_SEARCH_HIT, CHICKEN_DETAIL]})

    install_usda(handler)

    response = client.get(f"{API}/food-analysis/search", params={"query": "rice", "page_size": 2})

    assert response.status_code == 200
    assert seen["body"]["pageSize"] == 2
    foods = response.json()
    assert [food["fdcId"] for food in foods] == [169756, 2646170]
    assert foods[0]["calories"] == 130
    assert '"calories":130,' in response.text
    assert foods[0]["servingSize"] == "100g"
    assert foods[1]["protein"] == 22.5


def test_search_requires_query():
    install_usda(search_returns())
    response = client.get(f"{API}/food-analysis/search", params={"query": "r"})
    assert_error(response, 400, "VALIDATION_ERROR")


def test_get_usda_food():
    install_usda(lambda request: httpx.Response(200, json=CHICKEN_DETAIL))
    response = client.get(f"{API}/food-analysis/foods/2646170")
    assert response.status_code == 200
    assert response.json()["name"] == CHICKEN_DETAIL["description"]


def test_get_usda_food_not_found():
    install_usda(lambda request: httpx.Response(404, json={}))
    response = client.get(f"{API}/food-analysis/foods/1")
    assert_error(response, 404)
