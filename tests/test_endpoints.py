"""HTTP-level tests for the meal plan, recipe and shopping list routes."""

import uuid

import pytest

from test_fixtures import OTHER_USER_ID, REALISTIC_RECIPES, USER_ID

PARAMS = {"user_id": str(USER_ID)}


def create_recipe(client, key="bolognese", user_id=USER_ID):
    resp = client.post("/recipes", params={"user_id": str(user_id)}, json=REALISTIC_RECIPES[key])
    assert resp.status_code == 201, resp.text
    return resp.json()


def plan_meal(client, body, user_id=USER_ID):
    return client.post("/meal-plans", params={"user_id": str(user_id)}, json=body)


def test_health_check(api_client):
    resp = api_client.get("/health-check")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert resp.json()["service"] == "MealBoard"
    assert "X-Request-ID" in resp.headers


class TestMealPlans:
    def test_create_and_list_week(self, api_client):
        recipe = create_recipe(api_client)

        resp = plan_meal(
            api_client,
            {"plan_date": "2024-06-05", "meal_type": "dinner", "recipe_id": recipe["id"], "servings": 2},
        )
        assert resp.status_code == 201
        created = resp.json()
        assert created["recipe"]["title"] == "Spaghetti Bolognese"
        assert created["recipe_id"] == recipe["id"]
        assert created["is_cooked"] is False

        plan_meal(api_client, {"plan_date": "2024-06-03", "meal_type": "lunch", "custom_meal": "Takeout"})

        resp = api_client.get(
            "/meal-plans", params={**PARAMS, "start_date": "2024-06-03", "end_date": "2024-06-09"}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["start_date"] == "2024-06-03"
        assert data["end_date"] == "2024-06-09"
        assert [(m["plan_date"], m["meal_type"]) for m in data["meal_plans"]] == [
            ("2024-06-03", "lunch"),
            ("2024-06-05", "dinner"),
        ]
        assert data["meal_plans"][0]["custom_meal"] == "Takeout"
        assert data["meal_plans"][0]["servings"] == 1

    def test_end_date_defaults_to_a_week(self, api_client):
        resp = api_client.get("/meal-plans", params={**PARAMS, "start_date": "2024-06-03"})
        assert resp.status_code == 200
        assert resp.json()["end_date"] == "2024-06-09"
        assert resp.json()["meal_plans"] == []

    def test_reversed_range_is_rejected(self, api_client):
        resp = api_client.get(
            "/meal-plans", params={**PARAMS, "start_date": "2024-06-09", "end_date": "2024-06-03"}
        )
        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert body["error"]["code"] == "SERVICE_VALIDATION_ERROR"

    def test_missing_user_id(self, api_client):
        resp = api_client.get("/meal-plans")
        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.parametrize(
        "body",
        [
            {"plan_date": "2024-06-05", "meal_type": "dinner"},
            {"plan_date": "2024-06-05", "meal_type": "dinner", "custom_meal": "   "},
            {
                "plan_date": "2024-06-05",
                "meal_type": "dinner",
                "custom_meal": "Takeout",
                "recipe_id": str(uuid.uuid4()),
            },
            {"plan_date": "2024-06-05", "meal_type": "brunch", "custom_meal": "Eggs"},
        ],
    )
    def test_invalid_bodies(self, api_client, body):
        resp = plan_meal(api_client, body)
        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_unknown_recipe(self, api_client):
        resp = plan_meal(
            api_client, {"plan_date": "2024-06-05", "meal_type": "dinner", "recipe_id": str(uuid.uuid4())}
        )
        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "NOT_FOUND"

    def test_same_cell_is_replaced(self, api_client):
        first = plan_meal(api_client, {"plan_date": "2024-06-05", "meal_type": "dinner", "custom_meal": "Takeout"})
        second = plan_meal(api_client, {"plan_date": "2024-06-05", "meal_type": "dinner", "custom_meal": "Pizza"})

        assert second.json()["id"] == first.json()["id"]
        listing = api_client.get("/meal-plans", params={**PARAMS, "start_date": "2024-06-03"}).json()
        assert [m["custom_meal"] for m in listing["meal_plans"]] == ["Pizza"]

    def test_delete(self, api_client):
        meal = plan_meal(api_client, {"plan_date": "2024-06-05", "meal_type": "dinner", "custom_meal": "Takeout"}).json()

        resp = api_client.delete(f"/meal-plans/{meal['id']}", params=PARAMS)
        assert resp.status_code == 200
        assert resp.json() == {"message": "Meal plan deleted"}

        resp = api_client.delete(f"/meal-plans/{meal['id']}", params=PARAMS)
        assert resp.status_code == 404

    def test_delete_other_users_meal(self, api_client):
        meal = plan_meal(
            api_client,
            {"plan_date": "2024-06-05", "meal_type": "dinner", "custom_meal": "Takeout"},
            user_id=OTHER_USER_ID,
        ).json()

        resp = api_client.delete(f"/meal-plans/{meal['id']}", params=PARAMS)
        assert resp.status_code == 403
        assert resp.json()["error"]["code"] == "FORBIDDEN"

    def test_mark_cooked_updates_recipe(self, api_client):
        recipe = create_recipe(api_client, "salad")
        meal = plan_meal(
            api_client, {"plan_date": "2024-06-04", "meal_type": "lunch", "recipe_id": recipe["id"]}
        ).json()

        resp = api_client.post(f"/meal-plans/{meal['id']}/cook", params=PARAMS)
        assert resp.status_code == 200

        listing = api_client.get("/meal-plans", params={**PARAMS, "start_date": "2024-06-03"}).json()
        assert listing["meal_plans"][0]["is_cooked"] is True
        fetched = api_client.get(f"/recipes/{recipe['id']}", params=PARAMS).json()
        assert fetched["times_cooked"] == 1
        assert fetched["last_cooked_at"] is not None

    def test_generate_list(self, api_client):
        recipe = create_recipe(api_client, "bolognese")
        plan_meal(api_client, {"plan_date": "2024-06-05", "meal_type": "dinner", "recipe_id": recipe["id"], "servings": 8})
        plan_meal(api_client, {"plan_date": "2024-06-06", "meal_type": "dinner", "custom_meal": "Takeout"})

        resp = api_client.post(
            "/meal-plans/generate-list",
            params=PARAMS,
            json={"start_date": "2024-06-03", "end_date": "2024-06-09"},
        )
        assert resp.status_code == 200
        assert resp.json() == {"items_added": 3, "message": "Added 3 items to shopping list"}

        listing = api_client.get("/shopping-list", params=PARAMS).json()
        assert listing["total"] == 3
        assert listing["unchecked"] == 3
        assert listing["items"][0]["ingredient_name"] == "Spaghetti"
        assert listing["items"][0]["amount"] == "800"
        assert listing["items"][0]["recipe_name"] == "Spaghetti Bolognese"

    def test_generate_list_reversed_range(self, api_client):
        resp = api_client.post(
            "/meal-plans/generate-list",
            params=PARAMS,
            json={"start_date": "2024-06-09", "end_date": "2024-06-03"},
        )
        assert resp.status_code == 422


class TestRecipes:
    def test_search(self, api_client):
        create_recipe(api_client, "bolognese")
        create_recipe(api_client, "salad")
        create_recipe(api_client, "oats", user_id=OTHER_USER_ID)

        resp = api_client.get("/recipes", params={**PARAMS, "search": "sal"})
        assert resp.status_code == 200
        assert [r["title"] for r in resp.json()["recipes"]] == ["Chicken Caesar Salad"]

        resp = api_client.get("/recipes", params={**PARAMS, "limit": 1})
        assert len(resp.json()["recipes"]) == 1

    def test_limit_bounds(self, api_client):
        resp = api_client.get("/recipes", params={**PARAMS, "limit": 0})
        assert resp.status_code == 422

    def test_get_recipe(self, api_client):
        recipe = create_recipe(api_client, "salad")
        resp = api_client.get(f"/recipes/{recipe['id']}", params=PARAMS)
        assert resp.status_code == 200
        assert resp.json()["ingredients"][0]["name"] == "Chicken breast"

        resp = api_client.get(f"/recipes/{recipe['id']}", params={"user_id": str(OTHER_USER_ID)})
        assert resp.status_code == 404


class TestShoppingList:
    def test_toggle_and_clear(self, api_client):
        recipe = create_recipe(api_client, "oats")
        plan_meal(api_client, {"plan_date": "2024-06-05", "meal_type": "breakfast", "recipe_id": recipe["id"]})
        api_client.post(
            "/meal-plans/generate-list",
            params=PARAMS,
            json={"start_date": "2024-06-03", "end_date": "2024-06-09"},
        )
        item = api_client.get("/shopping-list", params=PARAMS).json()["items"][0]

        resp = api_client.put(f"/shopping-list/{item['id']}", params=PARAMS)
        assert resp.status_code == 200
        assert resp.json() == {"is_checked": True}
        assert api_client.get("/shopping-list", params=PARAMS).json()["unchecked"] == 0

        resp = api_client.delete("/shopping-list/checked", params=PARAMS)
        assert resp.status_code == 200
        assert resp.json()["items_removed"] == 1
        assert api_client.get("/shopping-list", params=PARAMS).json()["total"] == 0

    def test_toggle_unknown_item(self, api_client):
        resp = api_client.put(f"/shopping-list/{uuid.uuid4()}", params=PARAMS)
        assert resp.status_code == 404


def test_request_id_is_echoed(api_client):
    resp = api_client.get("/health-check", headers={"X-Request-ID": "planner-42"})
    assert resp.headers["X-Request-ID"] == "planner-42"
    assert float(resp.headers["X-Process-Time"]) >= 0
