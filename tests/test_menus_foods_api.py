def test_create_and_get_menu(client, menu):
    response = client.get(f"/menus/{menu['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == "Lunch"
    assert [m["id"] for m in client.get("/menus").json()] == [menu["id"]]


def test_menu_period_must_be_ordered(client):
    response = client.post("/menus", json={
        "name": "Dinner",
        "category": "Mains",
        "start_date": "2026-06-01T00:00:00Z",
        "end_date": "2026-05-01T00:00:00Z",
    })
    assert response.status_code == 400
    assert response.json() == {"error": "start_date must be before end_date"}


def test_menu_patch_checks_merged_period(client, menu):
    response = client.patch(f"/menus/{menu['id']}", json={"end_date": "2025-01-01T00:00:00Z"})
    assert response.status_code == 400

    response = client.patch(f"/menus/{menu['id']}", json={"name": "Brunch"})
    assert response.status_code == 200
    assert response.json()["name"] == "Brunch"


def test_menu_validation(client):
    response = client.post("/menus", json={
        "name": "L",
        "category": "Mains",
        "start_date": "2026-01-01T00:00:00Z",
        "end_date": "2026-12-31T00:00:00Z",
    })
    assert response.status_code == 400
    assert response.json()["error"].startswith("name:")


def test_missing_menu(client):
    assert client.get("/menus/nope").status_code == 404
    assert client.patch("/menus/nope", json={"name": "Brunch"}).status_code == 404


def test_food_price_is_rounded(client, menu):
    response = client.post("/foods", json={
        "name": "Salad",
        "price": 9.995,
        "food_image": "salad.jpg",
        "menu_id": menu["id"],
    })
    assert response.status_code == 200, response.text
    assert response.json()["price"] == 10.0


def test_food_price_must_be_representable(client, menu, food):
    response = client.post("/foods", json={
        "name": "Caviar",
        "price": 1e30,
        "food_image": "caviar.jpg",
        "menu_id": menu["id"],
    })
    assert response.status_code == 400
    assert "price" in response.json()["error"]

    response = client.patch(f"/foods/{food['id']}", json={"price": 1e30})
    assert response.status_code == 400
    assert client.get(f"/foods/{food['id']}").json()["price"] == 12.5


def test_food_requires_existing_menu(client):
    response = client.post("/foods", json={
        "name": "Salad",
        "price": 3,
        "food_image": "salad.jpg",
        "menu_id": "nope",
    })
    assert response.status_code == 404
    assert response.json() == {"error": "menu was not found"}


def test_get_food(client, food):
    response = client.get(f"/foods/{food['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == "Pizza"
    assert client.get("/foods/nope").status_code == 404


def test_patch_food(client, food):
    response = client.patch(f"/foods/{food['id']}", json={"price": 1.115, "name": "Calzone"})
    assert response.status_code == 200, response.text
    assert response.json()["price"] == 1.12
    assert response.json()["name"] == "Calzone"

    response = client.patch(f"/foods/{food['id']}", json={"menu_id": "nope"})
    assert response.status_code == 404


def test_list_foods_paginated(client, menu):
    for number in range(3):
        client.post("/foods", json={
            "name": f"Dish {number}",
            "price": 1,
            "food_image": "dish.jpg",
            "menu_id": menu["id"],
        })

    page = client.get("/foods", params={"recordPerPage": 2, "page": 2}).json()
    assert page["total_count"] == 3
    assert len(page["food_items"]) == 1

    page = client.get("/foods", params={"recordPerPage": "abc", "page": 0}).json()
    assert page["total_count"] == 3
    assert len(page["food_items"]) == 3
