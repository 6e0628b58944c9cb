def test_create_and_list_tables(client, table):
    assert client.get(f"/tables/{table['id']}").json()["table_number"] == 7
    assert [t["id"] for t in client.get("/tables").json()] == [table["id"]]


def test_table_needs_guests(client):
    response = client.post("/tables", json={"table_number": 1, "number_of_guests": 0})
    assert response.status_code == 400
    assert "number_of_guests" in response.json()["error"]


def test_patch_table(client, table):
    response = client.patch(f"/tables/{table['id']}", json={"number_of_guests": 6})
    assert response.status_code == 200
    assert response.json()["number_of_guests"] == 6
    assert response.json()["table_number"] == 7

    assert client.patch("/tables/nope", json={"number_of_guests": 2}).status_code == 404
    assert client.get("/tables/nope").status_code == 404


def test_create_order_with_table(client, table):
    response = client.post("/orders", json={"table_id": table["id"]})
    assert response.status_code == 200, response.text
    order = response.json()
    assert order["table_id"] == table["id"]
    assert order["order_date"]

    assert client.get(f"/orders/{order['id']}").json()["id"] == order["id"]


def test_create_order_with_unknown_table(client):
    response = client.post("/orders", json={"table_id": "nope"})
    assert response.status_code == 404
    assert response.json() == {"error": "table was not found"}
    assert client.get("/orders").json() == []


def test_create_order_without_table(client):
    response = client.post("/orders", json={"order_date": "2026-03-01T19:30:00Z"})
    assert response.status_code == 200
    assert response.json()["table_id"] is None
    assert response.json()["order_date"].startswith("2026-03-01T19:30:00")


def test_patch_order(client, table):
    order = client.post("/orders", json={}).json()

    response = client.patch(f"/orders/{order['id']}", json={"table_id": table["id"]})
    assert response.status_code == 200
    assert response.json()["table_id"] == table["id"]

    response = client.patch(f"/orders/{order['id']}", json={"table_id": "nope"})
    assert response.status_code == 404

    assert client.patch("/orders/nope", json={}).status_code == 404
    assert client.get("/orders/nope").status_code == 404
