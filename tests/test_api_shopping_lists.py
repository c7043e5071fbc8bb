from flatshare.models import Item, ShoppingList
from flatshare.seed import seed, DEFAULT_PRODUCTS


def create_list(client, headers, **body):
    return client.post("/shopping-lists", json=body, headers=headers)


def test_create_private_and_shared_lists(client, make_group, auth_headers):
    _, (a, b) = make_group(2)
    headers = auth_headers(a)

    private = create_list(client, headers, title="Mine", is_private=True, items=[{"name": "Socks"}])
    shared = create_list(client, headers, title="Flat", items=[{"name": "Milk", "quantity": 2}])

    assert private.status_code == 201
    assert private.get_json()["group_id"] is None
    assert shared.get_json()["items"][0]["quantity"] == 2
    assert shared.get_json()["items"][0]["status"] == "OPEN"

    own = client.get("/shopping-lists/own", headers=headers).get_json()
    assert [lst["title"] for lst in own] == ["Mine"]

    seen_by_b = client.get("/shopping-lists", headers=auth_headers(b)).get_json()
    assert [lst["title"] for lst in seen_by_b] == ["Flat"]
    assert client.get("/shopping-lists/shared", headers=auth_headers(b)).get_json()[0]["title"] == "Flat"


def test_shared_list_needs_group(client, make_user, auth_headers):
    resp = create_list(client, auth_headers(make_user()), title="Flat")

    assert resp.status_code == 400


def test_private_list_is_invisible_to_others(client, make_group, auth_headers):
    _, (a, b) = make_group(2)
    created = create_list(client, auth_headers(a), title="Mine", is_private=True).get_json()

    assert client.get(f"/shopping-lists/{created['id']}", headers=auth_headers(b)).status_code == 404
    assert client.delete(f"/shopping-lists/{created['id']}", headers=auth_headers(b)).status_code == 404


def test_add_items_batch(client, make_group, auth_headers):
    _, (a, b) = make_group(2)
    created = create_list(client, auth_headers(a), title="Flat").get_json()

    resp = client.post(
        f"/shopping-lists/{created['id']}/items",
        json={"items": [{"name": "Eggs"}, {"name": "Flour", "quantity": 3}]},
        headers=auth_headers(b),
    )

    assert resp.status_code == 201
    assert [item["added_by_id"] for item in resp.get_json()] == [b.id, b.id]
    assert len(client.get(f"/shopping-lists/{created['id']}", headers=auth_headers(a)).get_json()["items"]) == 2


def test_item_lifecycle(client, make_group, auth_headers):
    _, (a, b) = make_group(2)
    created = create_list(client, auth_headers(a), title="Flat").get_json()

    item = client.post(
        "/items", json={"shopping_list_id": created["id"], "name": "Bread"}, headers=auth_headers(a)
    ).get_json()
    assert item["status"] == "OPEN"

    updated = client.put(f"/items/{item['id']}", json={"status": "bought"}, headers=auth_headers(b))
    assert updated.status_code == 200
    assert updated.get_json()["status"] == "BOUGHT"
    assert updated.get_json()["bought_by_id"] == b.id

    assert client.get(f"/items/by-list/{created['id']}/open", headers=auth_headers(a)).get_json() == []
    assert len(client.get(f"/items/by-list/{created['id']}", headers=auth_headers(a)).get_json()) == 1

    reopened = client.put(f"/items/{item['id']}", json={"status": "OPEN"}, headers=auth_headers(a))
    assert reopened.get_json()["bought_by_id"] is None

    assert client.delete(f"/items/{item['id']}", headers=auth_headers(a)).status_code == 204
    assert Item.query.count() == 0


def test_invalid_item_status(client, make_group, auth_headers):
    _, (a,) = make_group(1)
    created = create_list(client, auth_headers(a), title="Flat").get_json()

    resp = client.post(
        "/items",
        json={"shopping_list_id": created["id"], "name": "Bread", "status": "LOST"},
        headers=auth_headers(a),
    )

    assert resp.status_code == 400


def test_delete_list_removes_items(client, make_group, auth_headers):
    _, (a,) = make_group(1)
    created = create_list(client, auth_headers(a), title="Flat", items=[{"name": "Milk"}]).get_json()

    resp = client.delete(f"/shopping-lists/{created['id']}", headers=auth_headers(a))

    assert resp.status_code == 204
    assert ShoppingList.query.count() == 0
    assert Item.query.count() == 0


def test_frequent_item_suggestions(client, make_user, auth_headers):
    user = make_user()
    headers = auth_headers(user)
    for names in (["Milk", "Eggs"], ["Milk", "Butter"], ["Milk", "Apples"]):
        create_list(client, headers, title="Week", is_private=True,
                    items=[{"name": name, "status": "BOUGHT"} for name in names])
    create_list(client, headers, title="Now", is_private=True, items=[{"name": "Apples"}])

    resp = client.get("/shopping-lists/suggestions", headers=headers)

    assert resp.get_json() == ["Milk", "Butter", "Eggs"]


def test_product_suggestions(client, make_user, auth_headers):
    assert seed() == len(DEFAULT_PRODUCTS)
    assert seed() == 0

    resp = client.get("/suggestions?q=OIL", headers=auth_headers(make_user()))

    names = [suggestion["name"] for suggestion in resp.get_json()]
    assert names == ["Olive oil", "Toilet paper"]
