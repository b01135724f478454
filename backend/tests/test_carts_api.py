"""
API tests for the /carts endpoints.

Tests cover:
- Cart CRUD and the duplicate-owner conflict
- Cart editing by username
- Stock checks and purchases against inventory
"""

import pytest

from models.disc import Disc


@pytest.fixture
def alice_cart(cart_repo):
    return cart_repo.create("alice")


@pytest.fixture
def red_driver(disc_repo, blue_putter):
    """Disc id 2: Red 175g Driver, 15.0 each, 3 in stock."""
    return disc_repo.create(Disc(0, "Red", 175, "Driver", 15.0, 3))


class TestCartCrud:

    def test_create(self, client, cart_repo):
        response = client.post("/carts", json={"username": "alice"})
        assert response.status_code == 201
        assert response.json() == {"id": 1, "username": "alice", "contents": {}}

    def test_create_with_contents(self, client, cart_repo):
        response = client.post("/carts", json={"username": "alice", "contents": {"3": 2}})
        assert response.json()["contents"] == {"3": 2}
        assert cart_repo.find_cart("alice").contents == {3: 2}

    def test_create_duplicate_owner(self, client, alice_cart):
        response = client.post("/carts", json={"username": "Alice"})
        assert response.status_code == 409
        assert response.content == b""

    def test_list_and_search(self, client, alice_cart, cart_repo):
        cart_repo.create("bob")
        assert len(client.get("/carts").json()) == 2

        response = client.get("/carts/", params={"username": "bob"})
        assert [c["username"] for c in response.json()] == ["bob"]

    def test_get_by_id(self, client, alice_cart):
        assert client.get("/carts/1").json()["username"] == "alice"
        assert client.get("/carts/5").status_code == 404

    def test_replace(self, client, alice_cart, cart_repo):
        response = client.put("/carts", json={"id": 1, "username": "alice", "contents": {"1": 4}})
        assert response.status_code == 200
        assert cart_repo.get(1).contents == {1: 4}

    def test_replace_missing(self, client):
        response = client.put("/carts", json={"id": 1, "username": "alice", "contents": {}})
        assert response.status_code == 404

    def test_delete(self, client, alice_cart):
        assert client.delete("/carts/1").status_code == 200
        assert client.delete("/carts/1").status_code == 404


class TestCartEditing:

    def test_add_disc(self, client, alice_cart):
        client.put("/carts/addDisc/alice/1")
        response = client.put("/carts/addDisc/alice/1")

        assert response.status_code == 200
        assert response.json()["contents"] == {"1": 2}

    def test_add_to_unknown_cart(self, client):
        response = client.put("/carts/addDisc/ghost/1")
        assert response.status_code == 404
        assert response.content == b""

    def test_remove_disc(self, client, cart_repo):
        cart_repo.create("alice", {1: 3})
        assert client.put("/carts/removeDisc/alice/1").json()["contents"] == {}
        assert client.put("/carts/removeDisc/alice/1").status_code == 404

    def test_update_quantity(self, client, cart_repo):
        cart_repo.create("alice", {1: 3})

        assert client.put("/carts/updateDiscQuantity/alice/1/2/1").json()["contents"] == {"1": 5}
        assert client.put("/carts/updateDiscQuantity/alice/1/4/2").json()["contents"] == {"1": 1}
        assert client.put("/carts/updateDiscQuantity/alice/1/6/0").json()["contents"] == {"1": 6}
        assert client.put("/carts/updateDiscQuantity/alice/1/1/7").status_code == 404

    def test_update_quantity_to_zero_removes(self, client, cart_repo):
        cart_repo.create("alice", {1: 3})
        response = client.put("/carts/updateDiscQuantity/alice/1/0/0")
        assert response.json()["contents"] == {}


class TestCartTotals:

    def test_contents(self, client, cart_repo, red_driver):
        cart_repo.create("alice", {2: 1, 9: 1})
        response = client.get("/carts/alice/contents")
        assert response.json() == [
            {"id": 2, "color": "Red", "weight": 175, "type": "Driver", "price": 15.0, "quantity": 1}
        ]

    def test_cost_and_count(self, client, cart_repo, red_driver):
        cart_repo.create("alice", {1: 2, 2: 1})
        assert client.get("/carts/getCost/alice").json() == pytest.approx(35.0)
        assert client.get("/carts/getCount/alice").json() == 3

    def test_totals_of_empty_cart(self, client, alice_cart):
        assert client.get("/carts/getCost/alice").json() == 0
        assert client.get("/carts/getCount/alice").json() == 0

    def test_totals_of_unknown_cart(self, client):
        assert client.get("/carts/getCost/ghost").status_code == 404
        assert client.get("/carts/getCount/ghost").status_code == 404
        assert client.get("/carts/ghost/contents").status_code == 404


class TestCheckout:

    def test_check_cart(self, client, cart_repo, red_driver):
        cart_repo.create("alice", {1: 1, 2: 4})
        response = client.get("/carts/checkCart/alice")
        assert response.status_code == 200
        assert [(d["id"], d["quantity"]) for d in response.json()] == [(2, 3)]

    def test_check_empty_cart(self, client, alice_cart):
        assert client.get("/carts/checkCart/alice").status_code == 404

    def test_purchase(self, client, cart_repo, disc_repo, red_driver):
        cart_repo.create("alice", {1: 2, 2: 5})
        response = client.put("/carts/purchase/alice")

        assert response.status_code == 200
        assert [(d["id"], d["quantity"]) for d in response.json()] == [(1, 2), (2, 3)]
        assert disc_repo.get(1).quantity == 3
        assert disc_repo.get(2) is None
        assert cart_repo.find_cart("alice").contents == {}

    def test_purchase_nothing_available(self, client, cart_repo):
        cart_repo.create("alice", {8: 1})
        response = client.put("/carts/purchase/alice")
        assert response.status_code == 409
        assert response.content == b""

    def test_purchase_empty_cart(self, client, alice_cart):
        assert client.put("/carts/purchase/alice").status_code == 404

    def test_check_one(self, client, cart_repo, red_driver):
        cart_repo.create("alice", {1: 1, 2: 4})

        fine = client.get("/carts/checkOne/alice/1")
        assert fine.status_code == 200
        assert fine.content == b""

        short = client.get("/carts/checkOne/alice/2")
        assert short.json()["quantity"] == 3

    def test_check_one_missing_disc(self, client, cart_repo):
        cart_repo.create("alice", {8: 1})
        assert client.get("/carts/checkOne/alice/8").status_code == 409

    def test_purchase_one(self, client, cart_repo, disc_repo, red_driver):
        cart_repo.create("alice", {2: 2})
        response = client.put("/carts/purchaseOne/alice/2")

        assert response.status_code == 200
        assert response.json()["quantity"] == 2
        assert disc_repo.get(2).quantity == 1

    def test_purchase_one_errors(self, client, cart_repo, blue_putter):
        cart_repo.create("alice", {8: 1})
        assert client.put("/carts/purchaseOne/alice/8").status_code == 409
        assert client.put("/carts/purchaseOne/alice/1").status_code == 404
        assert client.put("/carts/purchaseOne/ghost/1").status_code == 404


class TestShoppingFlow:

    def test_buy_one_putter(self, client, disc_repo):
        disc = {"color": "Blue", "weight": 160, "type": "Putter", "price": 10.0, "quantity": 5}
        assert client.post("/discs", json=disc).json()["id"] == 1
        assert client.post("/carts", json={"username": "alice"}).json() == {"id": 1, "username": "alice", "contents": {}}

        assert client.put("/carts/addDisc/alice/1").json()["contents"] == {"1": 1}
        assert client.get("/carts/getCost/alice").json() == pytest.approx(10.0)

        purchased = client.put("/carts/purchaseOne/alice/1").json()
        assert purchased == {**disc, "id": 1, "quantity": 1}
        assert client.get("/discs/1").json()["quantity"] == 4
        assert client.get("/carts/1").json()["contents"] == {}
