"""
Tests for the coffee endpoints.

Runs the FastAPI app with in-memory repositories and checks binding by
content type, money parsing and the validation error envelope.
"""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from waiter.domain.service.money_text_codec import MoneyTextCodec
from waiter.infrastructure.web.app import create_app
from waiter.infrastructure.web.dependencies import get_coffee_repository, get_money_codec
from tests.fakes import FakeCoffeeRepository


@pytest.fixture
def coffee_repo() -> FakeCoffeeRepository:
    return FakeCoffeeRepository()


@pytest.fixture
def client(coffee_repo) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_coffee_repository] = lambda: coffee_repo
    return TestClient(app)


class TestAddCoffeeJson:

    def test_bare_amount_uses_default_currency(self, client) -> None:
        response = client.post("/coffee/", json={"name": "latte", "price": "125.00"})
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["name"] == "latte"
        assert body["price"] == "TWD 125.00"

    def test_code_and_amount(self, client) -> None:
        response = client.post("/coffee/", json={"name": "mocha", "price": "TWD 150.00"})
        assert response.status_code == 201
        assert response.json()["price"] == "TWD 150.00"

    def test_json_number_price(self, client) -> None:
        response = client.post("/coffee/", json={"name": "latte", "price": 125.5})
        assert response.status_code == 201
        assert response.json()["price"] == "TWD 125.5"

    def test_large_json_number_is_written_in_full(self, client) -> None:
        response = client.post("/coffee/", json={"name": "gold latte", "price": 1e21})
        assert response.status_code == 201
        assert response.json()["price"] == "TWD 1000000000000000000000"

    def test_boolean_price_is_type_mismatch(self, client) -> None:
        response = client.post("/coffee/", json={"name": "latte", "price": True})
        assert response.status_code == 400
        [error] = response.json()["errors"]
        assert error["code"] == "typeMismatch"
        assert error["rejectedValue"] is True

    def test_malformed_price_is_type_mismatch(self, client) -> None:
        response = client.post("/coffee/", json={"name": "latte", "price": "XXX"})
        assert response.status_code == 400
        body = response.json()
        assert body["status"] == 400
        assert body["error"] == "Bad Request"
        assert body["path"] == "/coffee/"
        assert body["message"] == (
            "Validation failed for object='newCoffeeRequest'. Error count: 1"
        )
        [error] = body["errors"]
        assert error["objectName"] == "newCoffeeRequest"
        assert error["field"] == "price"
        assert error["code"] == "typeMismatch"
        assert error["bindingFailure"] is True
        assert error["rejectedValue"] == "XXX"
        assert "String" in error["defaultMessage"]
        assert "Money" in error["defaultMessage"]
        datetime.fromisoformat(body["timestamp"])

    def test_all_failures_reported_together(self, client) -> None:
        response = client.post("/coffee/", json={"name": "", "price": "TWD ABC"})
        assert response.status_code == 400
        body = response.json()
        assert body["message"].endswith("Error count: 2")
        assert [(e["field"], e["code"]) for e in body["errors"]] == [
            ("name", "NotEmpty"),
            ("price", "typeMismatch"),
        ]

    def test_missing_fields_are_not_null(self, client) -> None:
        response = client.post("/coffee/", json={})
        body = response.json()
        assert response.status_code == 400
        assert {e["field"]: e["code"] for e in body["errors"]} == {
            "name": "NotNull",
            "price": "NotNull",
        }
        assert all(e["rejectedValue"] is None for e in body["errors"])
        assert all(e["bindingFailure"] is False for e in body["errors"])

    def test_null_price_is_not_null(self, client) -> None:
        response = client.post("/coffee/", json={"name": "latte", "price": None})
        [error] = response.json()["errors"]
        assert error["code"] == "NotNull"
        assert error["defaultMessage"] == "must not be null"

    def test_invalid_json(self, client) -> None:
        response = client.post(
            "/coffee/", content=b"{not json", headers={"content-type": "application/json"}
        )
        assert response.status_code == 400
        [error] = response.json()["errors"]
        assert error["code"] == "typeMismatch"
        assert error["field"] == "body"

    def test_duplicate_name_is_domain_error(self, client) -> None:
        client.post("/coffee/", json={"name": "latte", "price": "125"})
        response = client.post("/coffee/", json={"name": "Latte", "price": "130"})
        assert response.status_code == 400
        assert response.json() == {
            "error": "Bad Request",
            "detail": "Coffee 'Latte' already exists",
        }


class TestAddCoffeeForm:

    def test_url_encoded_form(self, client) -> None:
        response = client.post("/coffee/", data={"name": "espresso", "price": "100.00"})
        assert response.status_code == 201
        assert response.json()["price"] == "TWD 100.00"

    def test_empty_name_with_valid_price(self, client, coffee_repo) -> None:
        response = client.post("/coffee/", data={"name": "", "price": "125.00"})
        assert response.status_code == 400
        body = response.json()
        assert body["message"].endswith("Error count: 1")
        [error] = body["errors"]
        assert error["field"] == "name"
        assert error["code"] == "NotEmpty"
        assert error["bindingFailure"] is False
        assert error["rejectedValue"] == ""
        assert coffee_repo.list_all() == []

    def test_form_malformed_price(self, client) -> None:
        response = client.post("/coffee/", data={"name": "latte", "price": "XXX"})
        [error] = response.json()["errors"]
        assert error["code"] == "typeMismatch"
        assert error["rejectedValue"] == "XXX"

    def test_multipart_fields(self, client) -> None:
        response = client.post(
            "/coffee/",
            data={"name": "cortado", "price": "USD 4.25"},
            files={"photo": ("cortado.jpg", b"\x89", "image/jpeg")},
        )
        assert response.status_code == 201
        body = response.json()
        assert (body["name"], body["price"]) == ("cortado", "USD 4.25")

    def test_multipart_malformed_price(self, client, coffee_repo) -> None:
        response = client.post(
            "/coffee/",
            data={"name": "latte", "price": "TWD ABC"},
            files={"photo": ("latte.jpg", b"\x89", "image/jpeg")},
        )
        assert response.headers["content-type"] == "application/json"
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == (
            "Validation failed for object='newCoffeeRequest'. Error count: 1"
        )
        [error] = body["errors"]
        assert error["field"] == "price"
        assert error["code"] == "typeMismatch"
        assert error["bindingFailure"] is True
        assert error["rejectedValue"] == "TWD ABC"
        assert coffee_repo.list_all() == []


class TestBatchUpload:

    def test_adds_every_line(self, client) -> None:
        content = b"latte,125.00\n\nmocha, TWD 150.00\nflat-white,USD 4.5\n"
        response = client.post(
            "/coffee/", files={"file": ("menu.csv", content, "text/csv")}
        )
        assert response.status_code == 201
        assert [(c["name"], c["price"]) for c in response.json()] == [
            ("latte", "TWD 125.00"),
            ("mocha", "TWD 150.00"),
            ("flat-white", "USD 4.5"),
        ]

    def test_multi_word_and_quoted_names(self, client) -> None:
        content = b'cafe latte,125\n"latte, oat milk",TWD 140\n'
        response = client.post(
            "/coffee/", files={"file": ("menu.csv", content, "text/csv")}
        )
        assert response.status_code == 201
        assert [(c["name"], c["price"]) for c in response.json()] == [
            ("cafe latte", "TWD 125"),
            ("latte, oat milk", "TWD 140"),
        ]

    def test_bad_lines_reported_and_nothing_saved(self, client, coffee_repo) -> None:
        content = b"latte,125\nmocha\nespresso,TWD ABC\ncafe latte 125\nmacchiato,1,2\n"
        response = client.post(
            "/coffee/", files={"file": ("menu.csv", content, "text/csv")}
        )
        assert response.status_code == 400
        body = response.json()
        assert body["message"].endswith("Error count: 4")
        assert [(e["field"], e["code"]) for e in body["errors"]] == [
            ("file[1]", "typeMismatch"),
            ("file[2]", "typeMismatch"),
            ("file[3]", "typeMismatch"),
            ("file[4]", "typeMismatch"),
        ]
        assert body["errors"][0]["codes"][2] == "typeMismatch.Coffee"
        assert body["errors"][1]["codes"][2] == "typeMismatch.Money"
        assert body["errors"][1]["rejectedValue"] == "espresso,TWD ABC"
        assert body["errors"][2]["rejectedValue"] == "cafe latte 125"
        assert coffee_repo.list_all() == []

    def test_invalid_utf8_is_type_mismatch(self, client, coffee_repo) -> None:
        response = client.post(
            "/coffee/", files={"file": ("menu.csv", b"latte,\xff\xfe125", "text/csv")}
        )
        assert response.status_code == 400
        body = response.json()
        [error] = body["errors"]
        assert error["field"] == "file"
        assert error["code"] == "typeMismatch"
        assert error["bindingFailure"] is True
        assert error["rejectedValue"] == "menu.csv"
        assert body["path"] == "/coffee/"
        assert coffee_repo.list_all() == []

    def test_empty_file(self, client) -> None:
        response = client.post(
            "/coffee/", files={"file": ("menu.csv", b"\n\n", "text/csv")}
        )
        assert response.status_code == 400
        [error] = response.json()["errors"]
        assert error["field"] == "file"
        assert error["code"] == "NotEmpty"


class TestMoneyCodecOverride:

    @pytest.fixture
    def usd_client(self, client) -> TestClient:
        client.app.dependency_overrides[get_money_codec] = lambda: MoneyTextCodec("USD")
        return client

    def test_json_and_batch_share_the_codec(self, usd_client) -> None:
        single = usd_client.post("/coffee/", json={"name": "latte", "price": "3"})
        batch = usd_client.post(
            "/coffee/", files={"file": ("menu.csv", b"mocha,3\n", "text/csv")}
        )
        assert single.json()["price"] == "USD 3"
        assert batch.json()[0]["price"] == "USD 3"

    def test_form_uses_the_codec(self, usd_client) -> None:
        response = usd_client.post("/coffee/", data={"name": "latte", "price": "3.50"})
        assert response.json()["price"] == "USD 3.50"


class TestGetCoffee:

    def _seed(self, client) -> None:
        client.post("/coffee/", json={"name": "latte", "price": "125.00"})
        client.post("/coffee/", json={"name": "espresso", "price": "100.00"})

    def test_list(self, client) -> None:
        self._seed(client)
        response = client.get("/coffee/")
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["latte", "espresso"]

    def test_by_name(self, client) -> None:
        self._seed(client)
        response = client.get("/coffee/", params={"name": "espresso"})
        assert response.status_code == 200
        assert response.json()["id"] == 2

    def test_by_id(self, client) -> None:
        self._seed(client)
        response = client.get("/coffee/1")
        assert response.json()["price"] == "TWD 125.00"

    def test_unknown_id(self, client) -> None:
        response = client.get("/coffee/9")
        assert response.status_code == 404
        assert response.json()["detail"] == "Coffee #9 not found"

    def test_non_numeric_id(self, client) -> None:
        response = client.get("/coffee/abc")
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed for object='getById'. Error count: 1"
        [error] = body["errors"]
        assert error["field"] == "coffee_id"
        assert error["bindingFailure"] is True
        assert error["rejectedValue"] == "abc"
