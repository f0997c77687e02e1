"""Tests for request mapping: prefixes, verbs, path variables and conditions."""

import logging

import pytest

from hello_mvc.controllers.mapping import accepts


class TestUsersMapping:
    def test_get_users(self, client):
        response = client.get("/mapping/users")
        assert response.status_code == 200
        assert response.text == "get users"

    def test_post_user(self, client):
        response = client.post("/mapping/users")
        assert response.status_code == 200
        assert response.text == "post user"

    def test_find_user(self, client):
        assert client.get("/mapping/users/userA").text == "get userId=userA"

    def test_update_user(self, client):
        assert client.patch("/mapping/users/userA").text == "update userId=userA"

    def test_delete_user(self, client):
        assert client.delete("/mapping/users/userA").text == "delete userId=userA"

    def test_unmapped_verb_is_method_not_allowed(self, client):
        assert client.put("/mapping/users/userA").status_code == 405


class TestBasicMapping:
    @pytest.mark.parametrize("method", ["GET", "POST", "PUT", "PATCH", "DELETE"])
    def test_hello_basic_accepts_any_method(self, client, method):
        response = client.request(method, "/hello-basic")
        assert response.status_code == 200
        assert response.text == "ok"

    @pytest.mark.parametrize("path", ["/mapping-get-v1", "/mapping-get-v2"])
    def test_get_only(self, client, path):
        assert client.get(path).text == "ok"
        assert client.post(path).status_code == 405

    def test_path_variable(self, client, caplog):
        with caplog.at_level(logging.INFO):
            response = client.get("/mapping/userA")

        assert response.text == "ok"
        assert "userId=userA" in caplog.text

    def test_multiple_path_variables(self, client, caplog):
        with caplog.at_level(logging.INFO):
            response = client.get("/mapping/users/userA/orders/100")

        assert response.text == "ok"
        assert "userId=userA, orderId=100" in caplog.text


class TestMappingConditions:
    def test_param_condition(self, client):
        assert client.get("/mapping-param", params={"mode": "debug"}).text == "ok"
        assert client.get("/mapping-param").status_code == 400
        assert client.get("/mapping-param", params={"mode": "prod"}).status_code == 400

    def test_header_condition(self, client):
        assert client.get("/mapping-header", headers={"mode": "debug"}).text == "ok"
        assert client.get("/mapping-header").status_code == 404

    def test_consumes_json(self, client):
        ok = client.post("/mapping-consume", json={"username": "a"})
        assert ok.status_code == 200

        rejected = client.post("/mapping-consume", content="a", headers={"Content-Type": "text/plain"})
        assert rejected.status_code == 415

    def test_produces_html(self, client):
        ok = client.post("/mapping-produce", headers={"Accept": "text/html"})
        assert ok.status_code == 200
        assert ok.headers["content-type"].startswith("text/html")

        rejected = client.post("/mapping-produce", headers={"Accept": "application/json"})
        assert rejected.status_code == 406


@pytest.mark.parametrize(
    "header, expected",
    [
        (None, True),
        ("text/html", True),
        ("text/*", True),
        ("*/*;q=0.8", True),
        ("application/json, text/html;q=0.9", True),
        ("application/json", False),
    ],
)
def test_accepts(header, expected):
    assert accepts(header, "text/html") is expected
