"""Tests for error handlers, binding errors and logging setup."""

import json
import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from hello_mvc.binding import to_int
from hello_mvc.errors import BindingError, MissingParameterError, register_error_handlers
from hello_mvc import observability
from hello_mvc.observability import JSONFormatter, setup_logging


@pytest.fixture
def error_app():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/binding")
    def binding():
        raise BindingError("age", "abc", "int")

    @app.get("/boom")
    def boom():
        raise RuntimeError("secret detail")

    @app.get("/typed")
    def typed(age: int):
        return {"age": age}

    return app


class TestErrorHandlers:
    def test_binding_error_is_bad_request(self, error_app):
        response = TestClient(error_app).get("/binding")

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "BINDING_ERROR"
        assert error["details"] == [{"field": "age", "message": "expected int", "type": "binding"}]

    def test_validation_error_is_bad_request(self, error_app):
        response = TestClient(error_app).get("/typed", params={"age": "x"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"][0]["field"] == "query.age"

    def test_unhandled_error_hides_details(self, error_app):
        response = TestClient(error_app, raise_server_exceptions=False).get("/boom")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "INTERNAL_ERROR"
        assert "secret" not in response.text


class TestToInt:
    def test_converts(self):
        assert to_int("age", "20") == 20
        assert to_int("age", "-1") == -1

    def test_missing(self):
        with pytest.raises(MissingParameterError) as exc_info:
            to_int("age", None)
        assert exc_info.value.field == "age"

    def test_not_a_number(self):
        with pytest.raises(BindingError) as exc_info:
            to_int("age", "abc")
        assert exc_info.value.value == "abc"
        assert "'age'" in str(exc_info.value)


class TestLogging:
    def test_json_formatter(self):
        record = logging.LogRecord("hello_mvc.test", logging.INFO, __file__, 1, "username=%s", ("a",), None)
        record.path = "/request-param-v1"

        payload = json.loads(JSONFormatter().format(record))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "hello_mvc.test"
        assert payload["message"] == "username=a"
        assert payload["path"] == "/request-param-v1"

    def test_setup_logging_installs_single_handler(self):
        root = logging.getLogger()
        before = len(root.handlers)
        level = root.level

        try:
            setup_logging("DEBUG", "json")
            setup_logging("INFO", "text")

            assert len(root.handlers) == before + 1
            assert root.level == logging.INFO
        finally:
            root.removeHandler(observability._handler)
            root.setLevel(level)
