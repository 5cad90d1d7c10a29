"""
Echo GCP Cloud Function Runtime Tests.

The function is called with a real flask.Request built from a test request
context, like functions-framework does, plus one pass through the
functions-framework app itself.
"""

import json
import logging

import flask
import pytest

from multicloud_echo.providers.gcp.cloud_functions.echo import main as echo_function

ECHO_SOURCE = echo_function.__file__


@pytest.fixture(scope="module")
def app():
    return flask.Flask(__name__)


@pytest.fixture
def call(app):
    """POST a raw body to the function and return (body, status, headers)."""
    def _call(data, content_type="application/json"):
        with app.test_request_context("/", method="POST", data=data, content_type=content_type):
            return echo_function.main(flask.request)
    return _call


class TestEmptyInput:

    def test_empty_body_returns_greeting(self, call):
        body, status, headers = call(b"")
        assert status == 200
        assert body == "Hello World!"

    def test_whitespace_body_returns_greeting(self, call):
        body, status, _ = call(b"  \n\t ")
        assert status == 200
        assert body == "Hello World!"

    def test_empty_message_returns_greeting(self, call):
        body, status, _ = call(json.dumps({"message": "", "code": 123}))
        assert status == 200
        assert body == "Hello World!"

    def test_missing_message_returns_greeting(self, call):
        body, status, _ = call(json.dumps({"code": 123}))
        assert status == 200
        assert body == "Hello World!"

    def test_empty_message_with_code_zero_returns_greeting(self, call):
        """The empty-message fallback comes before the Handler."""
        body, status, _ = call(json.dumps({"message": "", "code": 0}))
        assert status == 200
        assert body == "Hello World!"


class TestEcho:

    def test_echoes_message(self, call):
        body, status, headers = call(json.dumps({"message": "hi!", "code": 123}))
        assert status == 200
        assert body == "hi!"
        assert headers["Content-Type"].startswith("text/plain")

    def test_escapes_html(self, call):
        body, status, _ = call(json.dumps({"message": "<script>alert('x')</script> & co", "code": 1}))
        assert status == 200
        assert body == "&lt;script&gt;alert(&#x27;x&#x27;)&lt;/script&gt; &amp; co"

    def test_content_type_header_is_not_required(self, call):
        body, status, _ = call(json.dumps({"message": "hi!", "code": 1}), content_type="text/plain")
        assert status == 200
        assert body == "hi!"

    def test_lone_surrogate_is_replaced(self, call):
        body, status, _ = call('{"message": "\\ud800x", "code": 1}')
        assert status == 200
        assert body == "�x"

    def test_field_names_match_case_insensitively(self, call):
        body, status, _ = call('{"Message": "hi", "Code": 5}')
        assert status == 200
        assert body == "hi"


class TestBadRequest:

    @pytest.mark.parametrize("data", [
        "not json",
        "{",
        "[]",
        json.dumps({"message": "hi!", "code": "123"}),
        json.dumps({"message": 5, "code": 1}),
    ])
    def test_invalid_body_returns_400(self, call, data):
        body, status, _ = call(data)
        assert status == 400
        assert body == "Bad Request"

    def test_deeply_nested_body_returns_400(self, call):
        depth = 100000
        body, status, _ = call("[" * depth + "]" * depth)
        assert status == 400
        assert body == "Bad Request"

    def test_invalid_body_is_logged(self, call, caplog):
        with caplog.at_level(logging.WARNING, logger=echo_function.logger.name):
            call("not json")

        assert "Event decode failed" in caplog.text


class TestDomainFailure:

    def test_code_zero_returns_500_with_failure_message(self, call):
        body, status, _ = call(json.dumps({"message": "hi!", "code": 0}))
        assert status == 500
        assert "Failed to handle" in body
        assert "hi!" in body

    def test_failure_body_is_escaped(self, call):
        body, _, _ = call(json.dumps({"message": "<b>", "code": 0}))
        assert "<b>" not in body
        assert "&lt;b&gt;" in body

    def test_missing_code_is_a_failure_request(self, call):
        _, status, _ = call(json.dumps({"message": "hi!"}))
        assert status == 500

    def test_failure_is_logged(self, call, caplog):
        with caplog.at_level(logging.ERROR, logger=echo_function.logger.name):
            call(json.dumps({"message": "hi!", "code": 0}))

        assert "Failed to handle" in caplog.text


class TestFunctionsFrameworkApp:
    """Serve the source through functions-framework's own Flask app."""

    @pytest.fixture(scope="class")
    def client(self):
        from functions_framework import create_app
        return create_app(target="main", source=ECHO_SOURCE).test_client()

    def test_post_event(self, client):
        response = client.post("/", data=json.dumps({"message": "hi!", "code": 123}))
        assert response.status_code == 200
        assert response.get_data(as_text=True) == "hi!"

    def test_post_empty(self, client):
        response = client.post("/")
        assert response.status_code == 200
        assert response.get_data(as_text=True) == "Hello World!"

    def test_post_malformed(self, client):
        response = client.post("/", data="not json")
        assert response.status_code == 400

    def test_post_deeply_nested(self, client):
        depth = 100000
        response = client.post("/", data="[" * depth + "]" * depth)
        assert response.status_code == 400

    def test_post_lone_surrogate(self, client):
        response = client.post("/", data='{"message": "\\ud800x", "code": 1}')
        assert response.status_code == 200
        assert response.get_data(as_text=True) == "�x"

    def test_post_lone_surrogate_failure(self, client):
        response = client.post("/", data='{"message": "\\ud800x", "code": 0}')
        assert response.status_code == 500
        assert "�x" in response.get_data(as_text=True)
