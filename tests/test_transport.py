import pytest
import requests

from script_automation.domain.errors import InvalidResponseShape, TransportError
from script_automation.llm.transport import RequestsTransport


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=""):
        self.status_code = status_code
        self._body = body
        self.text = text

    def json(self):
        if self._body is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


class FakeSession:
    def __init__(self, outcome):
        self.outcome = outcome
        self.kwargs = None

    def post(self, url, **kwargs):
        self.kwargs = dict(kwargs, url=url)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


def _post(session):
    return RequestsTransport(session).post_json(
        "https://llm.example/v1/chat/completions",
        {"Authorization": "Bearer k"},
        {"model": "m"},
        timeout=30,
    )


def test_returns_decoded_json_and_forwards_arguments():
    session = FakeSession(FakeResponse(200, {"choices": []}))
    assert _post(session) == {"choices": []}
    assert session.kwargs["json"] == {"model": "m"}
    assert session.kwargs["timeout"] == 30
    assert session.kwargs["headers"]["Authorization"] == "Bearer k"


def test_non_2xx_status_is_transport_error():
    session = FakeSession(FakeResponse(429, {"error": "rate limited"}, text="rate limited"))
    with pytest.raises(TransportError) as exc_info:
        _post(session)
    assert exc_info.value.status_code == 429
    assert "429" in str(exc_info.value)


@pytest.mark.parametrize("error", [
    requests.exceptions.ConnectionError("connection refused"),
    requests.exceptions.Timeout("read timed out"),
])
def test_network_failures_are_transport_errors(error):
    with pytest.raises(TransportError):
        _post(FakeSession(error))


def test_non_json_body_is_invalid_shape():
    with pytest.raises(InvalidResponseShape):
        _post(FakeSession(FakeResponse(200, None, text="<html>gateway</html>")))
