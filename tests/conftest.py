import pytest
import requests

from navroute.core.polyline import encode

ROUTE = [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self.payload is None:
            raise ValueError("No JSON object could be decoded")
        return self.payload


class FakeSession:
    """Records requests and answers with a canned response."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error:
            raise self.error
        return self.response


def directions_payload(points=ROUTE, status="OK"):
    return {
        "status": status,
        "routes": [{
            "overview_polyline": {"points": encode(points)},
            "warnings": [],
            "legs": [{
                "distance": {"text": "634 km", "value": 634123},
                "duration": {"text": "6 hours 10 mins", "value": 22200},
                "start_address": "Sacramento, CA, USA",
                "end_address": "Grants Pass, OR, USA",
            }],
        }],
    }


@pytest.fixture
def route():
    return list(ROUTE)


@pytest.fixture
def fake_session():
    return FakeSession(FakeResponse(directions_payload()))
