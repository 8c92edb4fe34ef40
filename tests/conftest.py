from urllib.parse import parse_qsl

import httpx
import pytest

from stripe_payment_methods_client import AuthenticatedClient

BASE_URL = "https://api.stripe.com/v1"

PAYMENT_METHOD = {
    "id": "pm_1MqLiJLkdIwHu7ixUEgbFdYF",
    "object": "payment_method",
    "billing_details": {
        "address": {
            "city": None,
            "country": None,
            "line1": None,
            "line2": None,
            "postal_code": None,
            "state": None,
        },
        "email": None,
        "name": None,
        "phone": None,
    },
    "card": {
        "brand": "visa",
        "checks": {"address_line1_check": None, "address_postal_code_check": None, "cvc_check": "pass"},
        "country": "US",
        "exp_month": 8,
        "exp_year": 2026,
        "fingerprint": "mToisGZ01V71BCos",
        "funding": "credit",
        "generated_from": None,
        "last4": "4242",
        "networks": {"available": ["visa"], "preferred": None},
        "three_d_secure_usage": {"supported": True},
        "wallet": None,
    },
    "created": 1679945299,
    "customer": "cus_NffrFeUfNV2Hib",
    "livemode": False,
    "metadata": {},
    "type": "card",
}

CARD_DECLINED = {
    "error": {
        "code": "card_declined",
        "decline_code": "insufficient_funds",
        "doc_url": "https://stripe.com/docs/error-codes/card-declined",
        "message": "Your card has insufficient funds.",
        "type": "card_error",
    }
}


class RecordingHandler:
    """Answers every request the same way and keeps the requests it saw."""

    def __init__(self, status_code=200, json=None, exc=None, headers=None):
        self.status_code = status_code
        self.json = PAYMENT_METHOD if json is None else json
        self.exc = exc
        self.headers = headers or {}
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, json=self.json, headers=self.headers, request=request)

    @property
    def request(self):
        assert len(self.requests) == 1
        return self.requests[0]


def form_of(request):
    return parse_qsl(request.content.decode(), keep_blank_values=True)


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def make_client():
    def _make_client(handler, **kwargs):
        return AuthenticatedClient(
            base_url=BASE_URL,
            token="sk_test_123",
            httpx_args={"transport": httpx.MockTransport(handler)},
            **kwargs,
        )

    return _make_client


@pytest.fixture
def client(make_client, handler):
    return make_client(handler)
