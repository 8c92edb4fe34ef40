import logging
from unittest.mock import MagicMock, patch

import httpx
import pytest

from conftest import CARD_DECLINED, PAYMENT_METHOD, RecordingHandler
from stripe_payment_methods_client import AuthenticatedClient, errors
from stripe_payment_methods_client.api import API
from stripe_payment_methods_client.api.payment_methods import create_a_payment_method_with_card
from stripe_payment_methods_client.client import DEFAULT_BASE_URL
from stripe_payment_methods_client.models import (
    AttachPaymentMethod,
    CreatePaymentMethod,
    CreatePaymentMethodWithCard,
    PaymentCard,
)


def test_from_env_reads_configuration(monkeypatch):
    monkeypatch.setenv("STRIPE_API_KEY", "sk_test_env")
    monkeypatch.setenv("STRIPE_API_BASE", "http://localhost:12111/v1")
    monkeypatch.setenv("STRIPE_API_VERSION", "2024-06-20")
    monkeypatch.setenv("STRIPE_TIMEOUT", "7.5")

    client = AuthenticatedClient.from_env()
    httpx_client = client.get_httpx_client()

    assert str(httpx_client.base_url) == "http://localhost:12111/v1/"
    assert httpx_client.headers["Authorization"] == "Bearer sk_test_env"
    assert httpx_client.headers["Stripe-Version"] == "2024-06-20"
    assert httpx_client.timeout.read == 7.5


def test_from_env_defaults(monkeypatch):
    monkeypatch.setenv("STRIPE_API_KEY", "sk_test_env")
    monkeypatch.delenv("STRIPE_API_BASE", raising=False)
    monkeypatch.delenv("STRIPE_API_VERSION", raising=False)
    monkeypatch.delenv("STRIPE_TIMEOUT", raising=False)

    httpx_client = AuthenticatedClient.from_env().get_httpx_client()

    assert str(httpx_client.base_url) == DEFAULT_BASE_URL + "/"
    assert "Stripe-Version" not in httpx_client.headers


def test_from_env_requires_api_key(monkeypatch):
    monkeypatch.delenv("STRIPE_API_KEY", raising=False)

    with pytest.raises(ValueError, match="STRIPE_API_KEY"):
        AuthenticatedClient.from_env()


def test_from_env_keyword_arguments_win(monkeypatch):
    monkeypatch.setenv("STRIPE_API_KEY", "sk_test_env")

    client = AuthenticatedClient.from_env(token="sk_test_override", raise_on_unexpected_status=True)

    assert client.token == "sk_test_override"
    assert client.raise_on_unexpected_status is True


def test_token_is_not_in_repr():
    client = AuthenticatedClient(base_url=DEFAULT_BASE_URL, token="sk_test_secret")

    assert "sk_test_secret" not in repr(client)


def test_with_headers_reaches_requests(make_client):
    handler = RecordingHandler()
    client = make_client(handler).with_headers({"Stripe-Account": "acct_123"})

    API(client).payment_methods.detach("pm_123")

    assert handler.request.headers["Stripe-Account"] == "acct_123"


def test_user_event_hooks_are_kept():
    handler = RecordingHandler()
    seen = []
    client = AuthenticatedClient(
        base_url=DEFAULT_BASE_URL,
        token="sk_test_123",
        httpx_args={
            "transport": httpx.MockTransport(handler),
            "event_hooks": {"response": [lambda response: seen.append(response.status_code)]},
        },
    )

    API(client).payment_methods.retrieve("pm_123")

    assert seen == [200]


def test_request_bodies_are_not_logged(client, caplog):
    caplog.set_level(logging.DEBUG, logger="stripe_payment_methods_client")

    create_a_payment_method_with_card.sync(
        client=client,
        body=CreatePaymentMethodWithCard(
            create_payment_method=CreatePaymentMethod(),
            card=PaymentCard(exp_year=2034, exp_month=12, number="4242424242424242", cvc=314),
        ),
    )

    assert "/v1/payment_methods" in caplog.text
    assert "4242424242424242" not in caplog.text
    assert "sk_test_123" not in caplog.text


def test_api_errors_are_logged(make_client, caplog):
    handler = RecordingHandler(status_code=402, json=CARD_DECLINED, headers={"Request-Id": "req_42"})

    with pytest.raises(errors.ApiError):
        API(make_client(handler)).payment_methods.detach("pm_123")

    assert "status=402" in caplog.text
    assert "type=card_error" in caplog.text
    assert "req_42" in caplog.text


@patch("stripe_payment_methods_client.api.payment_methods.attach_a_payment_method.sync")
def test_api_facade_delegates_attach(mock_sync):
    mock_sync.return_value = MagicMock(id="pm_123")
    client = MagicMock()
    params = AttachPaymentMethod(customer="cus_123")

    result = API(client).payment_methods.attach("pm_123", params)

    mock_sync.assert_called_once_with("pm_123", client=client, body=params)
    assert result.id == "pm_123"


def test_api_facade_returns_payment_method(client):
    result = API(client).payment_methods.create_with_card(
        CreatePaymentMethodWithCard(
            create_payment_method=CreatePaymentMethod(),
            card=PaymentCard(exp_year=2034, exp_month=12, number="4242424242424242", cvc=314),
        )
    )

    assert result.to_dict() == PAYMENT_METHOD


def test_with_cookies_reaches_requests(make_client):
    handler = RecordingHandler()
    client = make_client(handler).with_cookies({"session": "abc"})

    API(client).payment_methods.retrieve("pm_123")

    assert "session=abc" in handler.request.headers["Cookie"]


def test_with_timeout_returns_configured_copy(client):
    timeout = httpx.Timeout(3.0)

    configured = client.with_timeout(timeout)

    assert configured is not client
    assert configured.get_httpx_client().timeout == timeout
    assert configured.get_async_httpx_client().timeout == timeout


def test_with_timeout_updates_built_transport(client):
    httpx_client = client.get_httpx_client()

    client.with_timeout(httpx.Timeout(3.0))

    assert httpx_client.timeout.read == 3.0


def test_set_httpx_client_is_used_by_operations():
    handler = RecordingHandler()
    client = AuthenticatedClient(base_url=DEFAULT_BASE_URL, token="sk_test_123")
    httpx_client = httpx.Client(base_url="http://localhost:12111/v1", transport=httpx.MockTransport(handler))

    assert client.set_httpx_client(httpx_client) is client
    API(client).payment_methods.detach("pm_123")

    assert client.get_httpx_client() is httpx_client
    assert handler.request.url.host == "localhost"
    assert handler.request.url.path == "/v1/payment_methods/pm_123/detach"


@pytest.mark.asyncio
async def test_set_async_httpx_client_is_used_by_operations():
    handler = RecordingHandler()
    client = AuthenticatedClient(base_url=DEFAULT_BASE_URL, token="sk_test_123")
    async_client = httpx.AsyncClient(base_url="http://localhost:12111/v1", transport=httpx.MockTransport(handler))
    client.set_async_httpx_client(async_client)

    async with client:
        result = await create_a_payment_method_with_card.asyncio(
            client=client,
            body=CreatePaymentMethodWithCard(
                create_payment_method=CreatePaymentMethod(),
                card=PaymentCard(exp_year=2034, exp_month=12, number="4242424242424242", cvc=314),
            ),
        )

    assert result.id == PAYMENT_METHOD["id"]
    assert handler.request.url.host == "localhost"
    assert async_client.is_closed


def test_context_manager_closes_transport(make_client):
    handler = RecordingHandler()

    with make_client(handler) as client:
        API(client).payment_methods.retrieve("pm_123")

    assert client.get_httpx_client().is_closed
    assert handler.request.method == "GET"


@pytest.mark.asyncio
async def test_async_context_manager_closes_transport(make_client):
    handler = RecordingHandler()

    async with make_client(handler) as client:
        await create_a_payment_method_with_card.asyncio(
            client=client,
            body=CreatePaymentMethodWithCard(
                create_payment_method=CreatePaymentMethod(),
                card=PaymentCard(exp_year=2034, exp_month=12, number="4242424242424242", cvc=314),
            ),
        )

    assert client.get_async_httpx_client().is_closed
    assert handler.request.url.path == "/v1/payment_methods"
