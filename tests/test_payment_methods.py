import httpx
import pytest

from conftest import CARD_DECLINED, PAYMENT_METHOD, RecordingHandler, form_of
from stripe_payment_methods_client import errors
from stripe_payment_methods_client.api.payment_methods import (
    attach_a_payment_method,
    create_a_payment_method_with_card,
    detach_a_payment_method,
    retrieve_a_payment_method,
    update_a_payment_method_with_card,
)
from stripe_payment_methods_client.models import (
    AttachPaymentMethod,
    BillingDetails,
    CreatePaymentMethod,
    CreatePaymentMethodWithCard,
    PaymentCard,
    PaymentMethod,
    PaymentMethodTypeFilter,
    UpdatePaymentMethod,
    UpdatePaymentMethodWithCard,
)


def _card():
    return PaymentCard(exp_year=2034, exp_month=12, number="4242424242424242", cvc=314)


def _create_params(type_=PaymentMethodTypeFilter.SEPA_DEBIT):
    return CreatePaymentMethodWithCard(
        create_payment_method=CreatePaymentMethod(
            type_=type_,
            customer="cus_NffrFeUfNV2Hib",
            metadata={"order_id": "6735"},
        ),
        card=_card(),
    )


def _update_params():
    return UpdatePaymentMethodWithCard(
        update_payment_method=UpdatePaymentMethod(billing_details=BillingDetails(name="Jenny Rosen")),
        card=_card(),
    )


# Each entry calls one operation through its sync function.
OPERATIONS = {
    "attach": lambda client: attach_a_payment_method.sync(
        "pm_123", client=client, body=AttachPaymentMethod(customer="cus_123")
    ),
    "detach": lambda client: detach_a_payment_method.sync("pm_123", client=client),
    "create_with_card": lambda client: create_a_payment_method_with_card.sync(client=client, body=_create_params()),
    "update_with_card": lambda client: update_a_payment_method_with_card.sync(
        "pm_123", client=client, body=_update_params()
    ),
    "retrieve": lambda client: retrieve_a_payment_method.sync("pm_123", client=client),
}


def test_attach_posts_customer_to_attach_path(client, handler):
    attach_a_payment_method.sync("pm_123", client=client, body=AttachPaymentMethod(customer="cus_123"))

    request = handler.request
    assert request.method == "POST"
    assert request.url.path == "/v1/payment_methods/pm_123/attach"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert request.headers["Authorization"] == "Bearer sk_test_123"
    assert form_of(request) == [("customer", "cus_123")]


def test_detach_posts_without_body(client, handler):
    detach_a_payment_method.sync("pm_123", client=client)

    request = handler.request
    assert request.method == "POST"
    assert request.url.path == "/v1/payment_methods/pm_123/detach"
    assert request.content == b""


def test_create_with_card_forces_card_type(client, handler):
    params = _create_params(type_=PaymentMethodTypeFilter.SEPA_DEBIT)

    create_a_payment_method_with_card.sync(client=client, body=params)

    request = handler.request
    assert request.method == "POST"
    assert request.url.path == "/v1/payment_methods"
    assert dict(form_of(request))["type"] == "card"
    # the caller's params are left as they were
    assert params.create_payment_method.type_ is PaymentMethodTypeFilter.SEPA_DEBIT


def test_create_with_card_overrides_plain_string_type(client, handler):
    params = _create_params(type_="sepa_debit")

    create_a_payment_method_with_card.sync(client=client, body=params)

    assert dict(form_of(handler.request))["type"] == "card"
    assert params.create_payment_method.type_ == "sepa_debit"


def test_create_with_card_sets_type_when_unset(client, handler):
    create_a_payment_method_with_card.sync(
        client=client,
        body=CreatePaymentMethodWithCard(create_payment_method=CreatePaymentMethod(), card=_card()),
    )

    assert form_of(handler.request) == [
        ("type", "card"),
        ("exp_year", "2034"),
        ("exp_month", "12"),
        ("number", "4242424242424242"),
        ("cvc", "314"),
    ]


def test_create_with_card_sends_card_fields_as_siblings(client, handler):
    create_a_payment_method_with_card.sync(client=client, body=_create_params())

    form = dict(form_of(handler.request))
    assert form == {
        "type": "card",
        "customer": "cus_NffrFeUfNV2Hib",
        "metadata[order_id]": "6735",
        "exp_year": "2034",
        "exp_month": "12",
        "number": "4242424242424242",
        "cvc": "314",
    }
    assert not any(key.startswith("card") for key in form)


def test_update_with_card_posts_flat_body_without_type(client, handler):
    update_a_payment_method_with_card.sync("pm_123", client=client, body=_update_params())

    request = handler.request
    assert request.method == "POST"
    assert request.url.path == "/v1/payment_methods/pm_123"
    assert form_of(request) == [
        ("billing_details[name]", "Jenny Rosen"),
        ("exp_year", "2034"),
        ("exp_month", "12"),
        ("number", "4242424242424242"),
        ("cvc", "314"),
    ]


def test_retrieve_gets_payment_method(client, handler):
    retrieve_a_payment_method.sync("pm_123", client=client)

    request = handler.request
    assert request.method == "GET"
    assert request.url.path == "/v1/payment_methods/pm_123"


@pytest.mark.parametrize("operation", list(OPERATIONS.values()), ids=list(OPERATIONS))
def test_operation_returns_response_payment_method(operation, client, handler):
    result = operation(client)

    assert isinstance(result, PaymentMethod)
    assert result.to_dict() == PAYMENT_METHOD
    assert len(handler.requests) == 1


@pytest.mark.parametrize("operation", list(OPERATIONS.values()), ids=list(OPERATIONS))
def test_operation_raises_api_error(operation, make_client):
    handler = RecordingHandler(status_code=402, json=CARD_DECLINED, headers={"Request-Id": "req_1"})

    with pytest.raises(errors.ApiError) as excinfo:
        operation(make_client(handler))

    error = excinfo.value
    assert error.status_code == 402
    assert error.request_id == "req_1"
    assert error.error.to_dict() == CARD_DECLINED["error"]
    assert error.error.code == "card_declined"
    assert "insufficient funds" in str(error)


@pytest.mark.parametrize("operation", list(OPERATIONS.values()), ids=list(OPERATIONS))
def test_operation_propagates_transport_error(operation, make_client):
    failure = httpx.ConnectError("connection refused")
    handler = RecordingHandler(exc=failure)

    with pytest.raises(httpx.ConnectError) as excinfo:
        operation(make_client(handler))

    assert excinfo.value is failure


def test_api_error_without_error_body(make_client):
    handler = RecordingHandler(status_code=500, json={"detail": "boom"})

    with pytest.raises(errors.ApiError) as excinfo:
        detach_a_payment_method.sync("pm_123", client=make_client(handler))

    assert excinfo.value.status_code == 500
    assert excinfo.value.error.to_dict() == {}
    assert excinfo.value.request_id is None


def test_unexpected_status_raises_when_asked(make_client):
    handler = RecordingHandler(status_code=302, json={})

    with pytest.raises(errors.UnexpectedStatus) as excinfo:
        detach_a_payment_method.sync("pm_123", client=make_client(handler, raise_on_unexpected_status=True))

    assert excinfo.value.status_code == 302


def test_unexpected_status_parses_to_none_by_default(make_client):
    handler = RecordingHandler(status_code=302, json={})

    response = detach_a_payment_method.sync_detailed("pm_123", client=make_client(handler))

    assert response.status_code == 302
    assert response.parsed is None


def test_malformed_payment_method_is_not_swallowed(make_client):
    handler = RecordingHandler(json={"unexpected": True})

    with pytest.raises(KeyError):
        retrieve_a_payment_method.sync("pm_123", client=make_client(handler))


def test_sync_detailed_exposes_response(client):
    response = attach_a_payment_method.sync_detailed(
        "pm_123", client=client, body=AttachPaymentMethod(customer="cus_123")
    )

    assert response.status_code == 200
    assert response.parsed.id == "pm_1MqLiJLkdIwHu7ixUEgbFdYF"
    assert response.headers["content-type"] == "application/json"


@pytest.mark.asyncio
async def test_attach_asyncio(client, handler):
    result = await attach_a_payment_method.asyncio(
        "pm_123", client=client, body=AttachPaymentMethod(customer="cus_123")
    )

    assert result.to_dict() == PAYMENT_METHOD
    assert handler.request.url.path == "/v1/payment_methods/pm_123/attach"
    assert form_of(handler.request) == [("customer", "cus_123")]


@pytest.mark.asyncio
async def test_detach_asyncio(client, handler):
    result = await detach_a_payment_method.asyncio("pm_123", client=client)

    assert result.to_dict() == PAYMENT_METHOD
    assert handler.request.content == b""


@pytest.mark.asyncio
async def test_create_with_card_asyncio_detailed(client, handler):
    response = await create_a_payment_method_with_card.asyncio_detailed(client=client, body=_create_params())

    assert response.status_code == 200
    assert response.parsed.to_dict() == PAYMENT_METHOD
    assert dict(form_of(handler.request))["type"] == "card"


@pytest.mark.asyncio
async def test_update_with_card_asyncio(client, handler):
    await update_a_payment_method_with_card.asyncio("pm_123", client=client, body=_update_params())

    assert handler.request.url.path == "/v1/payment_methods/pm_123"
    assert "type" not in dict(form_of(handler.request))


@pytest.mark.asyncio
async def test_retrieve_asyncio_raises_api_error(make_client):
    handler = RecordingHandler(
        status_code=404,
        json={"error": {"type": "invalid_request_error", "code": "resource_missing"}},
    )

    with pytest.raises(errors.ApiError) as excinfo:
        await retrieve_a_payment_method.asyncio("pm_missing", client=make_client(handler))

    assert excinfo.value.status_code == 404
    assert excinfo.value.error.code == "resource_missing"
