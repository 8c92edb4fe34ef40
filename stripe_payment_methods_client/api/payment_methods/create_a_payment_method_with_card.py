import logging
from http import HTTPStatus
from typing import Any, Optional

import httpx

from ... import errors
from ...client import AuthenticatedClient
from ...encoding import encode_form
from ...models.create_payment_method_with_card import CreatePaymentMethodWithCard
from ...models.payment_method import PaymentMethod
from ...types import Response

logger = logging.getLogger(__name__)


def _get_kwargs(
    *,
    body: CreatePaymentMethodWithCard,
) -> dict[str, Any]:
    headers: dict[str, Any] = {}

    _kwargs: dict[str, Any] = {
        "method": "post",
        "url": "/payment_methods",
    }

    # card data always goes out as a card payment method, on a copy of the caller's params
    _body = encode_form(body.with_card_type().to_dict())

    _kwargs["data"] = _body
    headers["Content-Type"] = "application/x-www-form-urlencoded"

    _kwargs["headers"] = headers
    return _kwargs


def _parse_response(*, client: AuthenticatedClient, response: httpx.Response) -> Optional[PaymentMethod]:
    if response.status_code == 200:
        response_200 = PaymentMethod.from_dict(response.json())

        return response_200
    if 400 <= response.status_code < 600:
        error = errors.ApiError.from_response(response)
        logger.warning(
            "Create card payment method failed: status=%s type=%s request_id=%s",
            error.status_code,
            error.error.type_ or "unknown",
            error.request_id,
        )
        raise error
    if client.raise_on_unexpected_status:
        raise errors.UnexpectedStatus(response.status_code, response.content)
    else:
        return None


def _build_response(*, client: AuthenticatedClient, response: httpx.Response) -> Response[PaymentMethod]:
    return Response(
        status_code=HTTPStatus(response.status_code),
        content=response.content,
        headers=response.headers,
        parsed=_parse_response(client=client, response=response),
    )


def sync_detailed(
    *,
    client: AuthenticatedClient,
    body: CreatePaymentMethodWithCard,
) -> Response[PaymentMethod]:
    """PaymentMethods - Create with card

     Creates a card PaymentMethod from raw card data. The ``type`` of the outgoing request is always ``card``,
    whatever ``body.create_payment_method.type_`` holds; ``body`` itself is not modified.

    Args:
        body (CreatePaymentMethodWithCard):

    Raises:
        errors.ApiError: If the server answers with a 4xx or 5xx status.
        errors.UnexpectedStatus: If the server returns an undocumented status code and AuthenticatedClient.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than AuthenticatedClient.timeout.

    Returns:
        Response[PaymentMethod]
    """

    kwargs = _get_kwargs(
        body=body,
    )

    response = client.get_httpx_client().request(
        **kwargs,
    )

    return _build_response(client=client, response=response)


def sync(
    *,
    client: AuthenticatedClient,
    body: CreatePaymentMethodWithCard,
) -> Optional[PaymentMethod]:
    """PaymentMethods - Create with card

     Creates a card PaymentMethod from raw card data. The ``type`` of the outgoing request is always ``card``.

    Args:
        body (CreatePaymentMethodWithCard):

    Raises:
        errors.ApiError: If the server answers with a 4xx or 5xx status.
        errors.UnexpectedStatus: If the server returns an undocumented status code and AuthenticatedClient.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than AuthenticatedClient.timeout.

    Returns:
        PaymentMethod
    """

    return sync_detailed(
        client=client,
        body=body,
    ).parsed


async def asyncio_detailed(
    *,
    client: AuthenticatedClient,
    body: CreatePaymentMethodWithCard,
) -> Response[PaymentMethod]:
    """PaymentMethods - Create with card

     Creates a card PaymentMethod from raw card data. The ``type`` of the outgoing request is always ``card``.

    Args:
        body (CreatePaymentMethodWithCard):

    Raises:
        errors.ApiError: If the server answers with a 4xx or 5xx status.
        errors.UnexpectedStatus: If the server returns an undocumented status code and AuthenticatedClient.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than AuthenticatedClient.timeout.

    Returns:
        Response[PaymentMethod]
    """

    kwargs = _get_kwargs(
        body=body,
    )

    response = await client.get_async_httpx_client().request(**kwargs)

    return _build_response(client=client, response=response)


async def asyncio(
    *,
    client: AuthenticatedClient,
    body: CreatePaymentMethodWithCard,
) -> Optional[PaymentMethod]:
    """PaymentMethods - Create with card

     Creates a card PaymentMethod from raw card data. The ``type`` of the outgoing request is always ``card``.

    Args:
        body (CreatePaymentMethodWithCard):

    Raises:
        errors.ApiError: If the server answers with a 4xx or 5xx status.
        errors.UnexpectedStatus: If the server returns an undocumented status code and AuthenticatedClient.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than AuthenticatedClient.timeout.

    Returns:
        PaymentMethod
    """

    return (
        await asyncio_detailed(
            client=client,
            body=body,
        )
    ).parsed
