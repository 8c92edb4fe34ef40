import logging
from http import HTTPStatus
from typing import Any, Optional

import httpx

from ... import errors
from ...client import AuthenticatedClient
from ...models.payment_method import PaymentMethod
from ...types import Response

logger = logging.getLogger(__name__)


def _get_kwargs(
    payment_method_id: str,
) -> dict[str, Any]:
    _kwargs: dict[str, Any] = {
        "method": "get",
        "url": f"/payment_methods/{payment_method_id}",
    }

    return _kwargs


def _parse_response(*, client: AuthenticatedClient, response: httpx.Response) -> Optional[PaymentMethod]:
    if response.status_code == 200:
        response_200 = PaymentMethod.from_dict(response.json())

        return response_200
    if 400 <= response.status_code < 600:
        error = errors.ApiError.from_response(response)
        logger.warning(
            "Retrieve payment method failed: status=%s type=%s request_id=%s",
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
    payment_method_id: str,
    *,
    client: AuthenticatedClient,
) -> Response[PaymentMethod]:
    """PaymentMethods - Retrieve

     Retrieves a PaymentMethod object attached to the account.

    Args:
        payment_method_id (str):

    Raises:
        errors.ApiError: If the server answers with a 4xx or 5xx status.
        errors.UnexpectedStatus: If the server returns an undocumented status code and AuthenticatedClient.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than AuthenticatedClient.timeout.

    Returns:
        Response[PaymentMethod]
    """

    kwargs = _get_kwargs(
        payment_method_id=payment_method_id,
    )

    response = client.get_httpx_client().request(
        **kwargs,
    )

    return _build_response(client=client, response=response)


def sync(
    payment_method_id: str,
    *,
    client: AuthenticatedClient,
) -> Optional[PaymentMethod]:
    """PaymentMethods - Retrieve

     Retrieves a PaymentMethod object attached to the account.

    Args:
        payment_method_id (str):

    Raises:
        errors.ApiError: If the server answers with a 4xx or 5xx status.
        errors.UnexpectedStatus: If the server returns an undocumented status code and AuthenticatedClient.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than AuthenticatedClient.timeout.

    Returns:
        PaymentMethod
    """

    return sync_detailed(
        payment_method_id=payment_method_id,
        client=client,
    ).parsed


async def asyncio_detailed(
    payment_method_id: str,
    *,
    client: AuthenticatedClient,
) -> Response[PaymentMethod]:
    """PaymentMethods - Retrieve

     Retrieves a PaymentMethod object attached to the account.

    Args:
        payment_method_id (str):

    Raises:
        errors.ApiError: If the server answers with a 4xx or 5xx status.
        errors.UnexpectedStatus: If the server returns an undocumented status code and AuthenticatedClient.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than AuthenticatedClient.timeout.

    Returns:
        Response[PaymentMethod]
    """

    kwargs = _get_kwargs(
        payment_method_id=payment_method_id,
    )

    response = await client.get_async_httpx_client().request(**kwargs)

    return _build_response(client=client, response=response)


async def asyncio(
    payment_method_id: str,
    *,
    client: AuthenticatedClient,
) -> Optional[PaymentMethod]:
    """PaymentMethods - Retrieve

     Retrieves a PaymentMethod object attached to the account.

    Args:
        payment_method_id (str):

    Raises:
        errors.ApiError: If the server answers with a 4xx or 5xx status.
        errors.UnexpectedStatus: If the server returns an undocumented status code and AuthenticatedClient.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than AuthenticatedClient.timeout.

    Returns:
        PaymentMethod
    """

    return (
        await asyncio_detailed(
            payment_method_id=payment_method_id,
            client=client,
        )
    ).parsed
