import logging
import os
import ssl
from typing import Any, Optional, Union

import httpx
from attrs import define, evolve, field

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.stripe.com/v1"


def _log_request(request: httpx.Request) -> None:
    logger.debug("Request: %s %s", request.method, request.url)


def _log_response(response: httpx.Response) -> None:
    logger.debug("Response: %s %s -> %s", response.request.method, response.request.url, response.status_code)


async def _log_request_async(request: httpx.Request) -> None:
    _log_request(request)


async def _log_response_async(response: httpx.Response) -> None:
    _log_response(response)


def _with_event_hooks(httpx_args: dict[str, Any], request_hook: Any, response_hook: Any) -> dict[str, Any]:
    # only method, url and status are logged, never bodies or headers
    hooks = httpx_args.get("event_hooks", {})
    args = {key: value for key, value in httpx_args.items() if key != "event_hooks"}
    args["event_hooks"] = {
        "request": [request_hook, *hooks.get("request", [])],
        "response": [response_hook, *hooks.get("response", [])],
    }
    return args


@define
class AuthenticatedClient:
    """A Client which has been authenticated for use on secured endpoints

    The following are accepted as keyword arguments and will be used to construct httpx Clients internally:

        ``base_url``: The base URL for the API, all requests are made to a relative path to this URL

        ``cookies``: A dictionary of cookies to be sent with every request

        ``headers``: A dictionary of headers to be sent with every request

        ``timeout``: The maximum amount of a time a request can take. API functions will raise
        httpx.TimeoutException if this is exceeded.

        ``verify_ssl``: Whether or not to verify the SSL certificate of the API server. This should be True in production,
        but can be set to False for testing purposes.

        ``follow_redirects``: Whether or not to follow redirects. Default value is False.

        ``httpx_args``: A dictionary of additional arguments to be passed to the ``httpx.Client`` and ``httpx.AsyncClient`` constructor.


    Attributes:
        raise_on_unexpected_status: Whether or not to raise an errors.UnexpectedStatus if the API returns a
            status code the endpoint does not handle (anything but 200, 4xx and 5xx). Can also be provided as a keyword
            argument to the constructor.
        token: The secret API key used for authentication
        prefix: The prefix used for the token. Defaults to "Bearer"
        auth_header_name: The name of the Authorization header
    """

    raise_on_unexpected_status: bool = field(default=False, kw_only=True)
    _base_url: str = field(alias="base_url")
    _cookies: dict[str, str] = field(factory=dict, kw_only=True, alias="cookies")
    _headers: dict[str, str] = field(factory=dict, kw_only=True, alias="headers")
    _timeout: Optional[httpx.Timeout] = field(default=None, kw_only=True, alias="timeout")
    _verify_ssl: Union[str, bool, ssl.SSLContext] = field(default=True, kw_only=True, alias="verify_ssl")
    _follow_redirects: bool = field(default=False, kw_only=True, alias="follow_redirects")
    _httpx_args: dict[str, Any] = field(factory=dict, kw_only=True, alias="httpx_args")
    _client: Optional[httpx.Client] = field(default=None, init=False)
    _async_client: Optional[httpx.AsyncClient] = field(default=None, init=False)

    token: str = field(repr=False)
    prefix: str = "Bearer"
    auth_header_name: str = "Authorization"

    @classmethod
    def from_env(cls, **kwargs: Any) -> "AuthenticatedClient":
        """Build a client from the environment.

        Reads ``STRIPE_API_KEY`` (required), ``STRIPE_API_BASE``, ``STRIPE_API_VERSION`` and ``STRIPE_TIMEOUT``
        (seconds). Keyword arguments are passed through to the constructor and win over the environment.
        """
        token = os.getenv("STRIPE_API_KEY")
        if not token:
            raise ValueError("STRIPE_API_KEY is not set")

        headers: dict[str, str] = {}
        api_version = os.getenv("STRIPE_API_VERSION")
        if api_version:
            headers["Stripe-Version"] = api_version

        options: dict[str, Any] = {
            "base_url": os.getenv("STRIPE_API_BASE", DEFAULT_BASE_URL),
            "token": token,
            "headers": headers,
        }
        timeout = os.getenv("STRIPE_TIMEOUT")
        if timeout:
            options["timeout"] = httpx.Timeout(float(timeout))

        options.update(kwargs)
        logger.debug("Configured client for %s", options["base_url"])
        return cls(**options)

    def with_headers(self, headers: dict[str, str]) -> "AuthenticatedClient":
        """Get a new client matching this one with additional headers"""
        if self._client is not None:
            self._client.headers.update(headers)
        if self._async_client is not None:
            self._async_client.headers.update(headers)
        return evolve(self, headers={**self._headers, **headers})

    def with_cookies(self, cookies: dict[str, str]) -> "AuthenticatedClient":
        """Get a new client matching this one with additional cookies"""
        if self._client is not None:
            self._client.cookies.update(cookies)
        if self._async_client is not None:
            self._async_client.cookies.update(cookies)
        return evolve(self, cookies={**self._cookies, **cookies})

    def with_timeout(self, timeout: httpx.Timeout) -> "AuthenticatedClient":
        """Get a new client matching this one with a new timeout (in seconds)"""
        if self._client is not None:
            self._client.timeout = timeout
        if self._async_client is not None:
            self._async_client.timeout = timeout
        return evolve(self, timeout=timeout)

    def set_httpx_client(self, client: httpx.Client) -> "AuthenticatedClient":
        """Manually set the underlying httpx.Client

        **NOTE**: This will override any other settings on the client, including cookies, headers, and timeout.
        """
        self._client = client
        return self

    def get_httpx_client(self) -> httpx.Client:
        """Get the underlying httpx.Client, constructing a new one if not previously set"""
        if self._client is None:
            self._headers[self.auth_header_name] = f"{self.prefix} {self.token}" if self.prefix else self.token
            self._client = httpx.Client(
                base_url=self._base_url,
                cookies=self._cookies,
                headers=self._headers,
                timeout=self._timeout,
                verify=self._verify_ssl,
                follow_redirects=self._follow_redirects,
                **_with_event_hooks(self._httpx_args, _log_request, _log_response),
            )
        return self._client

    def __enter__(self) -> "AuthenticatedClient":
        """Enter a context manager for self.client, you cannot enter twice (see httpx docs)"""
        self.get_httpx_client().__enter__()
        return self

    def __exit__(self, *args: Any, **kwargs: Any) -> None:
        """Exit a context manager for internal httpx.Client (see httpx docs)"""
        self.get_httpx_client().__exit__(*args, **kwargs)

    def set_async_httpx_client(self, async_client: httpx.AsyncClient) -> "AuthenticatedClient":
        """Manually the underlying httpx.AsyncClient

        **NOTE**: This will override any other settings on the client, including cookies, headers, and timeout.
        """
        self._async_client = async_client
        return self

    def get_async_httpx_client(self) -> httpx.AsyncClient:
        """Get the underlying httpx.AsyncClient, constructing a new one if not previously set"""
        if self._async_client is None:
            self._headers[self.auth_header_name] = f"{self.prefix} {self.token}" if self.prefix else self.token
            self._async_client = httpx.AsyncClient(
                base_url=self._base_url,
                cookies=self._cookies,
                headers=self._headers,
                timeout=self._timeout,
                verify=self._verify_ssl,
                follow_redirects=self._follow_redirects,
                **_with_event_hooks(self._httpx_args, _log_request_async, _log_response_async),
            )
        return self._async_client

    async def __aenter__(self) -> "AuthenticatedClient":
        """Enter a context manager for underlying httpx.AsyncClient, you cannot enter twice (see httpx docs)"""
        await self.get_async_httpx_client().__aenter__()
        return self

    async def __aexit__(self, *args: Any, **kwargs: Any) -> None:
        """Exit a context manager for underlying httpx.AsyncClient (see httpx docs)"""
        await self.get_async_httpx_client().__aexit__(*args, **kwargs)
