"""Contains shared errors types that can be raised from API functions"""

from typing import Optional

import httpx

from .models.api_error_detail import ApiErrorDetail


class UnexpectedStatus(Exception):
    """Raised by api functions when the response status an undocumented status and AuthenticatedClient.raise_on_unexpected_status is True"""

    def __init__(self, status_code: int, content: bytes):
        self.status_code = status_code
        self.content = content

        super().__init__(
            f"Unexpected status code: {status_code}\n\nResponse content:\n{content.decode(errors='ignore')}"
        )


class ApiError(Exception):
    """Raised by api functions when the API answers with a 4xx or 5xx status.

    Attributes:
        status_code (int): HTTP status of the response.
        content (bytes): Raw response body.
        error (ApiErrorDetail): The ``error`` object of the response body. All of its fields are unset when the
            body does not carry one.
        request_id (Optional[str]): Value of the ``Request-Id`` response header, if any.
    """

    def __init__(
        self,
        status_code: int,
        content: bytes,
        error: ApiErrorDetail,
        request_id: Optional[str] = None,
    ):
        self.status_code = status_code
        self.content = content
        self.error = error
        self.request_id = request_id

        message = error.message or content.decode(errors="ignore")
        super().__init__(f"API error {status_code}: {message}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            error = ApiErrorDetail.from_dict(body["error"])
        else:
            error = ApiErrorDetail()

        return cls(
            status_code=response.status_code,
            content=response.content,
            error=error,
            request_id=response.headers.get("Request-Id"),
        )


__all__ = ["ApiError", "UnexpectedStatus"]
