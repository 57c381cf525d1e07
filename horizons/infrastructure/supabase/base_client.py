"""Shared HTTP handling for the Supabase adapters.

Handles what both the GoTrue (auth) and PostgREST (profiles) adapters need:
- service-role authentication headers
- timeout / connection error handling (transient failures)
- status code interpretation (5xx transient, 4xx rejected)
- JSON parsing with error handling

Subclasses only decide which domain error type a failure becomes.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

import httpx

from horizons.core.constants import HTTP_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from horizons.core.errors import DomainError
from horizons.core.result import Failure, Result, Success
from horizons.domain.protocols import LoggerProtocol


E = TypeVar("E", bound=DomainError)


class SupabaseBaseClient(ABC, Generic[E]):
    """Base class for Supabase HTTP adapters.

    Attributes:
        _base_url: Supabase project URL (without trailing slash).
        _service_role_key: Key sent as ``apikey`` and default bearer.
        _timeout: HTTP request timeout in seconds.
        _logger: Structured logger.
    """

    service_name: str = "supabase"

    def __init__(
        self,
        *,
        base_url: str,
        service_role_key: str,
        logger: LoggerProtocol,
        timeout: float = HTTP_TIMEOUT_DEFAULT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._service_role_key = service_role_key
        self._timeout = timeout
        self._logger = logger

    @abstractmethod
    def _make_error(
        self,
        *,
        message: str,
        status_code: int | None = None,
        is_transient: bool = False,
    ) -> E:
        """Build the adapter's domain error for a failed call."""

    def _headers(
        self,
        *,
        access_token: str | None = None,
        extra: dict[str, str] | None = None,
    ) -> dict[str, str]:
        headers = {
            "apikey": self._service_role_key,
            "Authorization": f"Bearer {access_token or self._service_role_key}",
            "Content-Type": "application/json",
        }
        if extra:
            headers.update(extra)
        return headers

    async def _request(
        self,
        *,
        method: str,
        path: str,
        operation: str,
        params: dict[str, str] | None = None,
        json_data: dict[str, Any] | None = None,
        access_token: str | None = None,
        extra_headers: dict[str, str] | None = None,
    ) -> Result[httpx.Response, E]:
        """Execute an HTTP request.

        Returns:
            Success(httpx.Response) for any answer (status checked by caller).
            Failure(E) with ``is_transient=True`` on timeout or connection error.
        """
        url = f"{self._base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=self._headers(access_token=access_token, extra=extra_headers),
                    params=params,
                    json=json_data,
                )
        except httpx.TimeoutException as e:
            self._logger.warning(
                f"{self.service_name}_timeout", operation=operation, error_message=str(e)
            )
            return Failure(
                error=self._make_error(
                    message=f"{self.service_name} request timed out",
                    is_transient=True,
                )
            )
        except httpx.RequestError as e:
            self._logger.warning(
                f"{self.service_name}_connection_error",
                operation=operation,
                error_message=str(e),
            )
            return Failure(
                error=self._make_error(
                    message=f"Failed to connect to {self.service_name}",
                    is_transient=True,
                )
            )
        return Success(value=response)

    def _check_status(self, response: httpx.Response, operation: str) -> Failure[E] | None:
        """Return a Failure for non-2xx answers, None otherwise."""
        status = response.status_code
        if 200 <= status < 300:
            return None

        self._logger.warning(
            f"{self.service_name}_error_status",
            operation=operation,
            status_code=status,
            response=response.text[:RESPONSE_BODY_MAX_LENGTH],
        )
        if status >= 500:
            return Failure(
                error=self._make_error(
                    message=f"{self.service_name} server error: {status}",
                    status_code=status,
                    is_transient=True,
                )
            )
        return Failure(
            error=self._make_error(
                message=_upstream_message(response) or f"{self.service_name} rejected the request",
                status_code=status,
            )
        )

    def _parse_json(self, response: httpx.Response, operation: str) -> Result[Any, E]:
        """Check the status, then parse the JSON body."""
        error_result = self._check_status(response, operation)
        if error_result is not None:
            return error_result
        try:
            return Success(value=response.json())
        except ValueError as e:
            self._logger.error(
                f"{self.service_name}_invalid_json", operation=operation, error=e
            )
            return Failure(
                error=self._make_error(
                    message=f"Invalid JSON response from {self.service_name}",
                    status_code=response.status_code,
                )
            )


def _upstream_message(response: httpx.Response) -> str | None:
    """Pull the human message out of a GoTrue/PostgREST error body."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    for key in ("msg", "message", "error_description", "error"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value[:RESPONSE_BODY_MAX_LENGTH]
    return None
