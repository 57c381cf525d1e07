"""HTTP mail transport for a ZeptoMail-style transactional API.

Failure classification:
    - Timeout while waiting for the answer: ambiguous (may have been sent)
    - Connection refused / DNS / TLS failure: confirmed (nothing was sent)
    - Non-2xx answer: confirmed
"""

import httpx

from horizons.core.constants import HTTP_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from horizons.core.enums import ErrorCode
from horizons.core.result import Failure, Result, Success
from horizons.domain.errors import EmailDeliveryError
from horizons.domain.protocols import EmailReceipt, LoggerProtocol
from horizons.domain.validators import mask_email

_TOKEN_SCHEME = "Zoho-enczapikey "


class HttpEmailTransport:
    """Posts rendered messages to the mail API with httpx."""

    def __init__(
        self,
        *,
        api_url: str,
        api_token: str,
        from_address: str,
        from_name: str,
        logger: LoggerProtocol,
        timeout: float = HTTP_TIMEOUT_DEFAULT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_url = api_url
        self._api_token = api_token
        self._from_address = from_address
        self._from_name = from_name
        self._logger = logger
        self._timeout = timeout
        self._client = client

    def _headers(self) -> dict[str, str]:
        token = self._api_token
        if not token.startswith(_TOKEN_SCHEME):
            token = f"{_TOKEN_SCHEME}{token}"
        return {"Authorization": token, "Content-Type": "application/json"}

    async def _post(self, payload: dict) -> httpx.Response:
        if self._client is not None:
            return await self._client.post(self._api_url, json=payload, headers=self._headers())
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.post(self._api_url, json=payload, headers=self._headers())

    async def send(
        self, *, to_email: str, subject: str, html_body: str
    ) -> Result[EmailReceipt, EmailDeliveryError]:
        if not self._api_token:
            self._logger.error("email_send_failed", reason="token_not_configured")
            return Failure(
                error=EmailDeliveryError(
                    code=ErrorCode.EMAIL_DELIVERY_FAILED,
                    message="Mail transport is not configured",
                )
            )

        payload = {
            "from": {"address": self._from_address, "name": self._from_name},
            "to": [{"email_address": {"address": to_email}}],
            "subject": subject,
            "htmlbody": html_body,
        }

        try:
            response = await self._post(payload)
        except httpx.TimeoutException as e:
            self._logger.warning(
                "email_send_timeout", to_email=mask_email(to_email), error_message=str(e)
            )
            return Failure(
                error=EmailDeliveryError(
                    code=ErrorCode.EMAIL_DELIVERY_FAILED,
                    message="Mail provider did not answer in time",
                    is_ambiguous=True,
                )
            )
        except httpx.RequestError as e:
            self._logger.error(
                "email_send_error", to_email=mask_email(to_email), error=e
            )
            return Failure(
                error=EmailDeliveryError(
                    code=ErrorCode.EMAIL_DELIVERY_FAILED,
                    message="Mail provider unreachable",
                    details={"error": str(e), "type": type(e).__name__},
                )
            )

        if response.status_code not in (200, 201, 202):
            self._logger.error(
                "email_send_rejected",
                to_email=mask_email(to_email),
                status_code=response.status_code,
                response=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
            return Failure(
                error=EmailDeliveryError(
                    code=ErrorCode.EMAIL_DELIVERY_FAILED,
                    message="Mail provider rejected the message",
                    details={"status_code": response.status_code},
                )
            )

        message_id = _extract_message_id(response)
        self._logger.info(
            "email_sent", to_email=mask_email(to_email), subject=subject, message_id=message_id
        )
        return Success(
            value=EmailReceipt(to_email=to_email, subject=subject, provider_message_id=message_id)
        )


def _extract_message_id(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        request_id = body.get("request_id")
        return str(request_id) if request_id else None
    return None
